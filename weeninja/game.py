"""Game state: spawning, moving, picking and splitting fruit."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field

from weeninja.fruit import Fruit, FruitType

MAX_FRUIT = 1024
GRAVITY = 8.0
FLOOR = -10.0
Z_PLANE = -20.0
SPAWN_OMEGA = 0.3
SPLIT_SPEED = 8.0


@dataclass(frozen=True)
class Ray:
    """A ray in world space."""

    position: tuple[float, float, float]
    direction: tuple[float, float, float]


class GameFullError(RuntimeError):
    """Raised when no more fruit fit in the game."""


@dataclass
class GameState:
    """All fruit in play."""

    fruit: list[Fruit] = field(default_factory=list)
    max_fruit: int = MAX_FRUIT

    def _add(self, fruit: Fruit) -> Fruit:
        if len(self.fruit) >= self.max_fruit:
            raise GameFullError(f"at most {self.max_fruit} fruit can be in play")
        self.fruit.append(fruit)
        return fruit

    def spawn_fruit(
        self, fruit_type: FruitType | int, rng: random.Random | None = None
    ) -> Fruit:
        """Throw a new fruit up from below the screen."""
        rng = rng or random
        xvel = 2.0 * rng.random() - 0.5
        yvel = rng.random() + 0.5
        xpos = 2.0 * rng.random() - 0.5
        return self._add(
            Fruit(
                type=FruitType(fruit_type),
                position=(8.0 * xpos, FLOOR),
                velocity=(xvel, yvel * 14.0),
                theta=0.0,
                omega=SPAWN_OMEGA,
            )
        )

    def kill_fruit(self, fruit: Fruit) -> None:
        """Take a fruit out of play."""
        fruit.alive = False

    def update(self, dt: float) -> None:
        """Advance every live fruit by dt seconds."""
        for fruit in self.alive_fruit():
            x, y = fruit.position
            vx, vy = fruit.velocity
            fruit.position = (x + vx * dt, y + vy * dt)
            fruit.velocity = (vx, vy - GRAVITY * dt)
            fruit.theta += fruit.omega * dt
            if fruit.position[1] < FLOOR:
                fruit.alive = False

    def fruit_pick(self, ray: Ray) -> None:
        """Split every fruit the ray passes within unit distance of."""
        (px, py, pz), (dx, dy, dz) = ray.position, ray.direction
        if dz == 0:
            return
        t = (Z_PLANE - pz) / dz
        hit_x, hit_y = px + dx * t, py + dy * t
        # Halves appended while splitting are visited by this same loop.
        for fruit in self.fruit:
            fx, fy = fruit.position
            if (hit_x - fx) ** 2 + (hit_y - fy) ** 2 < 1:
                self.split_fruit(fruit)

    def split_fruit(self, fruit: Fruit) -> tuple[Fruit, ...]:
        """Kill a fruit and, if it can be cut, add its two halves."""
        fruit.alive = False
        half = FruitType(fruit.type).half()
        if half is None:
            return ()
        if len(self.fruit) + 2 > self.max_fruit:
            raise GameFullError(f"at most {self.max_fruit} fruit can be in play")
        return tuple(
            self._add(
                Fruit(
                    type=half,
                    position=fruit.position,
                    velocity=(speed, 0.0),
                    theta=0.0,
                    omega=0.0,
                )
            )
            for speed in (-SPLIT_SPEED, SPLIT_SPEED)
        )

    def alive_fruit(self) -> Iterator[Fruit]:
        """Yield the fruit still in play."""
        return (fruit for fruit in self.fruit if fruit.alive)