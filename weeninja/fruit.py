"""Fruit kinds and the state of a single piece of fruit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class FruitType(IntEnum):
    """Every kind of fruit the game knows, whole or cut."""

    APPLE = 0
    ORANGE = 1
    KIWIFRUIT = 2
    PINEAPPLE = 3
    APPLE_HALF = 4
    ORANGE_HALF = 5
    KIWIFRUIT_HALF = 6
    PINEAPPLE_HALF_TOP = 7
    PINEAPPLE_HALF_BOTTOM = 8

    def half(self) -> FruitType | None:
        """Return the kind a whole fruit splits into, or None if it cannot split."""
        return _HALVES.get(self)


_HALVES = {
    FruitType.APPLE: FruitType.APPLE_HALF,
    FruitType.PINEAPPLE: FruitType.PINEAPPLE_HALF_TOP,
    FruitType.KIWIFRUIT: FruitType.KIWIFRUIT_HALF,
    FruitType.ORANGE: FruitType.ORANGE_HALF,
}


@dataclass
class Fruit:
    """A piece of fruit moving in the play plane."""

    type: FruitType
    position: tuple[float, float] = (0.0, 0.0)
    velocity: tuple[float, float] = (0.0, 0.0)
    theta: float = 0.0
    omega: float = 0.0
    alive: bool = True