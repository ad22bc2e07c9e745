"""The game window: camera, rendering and the main loop."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pygame

from weeninja.controls import BUTTON_B, Pointer
from weeninja.fruit import Fruit, FruitType
from weeninja.game import Z_PLANE, GameState, Ray
from weeninja.model import ModelCache

Vec3 = tuple[float, float, float]

WINDOW_SIZE = (640, 480)
BACKGROUND = (255, 255, 255)
SLICER_COLOR = (0, 0, 255, 85)
SLICER_RADIUS = 0.1
POINTER_ALPHA = 0.7
SPAWN_INTERVAL = 1.0

_FALLBACK_COLORS = {
    FruitType.APPLE: (200, 30, 30),
    FruitType.ORANGE: (255, 150, 0),
    FruitType.KIWIFRUIT: (110, 80, 40),
    FruitType.PINEAPPLE: (220, 190, 40),
    FruitType.APPLE_HALF: (240, 230, 180),
    FruitType.ORANGE_HALF: (255, 190, 60),
    FruitType.KIWIFRUIT_HALF: (120, 200, 60),
    FruitType.PINEAPPLE_HALF_TOP: (240, 220, 90),
    FruitType.PINEAPPLE_HALF_BOTTOM: (240, 220, 90),
}


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _scale(a: Vec3, k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(a: Vec3) -> Vec3:
    length = math.sqrt(_dot(a, a))
    return a if length == 0 else _scale(a, 1.0 / length)


@dataclass(frozen=True)
class Camera:
    """A perspective camera."""

    position: Vec3 = (0.0, 0.0, 1.0)
    target: Vec3 = (0.0, 0.0, -1.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    fovy: float = 45.0

    def _basis(self) -> tuple[Vec3, Vec3, Vec3]:
        forward = _normalize(_sub(self.target, self.position))
        right = _normalize(_cross(forward, self.up))
        true_up = _cross(right, forward)
        return forward, right, true_up

    def _half_extents(self, screen_size: tuple[float, float]) -> tuple[float, float]:
        tan_half = math.tan(math.radians(self.fovy) / 2)
        width, height = screen_size
        return tan_half * width / height, tan_half

    def screen_to_world_ray(
        self, point: tuple[float, float], screen_size: tuple[float, float]
    ) -> Ray:
        """Return the ray from the camera through a screen point."""
        forward, right, true_up = self._basis()
        half_x, half_y = self._half_extents(screen_size)
        ndc_x = 2.0 * point[0] / screen_size[0] - 1.0
        ndc_y = 1.0 - 2.0 * point[1] / screen_size[1]
        direction = _add(
            forward,
            _add(_scale(right, ndc_x * half_x), _scale(true_up, ndc_y * half_y)),
        )
        return Ray(position=self.position, direction=_normalize(direction))

    def world_to_screen(
        self, point: Vec3, screen_size: tuple[float, float]
    ) -> tuple[float, float]:
        """Project a world point to screen coordinates; points behind the camera raise ValueError."""
        forward, right, true_up = self._basis()
        half_x, half_y = self._half_extents(screen_size)
        rel = _sub(point, self.position)
        depth = _dot(rel, forward)
        if depth <= 0:
            raise ValueError("point is behind the camera")
        ndc_x = _dot(rel, right) / (depth * half_x)
        ndc_y = _dot(rel, true_up) / (depth * half_y)
        return (
            (ndc_x + 1.0) / 2.0 * screen_size[0],
            (1.0 - ndc_y) / 2.0 * screen_size[1],
        )


def _fruit_transform(fruit: Fruit, vertex: Sequence[float]) -> Vec3:
    """Rotate a model vertex about Z by the fruit's angle, then move it into place."""
    c, s = math.cos(fruit.theta), math.sin(fruit.theta)
    x, y, z = (tuple(vertex) + (0.0, 0.0, 0.0))[:3]
    return (
        x * c - y * s + fruit.position[0],
        x * s + y * c + fruit.position[1],
        z + Z_PLANE,
    )


class _FruitRenderer:
    """Draws fruit as flat-shaded projected meshes."""

    def __init__(self, camera: Camera, models: ModelCache) -> None:
        self._camera = camera
        self._models = models
        self._meshes: dict[FruitType, Any] = {}
        self._colors: dict[FruitType, tuple[int, int, int]] = {}

    def _mesh(self, kind: FruitType) -> Any:
        if kind not in self._meshes:
            try:
                mesh = self._models.get(kind)
                color = pygame.transform.average_color(mesh.texture)[:3]
            except (OSError, pygame.error, ValueError, AttributeError):
                mesh, color = None, _FALLBACK_COLORS[kind]
            self._meshes[kind] = mesh
            self._colors[kind] = tuple(color)
        return self._meshes[kind]

    def draw(self, surface: pygame.Surface, state: GameState) -> None:
        size = surface.get_size()
        for fruit in state.alive_fruit():
            kind = FruitType(fruit.type)
            mesh = self._mesh(kind)
            color = self._colors[kind]
            try:
                if mesh is None or not mesh.faces:
                    self._draw_blob(surface, fruit, color, size)
                else:
                    self._draw_mesh(surface, fruit, mesh, color, size)
            except ValueError:
                continue

    def _draw_blob(self, surface, fruit, color, size) -> None:
        center = (fruit.position[0], fruit.position[1], Z_PLANE)
        sx, sy = self._camera.world_to_screen(center, size)
        ex, _ = self._camera.world_to_screen(_add(center, (1.0, 0.0, 0.0)), size)
        pygame.draw.circle(surface, color, (sx, sy), max(1.0, abs(ex - sx)))

    def _draw_mesh(self, surface, fruit, mesh, color, size) -> None:
        faces = []
        for face in mesh.faces:
            world = [_fruit_transform(fruit, mesh.vertices[i]) for i in face]
            if len(world) < 3:
                continue
            normal = _normalize(
                _cross(_sub(world[1], world[0]), _sub(world[2], world[0]))
            )
            depth = sum(v[2] for v in world) / len(world)
            faces.append((depth, abs(normal[2]), world))
        faces.sort(key=lambda item: item[0])
        for _, light, world in faces:
            points = [self._camera.world_to_screen(v, size) for v in world]
            shade = 0.4 + 0.6 * light
            pygame.draw.polygon(
                surface, tuple(int(channel * shade) for channel in color), points
            )


def _draw_slicer(
    surface: pygame.Surface, camera: Camera, at: tuple[float, float]
) -> None:
    size = surface.get_size()
    ray = camera.screen_to_world_ray(at, size)
    if ray.direction[2] == 0:
        return
    t = -ray.position[2] / ray.direction[2]
    on_plane = _add(ray.position, _scale(ray.direction, t))
    try:
        sx, sy = camera.world_to_screen(on_plane, size)
        ex, _ = camera.world_to_screen(_add(on_plane, (SLICER_RADIUS, 0.0, 0.0)), size)
    except ValueError:
        return
    radius = max(1, int(abs(ex - sx)))
    overlay = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    pygame.draw.circle(overlay, SLICER_COLOR, (radius, radius), radius)
    surface.blit(overlay, (int(sx) - radius, int(sy) - radius))


def _play() -> None:
    window = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("WeeNinja")
    try:
        pygame.display.toggle_fullscreen()
    except pygame.error:
        pass
    window = pygame.display.get_surface()
    size = window.get_size()

    camera = Camera()
    pointer = Pointer(extents=(float(size[0]), float(size[1])))
    state = GameState()
    renderer = _FruitRenderer(camera, ModelCache())
    rng = random.Random()
    clock = pygame.time.Clock()
    fruit_timer = 0.0

    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                running = False
            elif event.type == pygame.MOUSEMOTION:
                pointer.target = (float(event.pos[0]), float(event.pos[1]))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pointer.press_buttons(BUTTON_B)

        pointer.smooth(POINTER_ALPHA)
        if pointer.shooting:
            state.fruit_pick(camera.screen_to_world_ray(pointer.shot_start, size))

        window.fill(BACKGROUND)
        _draw_slicer(window, camera, pointer.screen)

        fruit_timer += dt
        if fruit_timer > SPAWN_INTERVAL:
            fruit_timer = 0.0
            state.spawn_fruit(rng.choice(list(FruitType)), rng)

        state.update(dt)
        renderer.draw(window, state)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; pass YES to play with a Wii remote."""
    args = list(sys.argv[1:] if argv is None else argv)
    use_wiimote = len(args) == 1 and args[0].startswith("YES")
    print(f"Using wiimote: {int(use_wiimote)}")
    if use_wiimote:
        print("Unable to connect", file=sys.stderr)
        return 1

    pygame.init()
    try:
        _play()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())