"""Pointer control from Wii remote IR blobs and buttons."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice

IR_SRC_COUNT = 4
IR_CENTER = (512.0, 384.0)
BUTTON_B = 0x0004
BUTTON_A = 0x0008


@dataclass(frozen=True)
class IRSource:
    """One infrared blob seen by the remote's camera."""

    valid: bool
    x: int = 0
    y: int = 0


def ir_to_screen(
    p1: tuple[float, float],
    p2: tuple[float, float],
    extents: tuple[float, float],
) -> tuple[float, float]:
    """Map the midpoint of two IR blobs to a point on a screen of the given size."""
    ext_x, ext_y = extents
    mid_x = (p1[0] + p2[0]) / 2.0
    mid_y = (p1[1] + p2[1]) / 2.0
    offset_x = (IR_CENTER[0] - mid_x) / ext_x
    offset_y = -(IR_CENTER[1] - mid_y) / ext_y
    return (ext_x / 2 + offset_x * ext_x, ext_y / 2 + offset_y * ext_y)


def lerp2(
    start: tuple[float, float], end: tuple[float, float], alpha: float
) -> tuple[float, float]:
    """Interpolate between two points."""
    return (
        start[0] + alpha * (end[0] - start[0]),
        start[1] + alpha * (end[1] - start[1]),
    )


@dataclass
class Pointer:
    """Where the player aims, and whether a slice has been started."""

    extents: tuple[float, float] = (320.0, 240.0)
    target: tuple[float, float] = (320.0, 240.0)
    screen: tuple[float, float] = (320.0, 240.0)
    shot_start: tuple[float, float] = (0.0, 0.0)
    shooting: bool = False

    def track_ir(self, sources: Iterable[IRSource]) -> bool:
        """Aim at the first two valid blobs; return whether the target moved."""
        valid = [s for s in islice(sources, IR_SRC_COUNT) if s.valid][:2]
        if len(valid) != 2:
            return False
        first, second = valid
        self.target = ir_to_screen(
            (first.x, first.y), (second.x, second.y), self.extents
        )
        return True

    def press_buttons(self, buttons: int) -> None:
        """React to a button state; B alone starts a slice at the target."""
        if buttons == BUTTON_B:
            self.shot_start = self.target
            self.shooting = True

    def smooth(self, alpha: float) -> tuple[float, float]:
        """Move the drawn pointer toward the target and return it."""
        self.screen = lerp2(self.screen, self.target, alpha)
        return self.screen