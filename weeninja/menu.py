"""The title menu: its buttons, how they are drawn and what a click means."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pygame

from weeninja.messages import Message

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
SKYBLUE = (102, 191, 255, 255)

_TEXT_OFFSET = (20, 10)


@dataclass(frozen=True)
class MenuButton:
    """A rounded, labelled button and the message it reports when clicked."""

    pos: tuple[float, float]
    size: tuple[float, float]
    roundness: float
    segments: int
    button_color: tuple[int, int, int, int]
    text: str
    font_size: int
    font_color: tuple[int, int, int, int]
    message: Message = Message.NONE

    def rect(self) -> pygame.Rect:
        """Return the button's area on screen."""
        (x, y), (w, h) = self.pos, self.size
        return pygame.Rect(int(x), int(y), int(w), int(h))

    def contains(self, point: tuple[float, float]) -> bool:
        """Tell whether a point lies inside the button (right and bottom edges excluded)."""
        (x, y), (w, h) = self.pos, self.size
        px, py = point
        return x <= px < x + w and y <= py < y + h

    @property
    def corner_radius(self) -> int:
        """Corner radius in pixels for the button's roundness."""
        return int(min(self.size) * min(self.roundness, 1.0) / 2)


MENU_BUTTONS: tuple[MenuButton, ...] = (
    MenuButton((64.0, 80.0), (512.0, 80.0), 8.0, 10, WHITE, "Play", 60, BLACK,
               Message.MENU_PLAY),
    MenuButton((64.0, 200.0), (512.0, 80.0), 8.0, 10, WHITE, "High Scores", 60,
               BLACK, Message.MENU_HIGH_SCORE),
    MenuButton((64.0, 320.0), (512.0, 80.0), 8.0, 10, WHITE, "Quit", 60, BLACK,
               Message.MENU_QUIT),
)


def menu_message(
    mouse_pos: tuple[float, float],
    pressed: bool,
    buttons: Iterable[MenuButton] = MENU_BUTTONS,
) -> Message:
    """Return the message of the first button under a pressed mouse, else NONE."""
    if not pressed:
        return Message.NONE
    return next(
        (button.message for button in buttons if button.contains(mouse_pos)),
        Message.NONE,
    )


def draw_menu(
    surface: pygame.Surface, buttons: Iterable[MenuButton] = MENU_BUTTONS
) -> list[pygame.Rect]:
    """Draw the menu onto a surface and return the rectangles of its buttons."""
    if not pygame.font.get_init():
        pygame.font.init()
    surface.fill(SKYBLUE)
    rects = []
    for button in buttons:
        rect = button.rect()
        pygame.draw.rect(
            surface, button.button_color, rect, border_radius=button.corner_radius
        )
        font = pygame.font.Font(None, button.font_size)
        label = font.render(button.text, True, button.font_color)
        surface.blit(
            label,
            (int(button.pos[0] + _TEXT_OFFSET[0]), int(button.pos[1] + _TEXT_OFFSET[1])),
        )
        rects.append(rect)
    return rects