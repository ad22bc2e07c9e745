"""Menu messages and how the game reacts to them."""

from __future__ import annotations

from enum import IntEnum


class Message(IntEnum):
    """A choice reported by the menu."""

    NONE = 0
    MENU_PLAY = 1
    MENU_HIGH_SCORE = 2
    MENU_QUIT = 3


def handle_msg(msg: Message | int) -> bool:
    """Return True when the message asks the game to quit."""
    return Message(msg) is Message.MENU_QUIT