"""Text boxes used as labels and buttons, and the menu event loop."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

import pygame

from .gamestructs import ButtonState, Config, TextAlign

CLOSE_REQUESTED = -2
NO_BUTTON = -1
WHITE = (0xFF, 0xFF, 0xFF)


class FontSize(IntEnum):
    XSMALL = 12
    SMALL = 24
    MEDIUM = 36
    LARGE = 42
    XLARGE = 48


@dataclass
class TextInfo:
    """A piece of text placed on screen; glyphs are half as wide as tall."""

    text: str
    x: int
    y: int
    font_size: int
    positioning: TextAlign = TextAlign.CENTERED
    color: tuple[int, int, int] = WHITE
    state: ButtonState = ButtonState.SHOWN

    def box(self) -> pygame.Rect:
        """Return the rectangle the text occupies."""
        width = len(self.text) * self.font_size // 2
        if self.positioning is TextAlign.CENTERED:
            return pygame.Rect(
                self.x - width // 2, self.y - self.font_size // 2, width, self.font_size
            )
        return pygame.Rect(self.x, self.y, width, self.font_size)

    def contains(self, point: tuple[int, int]) -> bool:
        """Tell whether a point lies strictly inside the text box."""
        rect = self.box()
        x, y = point
        return rect.x < x < rect.x + rect.w and rect.y < y < rect.y + rect.h


def fill_text_info(
    text: str, x: float, y: float, font_size: int, positioning: TextAlign, config: Config
) -> TextInfo:
    """Build a text box from unscaled coordinates, applying the window scale."""
    scale = config.window_scale
    return TextInfo(
        text,
        int(x) * scale,
        int(y) * scale,
        int(font_size) * scale,
        positioning,
    )


def check_mouse_buttons(mouse: tuple[int, int], buttons: Sequence[TextInfo]) -> int:
    """Activate the button under the mouse and return its index, or -1.

    When boxes overlap the last one wins. If no button is hit, the states
    are left as they were.
    """
    active = NO_BUTTON
    for index, button in enumerate(buttons):
        if button.contains(mouse):
            active = index
    if active != NO_BUTTON:
        for index, button in enumerate(buttons):
            button.state = ButtonState.ACTIVE if index == active else ButtonState.SHOWN
    return active


def menu_loop(buttons: Sequence[TextInfo], space: int, esc: int) -> int:
    """Wait for a menu choice.

    Returns ``space`` or ``esc`` when those keys are released, the index of
    the active button after a click, or -2 when the window is closed.
    """
    while True:
        event = pygame.event.wait()
        if event.type == pygame.KEYUP:
            if event.key == pygame.K_SPACE:
                return space
            if event.key == pygame.K_ESCAPE:
                return esc
        elif event.type == pygame.MOUSEBUTTONUP:
            check_mouse_buttons(event.pos, buttons)
            for index, button in enumerate(buttons):
                if button.state is ButtonState.ACTIVE:
                    return index
        elif event.type == pygame.QUIT:
            return CLOSE_REQUESTED