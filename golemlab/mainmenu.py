"""The main menu panel."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from .gamestructs import Config, MenuType, TextAlign
from .graphics import Display
from .textmanager import (
    CLOSE_REQUESTED,
    NO_BUTTON,
    WHITE,
    FontSize,
    TextInfo,
    fill_text_info,
    menu_loop,
)


class MainMenuButton(IntEnum):
    HEADER = 0
    PLAYER_NAME = 1
    START_GAME = 2
    SCOREBOARD = 3
    SETTINGS = 4
    EXIT = 5


def main_menu_buttons(config: Config) -> list[TextInfo]:
    """Build the main menu texts, indexed by ``MainMenuButton``."""
    width = config.window_width * config.block_pixel
    height = config.window_height * config.block_pixel
    centered = TextAlign.CENTERED
    return [
        fill_text_info("* MAIN MENU *", width // 2, 1.5 * height / 12, FontSize.LARGE, centered, config),
        fill_text_info(
            "Player name: " + config.user_name,
            width // 2, 3 * height // 12, FontSize.XSMALL, centered, config,
        ),
        fill_text_info("New Game", width // 2, 5 * height // 12, FontSize.LARGE, centered, config),
        fill_text_info("Scoreboard", width // 2, 8 * height // 12, FontSize.LARGE, centered, config),
        fill_text_info("Settings", width * 1 // 4, 11 * height // 12, FontSize.SMALL, centered, config),
        fill_text_info("Exit", width * 3 // 4, 11 * height // 12, FontSize.SMALL, centered, config),
    ]


def menu_choice(pressed: int) -> MenuType | None:
    """Map a menu loop result to the next panel, or None to keep waiting."""
    if pressed in (CLOSE_REQUESTED, MainMenuButton.EXIT):
        return MenuType.EXIT
    if pressed in (MainMenuButton.PLAYER_NAME, MainMenuButton.SETTINGS):
        return MenuType.SETTINGS
    if pressed == MainMenuButton.SCOREBOARD:
        return MenuType.SCOREBOARD
    if pressed == MainMenuButton.START_GAME:
        return MenuType.NEW_GAME
    if pressed in (NO_BUTTON, MainMenuButton.HEADER):
        return None
    return None


def _draw(display: Display, buttons: Sequence[TextInfo]) -> None:
    display.clear()
    for button in buttons:
        button.color = WHITE
        display.draw_text(button)
    display.present()


def open_main_menu(display: Display, config: Config) -> MenuType:
    """Show the main menu and return the panel the player picks."""
    buttons = main_menu_buttons(config)
    _draw(display, buttons)
    while True:
        choice = menu_choice(menu_loop(buttons, MainMenuButton.START_GAME, MainMenuButton.EXIT))
        if choice is not None:
            return choice