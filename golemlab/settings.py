"""The settings panel: player name, window scale and screen type."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from enum import IntEnum
from pathlib import Path

import pygame

from .gamestructs import (
    CONFIG_PATH,
    USERNAME_MAX,
    WINDOW_FULLSCREEN,
    WINDOW_SHOWN,
    ButtonState,
    Config,
    MenuType,
    TextAlign,
    save_config,
)
from .graphics import Display
from .textmanager import CLOSE_REQUESTED, WHITE, FontSize, TextInfo, fill_text_info, menu_loop

WINDOW_TITLE = "TempleGolem"
ACTIVE_COLOR = (0xFF, 0x00, 0x00)
SCALES = (3, 4, 5, 6)


class SettingsButton(IntEnum):
    HEADER = 0
    NAME_LABEL = 1
    NAME = 2
    RESOLUTION_LABEL = 3
    RESOLUTION = 4
    FULLSCREEN_LABEL = 5
    FULLSCREEN = 6
    BACK = 7


def settings_buttons(config: Config) -> list[TextInfo]:
    """Build the settings texts, indexed by ``SettingsButton``."""
    width = config.window_width * config.block_pixel
    height = config.window_height * config.block_pixel
    scale = config.window_scale
    label_x = width * 0.5 / 12
    value_x = width * 4 // 12
    left, centered = TextAlign.TOPLEFT, TextAlign.CENTERED
    resolution = f"<{width * scale}x{height * scale}px>"
    screen = "<Fullscreen>" if config.screen_type == WINDOW_FULLSCREEN else "<Windowed>"
    return [
        fill_text_info("* SETTINGS *", width // 2, 1.5 * height / 12, FontSize.LARGE, centered, config),
        fill_text_info("Player name:", label_x, 2.5 * height / 12, FontSize.SMALL, left, config),
        fill_text_info(config.user_name, value_x, 3.5 * height / 12, FontSize.SMALL, left, config),
        fill_text_info("Resolution:", label_x, 5 * height // 12, FontSize.SMALL, left, config),
        fill_text_info(resolution, value_x, 6 * height // 12, FontSize.SMALL, left, config),
        fill_text_info("Fullscreen:", label_x, 7.5 * height / 12, FontSize.SMALL, left, config),
        fill_text_info(screen, value_x, 8.5 * height / 12, FontSize.SMALL, left, config),
        fill_text_info(
            "Return to Main Menu", width // 2, 11 * height // 12, FontSize.SMALL, centered, config
        ),
    ]


def toggle_screen_type(config: Config) -> int:
    """Switch between windowed and fullscreen and return the new screen type."""
    config.screen_type = WINDOW_FULLSCREEN if config.screen_type == WINDOW_SHOWN else WINDOW_SHOWN
    return config.screen_type


def cycle_scale(config: Config) -> int:
    """Step the window scale through 3, 4, 5, 6 and back to 3; return it."""
    if config.window_scale in SCALES[:-1]:
        config.window_scale += 1
    else:
        config.window_scale = SCALES[0]
    return config.window_scale


def _draw(display: Display, buttons: Sequence[TextInfo]) -> None:
    display.clear()
    for button in buttons:
        button.color = ACTIVE_COLOR if button.state is ButtonState.ACTIVE else WHITE
        display.draw_text(button)
    display.present()


def change_player_name(
    display: Display, buttons: MutableSequence[TextInfo], config: Config
) -> bool:
    """Let the player type a new name; return False if the window was closed."""
    name = ""
    config.user_name = name

    def refresh() -> None:
        buttons[:] = settings_buttons(config)
        buttons[SettingsButton.NAME].state = ButtonState.ACTIVE
        _draw(display, buttons)

    refresh()
    pygame.key.start_text_input()
    try:
        while len(name) < USERNAME_MAX:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_BACKSPACE and name:
                    name = name[:-1]
                elif event.key == pygame.K_RETURN:
                    break
            elif event.type == pygame.TEXTINPUT:
                name = (name + event.text)[:USERNAME_MAX]
            elif event.type == pygame.MOUSEBUTTONDOWN:
                break
            else:
                continue
            config.user_name = name
            refresh()
    finally:
        pygame.key.stop_text_input()
    config.user_name = name
    return True


def open_settings(
    display: Display, config: Config, config_path: str | Path = CONFIG_PATH
) -> MenuType:
    """Show the settings until the player goes back; save them on the way out."""
    while True:
        buttons = settings_buttons(config)
        _draw(display, buttons)
        pressed = menu_loop(buttons, -1, SettingsButton.BACK)
        if pressed == CLOSE_REQUESTED:
            return MenuType.EXIT
        if pressed == SettingsButton.BACK:
            save_config(config, config_path)
            return MenuType.MAIN_MENU
        if pressed in (SettingsButton.NAME_LABEL, SettingsButton.NAME):
            if not change_player_name(display, buttons, config):
                return MenuType.EXIT
        elif pressed in (SettingsButton.FULLSCREEN_LABEL, SettingsButton.FULLSCREEN):
            toggle_screen_type(config)
            display.update_window(WINDOW_TITLE)
        elif pressed in (SettingsButton.RESOLUTION_LABEL, SettingsButton.RESOLUTION):
            cycle_scale(config)
            display.update_window(WINDOW_TITLE)