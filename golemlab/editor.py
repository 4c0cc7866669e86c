"""Map editor: paint blocks on the grid with a row of tool buttons below it."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pygame

from .gamestructs import Block, ButtonState, Config, GameMap, TextAlign, load_map, save_map
from .graphics import Display, texture_box
from .textmanager import NO_BUTTON, WHITE, FontSize, TextInfo, check_mouse_buttons, fill_text_info

EDITOR_TITLE = "Temple Golem - editor"
ACTIVE_COLOR = (0xFF, 0x00, 0x00)
SAVE_BUTTON = 0

BUTTON_NAMES = ("SAVE", "DELETE", "WATER", "LAVA", "WALL", "FLOOR", "START", "FINISH", "GEM")

# Block placed by each tool button, starting from the one after SAVE.
PLACED_BLOCKS = (
    Block.AIR,
    Block.WATER,
    Block.LAVA,
    Block.WALL,
    Block.FLOOR,
    Block.START,
    Block.FINISH,
    Block.GEM,
)

EDITOR_TEXTURE_PATHS = {
    Block.AIR: "./assets/e_grid.png",
    Block.WATER: "./assets/e_water.png",
    Block.LAVA: "./assets/e_lava.png",
    Block.WALL: "./assets/wall.png",
    Block.FLOOR: "./assets/floor.png",
    Block.START: "./assets/e_start.png",
    Block.FINISH: "./assets/e_finish.png",
    Block.GEM: "./assets/e_gem.png",
}


def editor_buttons(config: Config) -> list[TextInfo]:
    """Lay the tool buttons out evenly in the extra row below the grid."""
    h_grid = config.window_width * config.block_pixel // (2 * len(BUTTON_NAMES) - 1)
    row_y = (config.window_height + 1) * config.block_pixel - (FontSize.XSMALL // 3 * 2)
    return [
        fill_text_info(
            name, (2 * index + 1) * h_grid, row_y, FontSize.XSMALL, TextAlign.CENTERED, config
        )
        for index, name in enumerate(BUTTON_NAMES)
    ]


def editor_texture_path(block: Block) -> str:
    """Return the image the editor shows for a block."""
    return EDITOR_TEXTURE_PATHS[block]


def place_block(
    config: Config,
    buttons: Sequence[TextInfo],
    mouse: tuple[int, int],
    game_map: GameMap,
) -> Block | None:
    """Put the block of the active tool in the grid cell under the mouse.

    Returns the block placed, or None when the mouse is off the grid or no
    placing tool is active.
    """
    cell = config.block_pixel * config.window_scale
    x, y = mouse
    if not 0 <= y < config.window_height * cell or x < 0:
        return None
    grid_x, grid_y = x // cell, y // cell
    if grid_x >= game_map.width or grid_y >= game_map.height:
        return None
    active = next(
        (index for index, button in enumerate(buttons) if button.state is ButtonState.ACTIVE),
        None,
    )
    if active is None or active == SAVE_BUTTON:
        return None
    block = PLACED_BLOCKS[active - 1]
    game_map.blocks[grid_x][grid_y] = block
    return block


def draw_buttons(display: Display, buttons: Sequence[TextInfo]) -> None:
    """Draw the tool buttons, the active one in red."""
    for button in buttons:
        button.color = ACTIVE_COLOR if button.state is ButtonState.ACTIVE else WHITE
        display.draw_text(button)
    display.present()


def draw_background(display: Display, game_map: GameMap) -> None:
    """Draw every cell of the map with its editor image."""
    config = display.config
    pixel = config.block_pixel
    textures: dict[Block, pygame.Surface] = {}
    for x, column in enumerate(game_map.blocks):
        for y, block in enumerate(column):
            if block not in textures:
                textures[block] = display.load_texture(editor_texture_path(block))
            display.draw_texture(textures[block], texture_box(x * pixel, y * pixel, pixel, pixel, config))
    display.present()


def _redraw(display: Display, game_map: GameMap, buttons: Sequence[TextInfo]) -> None:
    display.clear()
    draw_background(display, game_map)
    draw_buttons(display, buttons)


def open_editor(path: str | Path | None, display: Display, config: Config) -> None:
    """Edit the map stored at ``path`` until the window is closed."""
    if path is None:
        raise ValueError("no map file specified to edit")
    game_map = load_map(path, config.window_width, config.window_height)

    config.window_height += 1
    try:
        display.update_window(EDITOR_TITLE)
    finally:
        config.window_height -= 1
    buttons = editor_buttons(config)
    _redraw(display, game_map, buttons)

    held_down = False
    while True:
        event = pygame.event.wait()
        if event.type == pygame.MOUSEBUTTONDOWN:
            held_down = True
        elif event.type == pygame.MOUSEBUTTONUP:
            held_down = False
        elif event.type == pygame.QUIT:
            return
        if not held_down:
            continue
        mouse = getattr(event, "pos", None) or pygame.mouse.get_pos()
        if check_mouse_buttons(mouse, buttons) != NO_BUTTON:
            save = buttons[SAVE_BUTTON]
            if save.state is ButtonState.ACTIVE:
                save_map(game_map, path)
                save.text = "SAVED"
                save.state = ButtonState.SHOWN
            else:
                save.text = "SAVE"
        else:
            place_block(config, buttons, mouse, game_map)
        _redraw(display, game_map, buttons)