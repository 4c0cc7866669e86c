import pytest

from golemlab.editor import editor_buttons, editor_texture_path, place_block
from golemlab.gamestructs import Block, ButtonState, Config, GameMap
from golemlab.textmanager import check_mouse_buttons


def _activate(buttons, name):
    index = [b.text for b in buttons].index(name)
    button = buttons[index]
    assert check_mouse_buttons((button.x, button.y), buttons) == index
    return index


def _cell_point(config, x, y):
    cell = config.block_pixel * config.window_scale
    return (x * cell + 1, y * cell + 1)


def test_button_labels():
    texts = [b.text for b in editor_buttons(Config())]
    assert texts == ["SAVE", "DELETE", "WATER", "LAVA", "WALL", "FLOOR", "START", "FINISH", "GEM"]


def test_buttons_sit_in_one_row_below_the_grid():
    config = Config()
    buttons = editor_buttons(config)
    xs = [b.x for b in buttons]
    assert xs == sorted(xs) and len(set(xs)) == len(xs)
    assert len({b.y for b in buttons}) == 1
    grid_height = config.window_height * config.block_pixel * config.window_scale
    assert buttons[0].y > grid_height


def test_clicking_a_button_centre_selects_it():
    buttons = editor_buttons(Config())
    for index, button in enumerate(buttons):
        assert check_mouse_buttons((button.x, button.y), buttons) == index
        assert buttons[index].state is ButtonState.ACTIVE


def test_texture_paths():
    assert editor_texture_path(Block.WATER) == "./assets/e_water.png"
    assert editor_texture_path(Block.AIR) == "./assets/e_grid.png"
    assert all(editor_texture_path(block).endswith(".png") for block in Block)


@pytest.mark.parametrize(
    "name, block",
    [
        ("DELETE", Block.AIR),
        ("WATER", Block.WATER),
        ("LAVA", Block.LAVA),
        ("WALL", Block.WALL),
        ("FLOOR", Block.FLOOR),
        ("START", Block.START),
        ("FINISH", Block.FINISH),
        ("GEM", Block.GEM),
    ],
)
def test_place_block_uses_active_tool(name, block):
    config = Config()
    buttons = editor_buttons(config)
    game_map = GameMap.empty()
    game_map.blocks[3][2] = Block.WALL if block is not Block.WALL else Block.GEM
    _activate(buttons, name)
    assert place_block(config, buttons, _cell_point(config, 3, 2), game_map) is block
    assert game_map.blocks[3][2] is block


def test_place_block_with_save_active_changes_nothing():
    config = Config()
    buttons = editor_buttons(config)
    game_map = GameMap.empty()
    _activate(buttons, "SAVE")
    assert place_block(config, buttons, _cell_point(config, 1, 1), game_map) is None
    assert game_map == GameMap.empty()


def test_place_block_without_active_tool():
    config = Config()
    buttons = editor_buttons(config)
    game_map = GameMap.empty()
    assert place_block(config, buttons, _cell_point(config, 1, 1), game_map) is None
    assert game_map == GameMap.empty()


def test_place_block_below_grid_is_ignored():
    config = Config()
    buttons = editor_buttons(config)
    game_map = GameMap.empty()
    _activate(buttons, "WALL")
    below = _cell_point(config, 0, config.window_height)
    assert place_block(config, buttons, below, game_map) is None
    assert game_map == GameMap.empty()