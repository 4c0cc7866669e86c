import pygame
import pytest

from golemlab import graphics
from golemlab.gamestructs import Config
from golemlab.physics import Character, Vector2
from golemlab.textmanager import TextInfo


@pytest.fixture
def config():
    return Config(window_scale=1)


@pytest.fixture
def display(monkeypatch, config):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    shown = graphics.Display("test", config, font_path=None)
    yield shown
    shown.close()


def _solid(color, size=(16, 16)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def test_texture_box_identity_at_scale_one(config):
    assert graphics.texture_box(3, 5, 7, 9, config) == pygame.Rect(3, 5, 7, 9)


def test_texture_box_scales_every_field():
    base = graphics.texture_box(3, 5, 7, 9, Config(window_scale=1))
    doubled = graphics.texture_box(3, 5, 7, 9, Config(window_scale=2))
    assert (doubled.x, doubled.y, doubled.w, doubled.h) == (
        base.x * 2, base.y * 2, base.w * 2, base.h * 2,
    )


def test_texture_box_truncates_fractions(config):
    assert graphics.texture_box(2.9, 1.2, 16, 16, config) == graphics.texture_box(
        2, 1, 16, 16, config
    )


def test_missing_texture_is_checkerboard():
    surface = graphics.missing_texture()
    assert surface.get_size() == (8, 8)
    assert tuple(surface.get_at((0, 0))) == (0, 0, 0, 255)
    assert tuple(surface.get_at((1, 0))) == (255, 0, 255, 255)
    assert surface.get_at((3, 5)) == surface.get_at((0, 0))
    assert surface.get_at((2, 3)) == surface.get_at((1, 0))


@pytest.mark.parametrize(
    "state, expected",
    [
        (-3.0, graphics.TEXTURE_SLOPPY),
        (-2.0, graphics.TEXTURE_WET),
        (-1.5, graphics.TEXTURE_WET),
        (-1.0, graphics.TEXTURE_NORMAL),
        (0.0, graphics.TEXTURE_NORMAL),
        (1.0, graphics.TEXTURE_NORMAL),
        (1.5, graphics.TEXTURE_LAVAY),
        (2.0, graphics.TEXTURE_LAVAY),
        (2.5, graphics.TEXTURE_MAGMATIC),
    ],
)
def test_character_texture_index(state, expected):
    assert graphics.character_texture_index(state) == expected


def test_load_texture_missing_file_falls_back(display, tmp_path):
    texture = display.load_texture(tmp_path / "nothing.png")
    assert texture.get_size() == (8, 8)


def test_load_texture_reads_image(display, tmp_path):
    path = tmp_path / "tile.bmp"
    pygame.image.save(_solid((10, 200, 30), (5, 7)), str(path))
    texture = display.load_texture(path)
    assert texture.get_size() == (5, 7)
    assert tuple(texture.get_at((2, 3)))[:3] == (10, 200, 30)


def test_draw_texture_stretches_into_box(display):
    display.clear()
    display.draw_texture(_solid((0, 0, 250), (2, 2)), pygame.Rect(10, 10, 20, 20))
    assert tuple(display.screen.get_at((29, 29)))[:3] == (0, 0, 250)
    assert tuple(display.screen.get_at((30, 30)))[:3] == (0, 0, 0)


def test_draw_text_only_inside_its_box(display):
    display.clear()
    text = TextInfo("WWW", 100, 100, 24)
    display.draw_text(text)
    box = text.box()
    inside = [
        tuple(display.screen.get_at((x, y)))[:3]
        for x in range(box.x, box.right)
        for y in range(box.y, box.bottom)
    ]
    assert any(color != (0, 0, 0) for color in inside)
    assert tuple(display.screen.get_at((box.right + 2, box.bottom + 2)))[:3] == (0, 0, 0)


@pytest.mark.parametrize(
    "state, index",
    [(0.0, graphics.TEXTURE_NORMAL), (3.0, graphics.TEXTURE_MAGMATIC)],
)
def test_draw_character_uses_state_texture(display, state, index):
    colors = [(40 * n + 10, 0, 0) for n in range(5)]
    textures = [_solid(color) for color in colors]
    display.clear()
    display.draw_character(Character(position=Vector2(1, 1), state=state), textures)
    assert tuple(display.screen.get_at((17, 17)))[:3] == colors[index]


def test_update_window_follows_config(display, config):
    before = display.screen.get_size()
    config.window_height += 1
    display.update_window("renamed")
    width, height = display.screen.get_size()
    assert width == before[0]
    assert height == before[1] + config.block_pixel * config.window_scale
    assert pygame.display.get_caption()[0] == "renamed"