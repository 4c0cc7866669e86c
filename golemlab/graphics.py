"""Window, textures and drawing of text and the player character."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pygame

from .gamestructs import WINDOW_FULLSCREEN, Config
from .physics import Character
from .textmanager import FontSize, TextInfo

log = logging.getLogger(__name__)

FONT_PATH = Path("assets/RetroBound.ttf")
CHARACTER_SIZE = 16

TEXTURE_SLOPPY = 0
TEXTURE_WET = 1
TEXTURE_NORMAL = 2
TEXTURE_LAVAY = 3
TEXTURE_MAGMATIC = 4

_MISSING_ON = (0xFF, 0x00, 0xFF, 0xFF)
_MISSING_OFF = (0x00, 0x00, 0x00, 0xFF)
_BACKGROUND = (0, 0, 0)


def texture_box(x: float, y: float, w: float, h: float, config: Config) -> pygame.Rect:
    """Return the on-screen rectangle of an unscaled box."""
    scale = config.window_scale
    return pygame.Rect(int(x) * scale, int(y) * scale, int(w) * scale, int(h) * scale)


def missing_texture() -> pygame.Surface:
    """Return the 8x8 magenta and black checkerboard shown for unloadable images."""
    surface = pygame.Surface((8, 8), pygame.SRCALPHA)
    for x in range(8):
        for y in range(8):
            surface.set_at((x, y), _MISSING_ON if (x % 2) ^ (y % 2) else _MISSING_OFF)
    return surface


def character_texture_index(state: float) -> int:
    """Pick the character image for a temperature state."""
    if state < -1:
        return TEXTURE_SLOPPY if state < -2 else TEXTURE_WET
    if state > 1:
        return TEXTURE_MAGMATIC if state > 2 else TEXTURE_LAVAY
    return TEXTURE_NORMAL


def _window_size(config: Config) -> tuple[int, int]:
    scale = config.window_scale * config.block_pixel
    return config.window_width * scale, config.window_height * scale


def _window_flags(config: Config) -> int:
    return pygame.FULLSCREEN if config.screen_type == WINDOW_FULLSCREEN else 0


class Display:
    """The game window together with its font."""

    def __init__(
        self, title: str, config: Config, font_path: str | Path | None = FONT_PATH
    ) -> None:
        self.config = config
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(_window_size(config), _window_flags(config))
        except pygame.error as err:
            raise RuntimeError(f"could not create the window: {err}") from err
        pygame.display.set_caption(title)
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.Font(
                None if font_path is None else str(font_path), int(FontSize.XLARGE)
            )
        except (OSError, pygame.error) as err:
            raise RuntimeError(f"could not open the font {font_path}: {err}") from err
        self.clear()

    def update_window(self, title: str) -> None:
        """Apply the current size and screen type and retitle the window."""
        self.screen = pygame.display.set_mode(
            _window_size(self.config), _window_flags(self.config)
        )
        pygame.display.set_caption(title)

    def close(self) -> None:
        """Shut the window and the library down."""
        pygame.quit()

    def load_texture(self, path: str | Path) -> pygame.Surface:
        """Load an image, falling back to the checkerboard when it cannot be read."""
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError):
            log.warning("unable to load texture from %s", path)
            return missing_texture()

    def draw_texture(self, texture: pygame.Surface, box: pygame.Rect) -> None:
        """Draw a whole image stretched over ``box``."""
        if box.w <= 0 or box.h <= 0:
            return
        self.screen.blit(pygame.transform.scale(texture, box.size), box)

    def draw_text(self, text: TextInfo) -> None:
        """Render a text box in its colour, stretched over its rectangle."""
        box = text.box()
        if box.w <= 0 or box.h <= 0:
            return
        rendered = self.font.render(text.text, False, text.color)
        self.screen.blit(pygame.transform.scale(rendered, box.size), box)

    def draw_character(self, character: Character, textures: Sequence[pygame.Surface]) -> None:
        """Draw the character with the image matching its state."""
        texture = textures[character_texture_index(character.state)]
        pixel = self.config.block_pixel
        box = texture_box(
            character.position.i * pixel,
            character.position.j * pixel,
            CHARACTER_SIZE,
            CHARACTER_SIZE,
            self.config,
        )
        self.draw_texture(texture, box)

    def clear(self) -> None:
        """Fill the window with the background colour."""
        self.screen.fill(_BACKGROUND)

    def present(self) -> None:
        """Show what has been drawn."""
        pygame.display.flip()