"""Shared game data: configuration, map blocks, menu and event kinds, and their files."""

from __future__ import annotations

import logging
import re
import struct
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path

log = logging.getLogger(__name__)

WINDOW_WIDTH = 20
WINDOW_HEIGHT = 15
PIXELS = 16
USERNAME_MAX = 16

WINDOW_FULLSCREEN = 0x1
WINDOW_SHOWN = 0x4

CONFIG_PATH = Path("assets/config.txt")


@dataclass
class Config:
    """User-adjustable settings and fixed grid dimensions."""

    window_scale: int = 4
    block_pixel: int = PIXELS
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    screen_type: int = WINDOW_SHOWN
    user_name: str = "<Player>"


class Block(IntEnum):
    AIR = 0
    WATER = 1
    LAVA = 2
    WALL = 3
    FLOOR = 4
    START = 5
    FINISH = 6
    GEM = 7


@dataclass
class GameMap:
    """A grid of blocks indexed as ``blocks[x][y]``."""

    blocks: list[list[Block]]
    total_gems: int = 0
    name: str = ""

    @classmethod
    def empty(cls, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> GameMap:
        """Return a map filled with air."""
        return cls([[Block.AIR] * height for _ in range(width)])

    @property
    def width(self) -> int:
        return len(self.blocks)

    @property
    def height(self) -> int:
        return len(self.blocks[0]) if self.blocks else 0


class TextAlign(Enum):
    CENTERED = 0
    TOPLEFT = 1


class ButtonState(Enum):
    SHOWN = 0
    HOVER = 1
    ACTIVE = 2


class MenuType(Enum):
    MAIN_MENU = 0
    NEW_GAME = 1
    SCOREBOARD = 2
    SETTINGS = 3
    EXIT = 4


class GameEvent(Enum):
    GEM_COLLECTED = 0
    SHAPESHIFT = 1
    DEATH = 2
    GAME_FINISH = 3


@dataclass(frozen=True)
class EventRecord:
    """Something that happened during a run, and when (milliseconds)."""

    tick: int
    event: GameEvent


_INT_RE = re.compile(r"[+-]?\d+")


def _format_config(config: Config) -> str:
    return (
        f"WindowScale:\t{config.window_scale}\n"
        f"WindowScreentype:\t{config.screen_type}\n"
        f"UserName:\t{config.user_name}\n"
    )


def save_config(config: Config, path: str | Path = CONFIG_PATH) -> None:
    """Write the user settings to a text file."""
    Path(path).write_text(_format_config(config))


def load_config(path: str | Path = CONFIG_PATH) -> Config:
    """Read settings from ``path``, creating it with defaults if it is missing.

    Fields are read in order; reading stops at the first line that does not
    match, leaving the remaining fields at their defaults.
    """
    path = Path(path)
    config = Config()
    if not path.exists():
        log.warning("config file %s does not exist, creating it", path)
        save_config(config, path)
        return config

    lines = path.read_text().splitlines()
    keys = ("WindowScale", "WindowScreentype", "UserName")
    for key, line in zip(keys, lines):
        prefix = f"{key}:"
        if not line.startswith(prefix):
            break
        value = line[len(prefix):].strip()
        if key == "UserName":
            tokens = value.split()
            if not tokens:
                break
            config.user_name = tokens[0][:USERNAME_MAX]
            continue
        match = _INT_RE.match(value)
        if match is None:
            break
        if key == "WindowScale":
            config.window_scale = int(match.group())
        else:
            config.screen_type = int(match.group())
    return config


def _map_struct(width: int, height: int) -> struct.Struct:
    # Name slot, column-major block grid, gem count, trailing padding.
    return struct.Struct(f"<8x{width * height}ii4x")


def save_map(game_map: GameMap, path: str | Path) -> None:
    """Write a map in the fixed binary layout."""
    layout = _map_struct(game_map.width, game_map.height)
    cells = [int(block) for column in game_map.blocks for block in column]
    Path(path).write_bytes(layout.pack(*cells, game_map.total_gems))


def load_map(
    path: str | Path, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
) -> GameMap:
    """Read a map; a missing file is created holding an empty map."""
    path = Path(path)
    if not path.exists():
        log.warning("map file %s does not exist, creating it", path)
        game_map = GameMap.empty(width, height)
        game_map.name = path.name
        save_map(game_map, path)
        return game_map

    layout = _map_struct(width, height)
    data = path.read_bytes()
    if len(data) < layout.size:
        raise ValueError(f"map file {path} is too short: {len(data)} bytes")
    *cells, total_gems = layout.unpack_from(data)
    try:
        blocks = [
            [Block(cells[x * height + y]) for y in range(height)] for x in range(width)
        ]
    except ValueError as err:
        raise ValueError(f"map file {path} holds an unknown block: {err}") from err
    return GameMap(blocks, total_gems, path.name)