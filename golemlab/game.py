"""The playing loop: map drawing, input forces, physics steps and events."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path

import pygame

from .gamestructs import Block, Config, EventRecord, GameEvent, GameMap, load_map
from .graphics import Display, texture_box
from .physics import Character, Vector2, step_character

log = logging.getLogger(__name__)

TICKRATE = 64

BLOCK_TEXTURE_PATHS = {
    Block.AIR: "./assets/BackTile.png",
    Block.WATER: "./assets/Water.png",
    Block.LAVA: "./assets/Lava.png",
    Block.WALL: "./assets/Wall.png",
    Block.FLOOR: "./assets/Floor.png",
    Block.START: "./assets/OpenDoor.png",
    Block.FINISH: "./assets/ClosedDoor.png",
    Block.GEM: "./assets/Gem.png",
}

CHARACTER_TEXTURE_PATHS = (
    "./assets/GolemSloppy.png",
    "./assets/GolemWet.png",
    "./assets/Golem.png",
    "./assets/GolemLavay.png",
    "./assets/GolemMagmatic.png",
)

_GROUNDING = frozenset({Block.FLOOR, Block.WATER, Block.LAVA})


class GameResult(Enum):
    """How a run of the game loop ended."""

    FINISHED = 0
    RESET = 1
    INTERRUPTED = 2
    QUIT = -1
    MAP_ERROR = -2


def find_start(game_map: GameMap) -> Vector2:
    """Return the first start block, scanning columns left to right, or the origin."""
    for x, column in enumerate(game_map.blocks):
        for y, block in enumerate(column):
            if block is Block.START:
                return Vector2(x, y)
    return Vector2(0, 0)


def frame_crop(block: Block, frame: int) -> pygame.Rect:
    """Return the part of a block's sheet to show in an animation frame."""
    if block is Block.AIR:
        return pygame.Rect(0, 0, 32, 32)
    if block in (Block.WATER, Block.LAVA):
        return pygame.Rect(16 * (frame % 4), 0, 16, 16)
    if block is Block.GEM:
        return pygame.Rect(16 * (frame % 7), 0, 16, 16)
    return pygame.Rect(0, 0, 16, 16)


def compute_force(
    move_right: bool,
    move_left: bool,
    jump: bool,
    supermassive: bool,
    state: float,
    velocity_i: float,
    tickrate: int = TICKRATE,
) -> Vector2:
    """Sum the player's input, the state slowdown, gravity and horizontal drag."""
    i = 0.0
    j = 0.0
    if move_right:
        i += 1.0 / tickrate * 128
    if move_left:
        i += -1.0 / tickrate * 128
    if jump:
        j += -1.0 / tickrate * 15360
    if supermassive:
        j += 1.0 / tickrate * 512
    if abs(state) > 1:
        if abs(state) > 2:
            j = j / 3 * 2
            i = i / 4 * 3
        j = j / 4 * 3
    j += 1.0 / tickrate * 128
    if velocity_i != 0:
        i += -1.0 / tickrate * 64 * velocity_i
    return Vector2(i, j)


def load_block_textures(display: Display) -> dict[Block, pygame.Surface]:
    """Load the image of every block kind."""
    return {block: display.load_texture(path) for block, path in BLOCK_TEXTURE_PATHS.items()}


def load_character_textures(display: Display) -> list[pygame.Surface]:
    """Load the five character images, from coldest to hottest."""
    return [display.load_texture(path) for path in CHARACTER_TEXTURE_PATHS]


def _blit_crop(
    target: pygame.Surface, texture: pygame.Surface, crop: pygame.Rect, box: pygame.Rect
) -> None:
    clipped = crop.clip(texture.get_rect())
    if clipped.w <= 0 or clipped.h <= 0 or box.w <= 0 or box.h <= 0:
        return
    part = texture.subsurface(clipped)
    target.blit(pygame.transform.scale(part, box.size), box)


def _map_rect(config: Config) -> pygame.Rect:
    pixel = config.block_pixel
    return texture_box(0, 0, config.window_width * pixel, config.window_height * pixel, config)


def rasterize(
    display: Display,
    map_surface: pygame.Surface,
    game_map: GameMap,
    textures: Mapping[Block, pygame.Surface],
    frame: int,
) -> None:
    """Draw every block onto ``map_surface`` and put it on the screen."""
    config = display.config
    pixel = config.block_pixel
    background = textures[Block.AIR]
    for x, column in enumerate(game_map.blocks):
        for y, block in enumerate(column):
            box = texture_box(x * pixel, y * pixel, pixel, pixel, config)
            _blit_crop(map_surface, background, background.get_rect(), box)
            _blit_crop(map_surface, textures[block], frame_crop(block, frame), box)
    display.draw_texture(map_surface, _map_rect(config))


def _status_line(character: Character, force: Vector2, elapsed: int | None) -> str:
    seconds = elapsed / 1000.0 if elapsed is not None else 0.0
    ticks = elapsed * TICKRATE // 1000 if elapsed is not None else 0
    return (
        f"P({character.position.i:2.4f}, {character.position.j:2.4f})\t"
        f"V({character.velocity.i:3.4f}, {character.velocity.j:3.4f})\t"
        f"F({force.i:3.4f}, {force.j:3.4f})\t"
        f"state:{character.state:1.2f}\ttime:{seconds:.3f}s\tticks:{ticks}\r"
    )


def game_loop(
    display: Display, config: Config, map_path: str | Path
) -> tuple[GameResult, list[EventRecord]]:
    """Play one run of a map and return how it ended with what happened in it."""
    events: list[EventRecord] = []
    start_ticks = pygame.time.get_ticks()
    prev_step = start_ticks

    try:
        game_map = load_map(map_path, config.window_width, config.window_height)
    except (OSError, ValueError) as err:
        log.error("could not load map %s: %s", map_path, err)
        return GameResult.MAP_ERROR, events

    textures = load_block_textures(display)
    character_textures = load_character_textures(display)
    map_rect = _map_rect(config)
    map_surface = pygame.Surface(map_rect.size)
    rasterize(display, map_surface, game_map, textures, 0)

    character = Character(position=find_start(game_map))
    print(f"Starting position set to ( {character.position.i:f} , {character.position.j:f} )")

    reset = False
    running = True
    first_input = False
    interrupted = False
    move_right = move_left = freefall = jump = supermassive = False

    def elapsed() -> int:
        return pygame.time.get_ticks() - start_ticks

    while running and not reset:
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN:
                if not first_input:
                    first_input = True
                    start_ticks = pygame.time.get_ticks()
                if event.key == pygame.K_UP:
                    if not freefall:
                        jump = True
                        freefall = True
                elif event.key == pygame.K_RIGHT:
                    move_right = True
                elif event.key == pygame.K_DOWN:
                    supermassive = True
                elif event.key == pygame.K_LEFT:
                    move_left = True
                elif event.key == pygame.K_ESCAPE:
                    running = False
                    interrupted = True
                elif event.key == pygame.K_SPACE:
                    reset = True
            elif event.type == pygame.KEYUP:
                if event.key == pygame.K_RIGHT:
                    move_right = False
                elif event.key == pygame.K_DOWN:
                    supermassive = False
                elif event.key == pygame.K_LEFT:
                    move_left = False
            elif event.type == pygame.QUIT:
                return GameResult.QUIT, events

        force = compute_force(
            move_right, move_left, jump, supermassive,
            character.state, character.velocity.i, TICKRATE,
        )
        jump = False
        if abs(character.state) > 3:
            running = False
            events.append(EventRecord(elapsed(), GameEvent.DEATH))

        touched = step_character(config, game_map, character, force, 1.0 / TICKRATE)
        if touched is Block.GEM:
            events.append(EventRecord(elapsed(), GameEvent.GEM_COLLECTED))
        if touched is Block.FINISH:
            running = False
            events.append(EventRecord(elapsed(), GameEvent.GAME_FINISH))
        if touched in _GROUNDING:
            freefall = False

        sys.stdout.write(_status_line(character, force, elapsed() if first_input else None))
        rasterize(display, map_surface, game_map, textures, elapsed() // 100)
        display.draw_character(character, character_textures)
        display.present()
        now = pygame.time.get_ticks()
        pygame.time.delay(max(0, now // TICKRATE - prev_step // TICKRATE))
        prev_step = pygame.time.get_ticks()

    print("\nExiting game")
    if reset:
        return GameResult.RESET, events
    if interrupted:
        return GameResult.INTERRUPTED, events
    return GameResult.FINISHED, events