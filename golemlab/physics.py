"""Movement and block collision for the player character."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gamestructs import Block, Config, GameMap

EPS = 0.000001
STATE_STEP = 0.01
_SOLID = frozenset({Block.WALL, Block.FLOOR})


@dataclass(frozen=True)
class Vector2:
    """A two-dimensional vector in grid units."""

    i: float = 0.0
    j: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.i + other.i, self.j + other.j)


@dataclass
class Character:
    """The player: position of its top-left corner, velocity, mass and temperature state."""

    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    mass: float = 1.0
    state: float = 0.0


def block_at(position: Vector2, game_map: GameMap) -> Block:
    """Return the block under a point; points off the grid count as air."""
    x, y = int(position.i), int(position.j)
    if 0 <= x < game_map.width and 0 <= y < game_map.height:
        return game_map.blocks[x][y]
    return Block.AIR


def fractional(n: float) -> float:
    """Return the part of ``n`` after the decimal point, keeping its sign."""
    return n - int(n)


def apply_offset(position: Vector2, offset: Vector2) -> Vector2:
    """Push ``offset`` away from the side of the block nearest to ``position``."""
    i, j = fractional(position.i), fractional(position.j)
    if i >= j:
        if i + j <= 1:
            return offset + Vector2(0, -1)
        return offset + Vector2(1, 0)
    if i + j <= 1:
        return offset + Vector2(-1, 0)
    return offset + Vector2(0, 1)


def handle_collision(character: Character, game_map: GameMap, config: Config) -> Block:
    """Resolve the character against solid blocks and the map border.

    Updates the character in place, removes a touched gem from the map and
    returns the most important block touched: gem, then finish, then floor
    under the character, otherwise air.
    """
    position = character.position
    corners = [
        position,
        position + Vector2(1 - EPS, 0),
        position + Vector2(0, 1 - EPS),
        position + Vector2(1 - EPS, 1 - EPS),
    ]
    blocks = [block_at(corner, game_map) for corner in corners]
    ul, ur, ll, lr = (block in _SOLID for block in blocks)

    offset = Vector2()
    if ul and ll:
        offset += Vector2(1, 0)
    if ul and ur:
        offset += Vector2(0, 1)
    if ur and lr:
        offset += Vector2(-1, 0)
    if ll and lr:
        offset += Vector2(0, -1)
    for corner, solid in zip(corners, (ul, ur, ll, lr)):
        if solid:
            offset = apply_offset(corner, offset)

    px, py = position.i, position.j
    vx, vy = character.velocity.i, character.velocity.j
    if offset.i < 0:
        px, vx = float(int(px)), 0.0
    elif offset.i > 0:
        px, vx = float(int(px) + 1), 0.0
    if offset.j < 0:
        py, vy = float(int(py)), 0.0
    elif offset.j > 0:
        py, vy = float(int(py) + 1), 0.0

    if px < 0:
        px, vx = 0.0, 0.0
    elif px > config.window_width - 1:
        px, vx = float(config.window_width - 1), 0.0
    if py < 0:
        py, vy = 0.0, 0.0
    elif py > config.window_height - 1:
        py, vy = float(config.window_height - 1), 0.0
        blocks[2] = Block.FLOOR

    character.position = Vector2(px, py)
    character.velocity = Vector2(vx, vy)

    state = character.state
    for block in blocks:
        if block is Block.WATER:
            state -= STATE_STEP
    for block in blocks:
        if block is Block.LAVA:
            state += STATE_STEP
    character.state = state

    for corner, block in zip(corners, blocks):
        if block is Block.GEM:
            game_map.blocks[int(corner.i)][int(corner.j)] = Block.AIR
            return Block.GEM
    if Block.FINISH in blocks:
        return Block.FINISH
    if blocks[2] is Block.FLOOR or blocks[3] is Block.FLOOR:
        return Block.FLOOR
    return Block.AIR


def step_character(
    config: Config, game_map: GameMap, character: Character, force: Vector2, dt: float
) -> Block:
    """Advance the character by one tick under ``force`` and resolve collisions."""
    position, velocity = character.position, character.velocity
    # The horizontal axis also moves by the velocity from before the tick.
    x = position.i + velocity.i * dt
    velocity = Vector2(
        velocity.i + force.i / character.mass * dt,
        velocity.j + force.j / character.mass * dt,
    )
    character.velocity = velocity
    character.position = Vector2(x + velocity.i * dt, position.j + velocity.j * dt)
    return handle_collision(character, game_map, config)