# golemlab

**Temple Golem** is a small tile-based platformer built on pygame. You steer a
golem through a temple, collect gems and reach the exit. Water cools the golem
and lava heats it. Either change slows it down, and if it goes too far the golem
dies. The package also has a map editor, a scoreboard, and three small companion
tools: a Brainfuck interpreter, an SVG clock drawer and a linked-list demo.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
golemlab
```

This opens the main menu. Click an entry, or use the keys: Space starts a new
game and Escape exits.

- **New Game**: plays the default map, `assets/TempleRun.tgm`. After the run,
  the panel shows the score and the time.
- **Scoreboard**: shows the first ten entries of the score table.
- **Settings**: holds three options.
  - Click the player name to type a new one (up to 16 characters). Return, a
    mouse click or reaching the limit ends typing.
  - Click the resolution to step the window scale through 3, 4, 5 and 6.
  - Click fullscreen to switch between fullscreen and windowed mode.

  When you go back from Settings, the settings are saved.
- **Exit**: quits the game.

Clicking the player name in the main menu also opens Settings.

Keys during a run:

| Key    | Action                          |
|--------|---------------------------------|
| Up     | jump (only when not in the air) |
| Left   | move left                       |
| Right  | move right                      |
| Down   | become heavier, fall faster     |
| Space  | restart the level               |
| Escape | leave the level                 |

How a run is scored:

- Each collected gem adds to a squared bonus.
- A faster finish scores more.
- A death scores zero.
- A finished run, or one that ended in death, is added to the score table in
  order of score.
- A run left with Escape is not recorded.

### Files

The game works relative to the current directory and reads and writes these
files under `assets/`:

| File            | Contents                                      |
|-----------------|-----------------------------------------------|
| `config.txt`    | window scale, screen type and player name     |
| `scores.txt`    | tab-separated score table                     |
| `TempleRun.tgm` | the default map                               |
| `*.png`         | textures                                      |
| `RetroBound.ttf`| the font                                      |

If the configuration, the score table or a map is missing, the game creates it
with defaults. An image that cannot be loaded is drawn as a magenta and black
checkerboard.

## Editing maps

```
golemlab -e path/to/map.tgm
```

This opens the map in the editor. If the file does not exist, it is created
holding an empty map. A row of buttons below the grid works like this:

- **WATER**, **LAVA**, **WALL**, **FLOOR**, **START**, **FINISH** and **GEM**
  choose a block. Click or drag on the grid to place the chosen block.
- **DELETE** paints empty (air) cells.
- **SAVE** writes the map back to the file, and the button then reads "SAVED".

Close the window to leave the editor.

Maps are stored in a fixed binary layout. The grid is 20 × 15 blocks, one
little-endian 32-bit integer per block, stored column by column.

## Library use

The game rules do not need a window:

```python
from golemlab.gamestructs import Block, Config, GameMap, load_map, save_map
from golemlab.physics import Character, Vector2, step_character
from golemlab.game import compute_force, find_start
from golemlab.scoreboard import read_scores, insert_score, update_scoreboard, load_top_ten
from golemlab.newgame import compute_score

game_map = GameMap.empty()
game_map.blocks[3][14] = Block.START
character = Character(position=find_start(game_map))
force = compute_force(False, False, False, False, character.state, character.velocity.i)
touched = step_character(Config(), game_map, character, force, 1 / 64)
```

## Companion tools

- `golemlab-bf [FILE]` runs a Brainfuck program read from FILE, or a built-in
  greeting program. The program reads from standard input and writes to
  standard output. In Python, `golemlab.brainfuck.run(code, input_data)`
  returns the output as bytes. Cells are 8-bit and wrap around, and reading
  past the end of the input stores 255. An unmatched `]` raises `ValueError`.
- `golemlab-clock [OUTPUT]` asks for an hour, a minute and a second, then
  writes an analogue clock face as SVG to OUTPUT. The default output is
  `ora.svg`. `golemlab.clock.render_clock_svg(hour, minute, second)` returns
  the SVG text.
- `golemlab-list` prints a short demonstration of
  `golemlab.linkedlist.LinkedList`. It shows pushing to the front, appending
  and searching.