"""The new-game panel: play the default map and show the result of the run."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum
from pathlib import Path

from .gamestructs import Config, EventRecord, GameEvent, MenuType, TextAlign
from .game import GameResult, game_loop
from .graphics import Display
from .scoreboard import SCORES_PATH, update_scoreboard
from .textmanager import CLOSE_REQUESTED, WHITE, FontSize, TextInfo, fill_text_info, menu_loop

DEFAULT_MAP_PATH = Path("assets/TempleRun.tgm")


class NewGameButton(IntEnum):
    HEADER = 0
    PLAY_DEFAULT_MAP = 1
    SCORE_LABEL = 2
    FINAL_TIME_LABEL = 3
    BACK = 4


def compute_score(events: Iterable[EventRecord]) -> tuple[int, int]:
    """Return the score of a run and the tick (milliseconds) at which it ended.

    Each gem squares into the bonus, a faster end scores more, and a death
    scores nothing. A run without a finishing event counts as ending at 1 ms.
    """
    gems = 0
    end_tick = 1
    multiplier = 1
    for record in events:
        if record.event is GameEvent.GEM_COLLECTED:
            gems += 1
        elif record.event is GameEvent.GAME_FINISH:
            end_tick = record.tick
        elif record.event is GameEvent.DEATH:
            multiplier = 0
            end_tick = record.tick
    score = int(1000.0 / max(end_tick, 1) * (gems * gems + 1) * 1000 * multiplier)
    return score, end_tick


def new_game_buttons(config: Config, score: int, final_time: float) -> list[TextInfo]:
    """Build the new-game texts, indexed by ``NewGameButton``."""
    width = config.window_width * config.block_pixel
    height = config.window_height * config.block_pixel
    centered = TextAlign.CENTERED
    return [
        fill_text_info("* NEW GAME *", width // 2, 1.5 * height / 12, FontSize.LARGE, centered, config),
        fill_text_info(
            "Play the Default Map", width // 2, 5 * height // 12, FontSize.SMALL, centered, config
        ),
        fill_text_info(f"score: {score}", width // 2, 7 * height // 12, FontSize.SMALL, centered, config),
        fill_text_info(
            f"time: {final_time:.3f}s", width // 2, 9 * height // 12, FontSize.SMALL, centered, config
        ),
        fill_text_info(
            "Return to Main Menu", width // 2, 11 * height // 12, FontSize.SMALL, centered, config
        ),
    ]


def _draw(display: Display, buttons: Sequence[TextInfo]) -> None:
    display.clear()
    for button in buttons:
        button.color = WHITE
        display.draw_text(button)
    display.present()


def _report(events: Sequence[EventRecord], score: int, end_tick: int) -> None:
    for record in events:
        print(f"Game event: t{record.tick} EVENT_{record.event.name}")
    print(f"Final score: {score}\nFinished the level in {end_tick / 1000.0:g} seconds")


def open_new_game_menu(
    display: Display,
    config: Config,
    map_path: str | Path = DEFAULT_MAP_PATH,
    scores_path: str | Path = SCORES_PATH,
) -> MenuType:
    """Show the panel, run games on request and record finished runs."""
    buttons = new_game_buttons(config, 0, 0.0)
    _draw(display, buttons)
    while True:
        pressed = menu_loop(buttons, NewGameButton.PLAY_DEFAULT_MAP, NewGameButton.BACK)
        if pressed == CLOSE_REQUESTED:
            return MenuType.EXIT
        if pressed == NewGameButton.BACK:
            return MenuType.MAIN_MENU
        if pressed != NewGameButton.PLAY_DEFAULT_MAP:
            continue

        result = GameResult.RESET
        events: list[EventRecord] = []
        while result is GameResult.RESET:
            result, events = game_loop(display, config, map_path)

        score, end_tick = compute_score(events)
        _report(events, score, end_tick)
        if result not in (GameResult.QUIT, GameResult.INTERRUPTED):
            update_scoreboard(score, end_tick / 1000.0, config.user_name, scores_path)
        if result is GameResult.QUIT:
            return MenuType.EXIT
        buttons = new_game_buttons(config, score, end_tick / 1000.0)
        _draw(display, buttons)