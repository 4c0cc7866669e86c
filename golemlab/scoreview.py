"""The scoreboard panel listing the best ten results."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .gamestructs import Config, MenuType, TextAlign
from .graphics import Display
from .scoreboard import SCORES_PATH, TOP_COUNT, ScoreEntry, load_top_ten
from .textmanager import CLOSE_REQUESTED, WHITE, FontSize, TextInfo, fill_text_info, menu_loop

TABLE_HEADER = "score   time   username"


def scoreboard_lines(entries: Sequence[ScoreEntry]) -> list[str]:
    """Return the table header followed by one line for each of the first ten entries."""
    return [TABLE_HEADER] + [
        f"{entry.score}   {entry.time:.3f}s   {entry.username}" for entry in entries[:TOP_COUNT]
    ]


def scoreboard_labels(config: Config, entries: Sequence[ScoreEntry]) -> list[TextInfo]:
    """Build the title, the table lines and the return button, which comes last."""
    width = config.window_width * config.block_pixel
    height = config.window_height * config.block_pixel
    centered = TextAlign.CENTERED
    labels = [
        fill_text_info("* SCOREBOARD *", width // 2, 1.5 * height / 12, FontSize.LARGE, centered, config)
    ]
    labels.extend(
        fill_text_info(
            line, width // 2, (2.75 + row / 1.4) * height / 12, FontSize.XSMALL, centered, config
        )
        for row, line in enumerate(scoreboard_lines(entries))
    )
    labels.append(
        fill_text_info(
            "Return to Main Menu", width // 2, 11 * height // 12, FontSize.SMALL, centered, config
        )
    )
    return labels


def open_scoreboard(
    display: Display, config: Config, scores_path: str | Path = SCORES_PATH
) -> MenuType:
    """Show the scoreboard until the player returns to the main menu."""
    labels = scoreboard_labels(config, load_top_ten(scores_path))
    display.clear()
    for label in labels:
        label.color = WHITE
        display.draw_text(label)
    display.present()
    back = len(labels) - 1
    while True:
        pressed = menu_loop(labels, back, back)
        if pressed == back:
            return MenuType.MAIN_MENU
        if pressed == CLOSE_REQUESTED:
            return MenuType.EXIT