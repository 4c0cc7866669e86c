"""The high-score table kept in a tab-separated text file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

SCORES_PATH = Path("assets/scores.txt")
HEADER = "scr\ttime\tusername\n"
TOP_COUNT = 10


@dataclass(frozen=True)
class ScoreEntry:
    """One finished run: points, time in seconds and player name."""

    score: int
    time: float
    username: str


DEFAULT_SCORES = (
    ScoreEntry(999, 4.5, "<Cheater>"),
    ScoreEntry(800, 20.0, "<Professional>"),
    ScoreEntry(600, 25.0, "<Advanced>"),
    ScoreEntry(400, 40.0, "<Decent>"),
    ScoreEntry(200, 60.0, "<Rookie>"),
    ScoreEntry(0, 120.0, "<Noob>"),
)


def _write_scores(entries: Iterable[ScoreEntry], path: Path) -> None:
    lines = [HEADER]
    lines.extend(f"{e.score}\t{e.time:.3f}\t{e.username}\n" for e in entries)
    path.write_text("".join(lines))


def _parse_line(line: str, number: int) -> ScoreEntry:
    parts = line.split("\t", 2)
    if len(parts) != 3:
        raise ValueError(f"line {number}: expected score, time and name")
    try:
        return ScoreEntry(int(parts[0]), float(parts[1]), parts[2].strip())
    except ValueError as err:
        raise ValueError(f"line {number}: {err}") from err


def read_scores(path: str | Path = SCORES_PATH) -> list[ScoreEntry]:
    """Read every saved score; a missing file is created with the default table."""
    path = Path(path)
    if not path.exists():
        log.warning("scoreboard file %s does not exist, creating it", path)
        _write_scores(DEFAULT_SCORES, path)
    lines = path.read_text().splitlines()
    return [
        _parse_line(line, number)
        for number, line in enumerate(lines[1:], start=2)
        if line.strip()
    ]


def insert_score(entries: Iterable[ScoreEntry], entry: ScoreEntry) -> list[ScoreEntry]:
    """Return a new list with ``entry`` placed before the first score not above it."""
    result = list(entries)
    position = next(
        (index for index, existing in enumerate(result) if existing.score <= entry.score),
        len(result),
    )
    result.insert(position, entry)
    return result


def update_scoreboard(
    score: int, time: float, username: str, path: str | Path = SCORES_PATH
) -> list[ScoreEntry]:
    """Add a result to the saved table and return the updated table."""
    path = Path(path)
    entries = insert_score(read_scores(path), ScoreEntry(score, time, username))
    _write_scores(entries, path)
    return entries


def load_top_ten(path: str | Path = SCORES_PATH) -> list[ScoreEntry]:
    """Return the first ten saved scores."""
    return read_scores(path)[:TOP_COUNT]