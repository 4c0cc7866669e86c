import pygame
import pytest

from golemlab.gamestructs import Config, MenuType
from golemlab.scoreboard import DEFAULT_SCORES, ScoreEntry
from golemlab.scoreview import TABLE_HEADER, open_scoreboard, scoreboard_labels, scoreboard_lines


class FakeDisplay:
    def __init__(self, config):
        self.config = config
        self.texts = []

    def clear(self):
        self.texts.clear()

    def draw_text(self, text):
        self.texts.append(text.text)

    def present(self):
        pass


@pytest.fixture
def post(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.display.set_mode((1, 1))
    pygame.event.clear()
    yield pygame.event.post
    pygame.display.quit()


def test_lines_format():
    lines = scoreboard_lines([ScoreEntry(999, 4.5, "<Cheater>")])
    assert lines == [TABLE_HEADER, "999   4.500s   <Cheater>"]


def test_lines_limited_to_ten():
    entries = [ScoreEntry(n, 1.0, f"p{n}") for n in range(15)]
    lines = scoreboard_lines(entries)
    assert len(lines) == 11
    assert lines[-1].endswith("p9")


def test_labels_layout():
    labels = scoreboard_labels(Config(), list(DEFAULT_SCORES))
    assert labels[0].text == "* SCOREBOARD *"
    assert labels[-1].text == "Return to Main Menu"
    assert len(labels) == len(DEFAULT_SCORES) + 3
    table_ys = [label.y for label in labels[1:-1]]
    assert table_ys == sorted(table_ys)


def test_open_creates_defaults_and_returns(post, tmp_path):
    config = Config()
    display = FakeDisplay(config)
    path = tmp_path / "scores.txt"
    post(pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE))
    assert open_scoreboard(display, config, path) is MenuType.MAIN_MENU
    assert path.exists()
    assert "999   4.500s   <Cheater>" in display.texts


def test_open_quit_exits(post, tmp_path):
    config = Config()
    post(pygame.event.Event(pygame.QUIT))
    assert open_scoreboard(FakeDisplay(config), config, tmp_path / "s.txt") is MenuType.EXIT