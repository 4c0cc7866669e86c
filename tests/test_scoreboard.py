import pytest

from golemlab.scoreboard import (
    HEADER,
    ScoreEntry,
    insert_score,
    load_top_ten,
    read_scores,
    update_scoreboard,
)


def test_missing_file_gets_default_table(tmp_path):
    path = tmp_path / "scores.txt"
    entries = read_scores(path)
    assert len(entries) == 6
    assert entries[0] == ScoreEntry(999, 4.5, "<Cheater>")
    assert entries[-1] == ScoreEntry(0, 120.0, "<Noob>")
    text = path.read_text()
    assert text.startswith(HEADER)
    assert "999\t4.500\t<Cheater>\n" in text


def test_default_table_is_descending(tmp_path):
    scores = [e.score for e in read_scores(tmp_path / "scores.txt")]
    assert scores == sorted(scores, reverse=True)


def test_insert_between_and_before_equal():
    entries = [ScoreEntry(900, 1.0, "a"), ScoreEntry(500, 2.0, "b"), ScoreEntry(100, 3.0, "c")]
    new = ScoreEntry(500, 9.0, "new")
    result = insert_score(entries, new)
    assert result.index(new) == 1
    assert len(entries) == 3


def test_insert_at_ends():
    entries = [ScoreEntry(900, 1.0, "a"), ScoreEntry(500, 2.0, "b")]
    top = ScoreEntry(1000, 1.0, "top")
    low = ScoreEntry(10, 1.0, "low")
    assert insert_score(entries, top)[0] == top
    assert insert_score(entries, low)[-1] == low
    assert insert_score([], low) == [low]


def test_update_round_trip(tmp_path):
    path = tmp_path / "scores.txt"
    returned = update_scoreboard(500, 12.5, "Bob", path)
    assert "500\t12.500\tBob\n" in path.read_text()
    stored = read_scores(path)
    assert stored == returned
    assert ScoreEntry(500, 12.5, "Bob") in stored
    scores = [e.score for e in stored]
    assert scores == sorted(scores, reverse=True)


def test_load_top_ten_limits(tmp_path):
    path = tmp_path / "scores.txt"
    for value in range(6):
        update_scoreboard(value * 100 + 50, 10.0, f"p{value}", path)
    top = load_top_ten(path)
    assert len(read_scores(path)) == 12
    assert len(top) == 10
    assert top == read_scores(path)[:10]


def test_malformed_line_raises(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text(HEADER + "abc\tdef\tname\n")
    with pytest.raises(ValueError):
        read_scores(path)