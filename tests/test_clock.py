import io
import math
import re
import sys

import pytest

from golemlab.clock import CENTER, STROKE, main, render_clock_svg

LINE_RE = re.compile(
    r'<line x1="(\d+)" x2="([-\d.]+)" y1="(\d+)" y2="([-\d.]+)" '
    r'stroke="black" stroke-width="(\d+)"/>'
)


def _lines(svg):
    return [
        (float(m.group(2)), float(m.group(4)), int(m.group(5)))
        for m in LINE_RE.finditer(svg)
    ]


def _hands(svg):
    return _lines(svg)[60:]


def test_header_is_fixed():
    svg = render_clock_svg(0, 0, 0)
    head = svg.splitlines()[:2]
    assert head[0] == '<?xml version="1.0" standalone="no"?>'
    assert head[1] == (
        '<svg width="1024" height="1024" version="1.1" '
        'xmlns="http://www.w3.org/2000/svg">'
    )
    assert svg.endswith("</svg>")


def test_line_count_and_tick_widths():
    lines = _lines(render_clock_svg(10, 10, 30))
    assert len(lines) == 63
    widths = [width for _, _, width in lines[:60]]
    assert widths.count(STROKE // 3 * 2) == 4
    assert widths.count(STROKE // 3) == 8
    assert widths.count(STROKE // 8) == 48
    assert [width for _, _, width in lines[60:]] == [STROKE // 4, STROKE // 3, STROKE // 2]


def test_ticks_lie_on_ring():
    for x2, y2, _ in _lines(render_clock_svg(1, 2, 3))[:60]:
        assert math.hypot(x2 - CENTER, y2 - CENTER) == pytest.approx(CENTER - STROKE, abs=1e-3)


def test_midnight_hands_point_up():
    for x2, y2, _ in _hands(render_clock_svg(0, 0, 0)):
        assert x2 == pytest.approx(CENTER)
        assert y2 < CENTER


@pytest.mark.parametrize("index,length", [(0, 0.8), (1, 0.7), (2, 0.6)])
def test_hand_lengths(index, length):
    x2, y2, _ = _hands(render_clock_svg(7, 23, 41))[index]
    assert math.hypot(x2 - CENTER, y2 - CENTER) == pytest.approx(CENTER * length, abs=1e-3)


def test_quarter_past_points_right():
    second_hand, minute_hand, _ = _hands(render_clock_svg(0, 15, 15))
    assert second_hand[1] == pytest.approx(CENTER, abs=1e-3)
    assert second_hand[0] > CENTER
    hour_hand = _hands(render_clock_svg(3, 0, 0))[2]
    assert hour_hand[1] == pytest.approx(CENTER, abs=1e-3)
    assert hour_hand[0] > CENTER


def test_seconds_move_minute_hand():
    whole = _hands(render_clock_svg(0, 30, 0))[1]
    later = _hands(render_clock_svg(0, 30, 30))[1]
    assert later[0] < whole[0]


def test_main_writes_file(tmp_path, monkeypatch):
    target = tmp_path / "clock.svg"
    monkeypatch.setattr(sys, "stdin", io.StringIO("4 5 6\n"))
    assert main([str(target)]) == 0
    assert target.read_text() == render_clock_svg(4, 5, 6)


def test_main_rejects_short_input(tmp_path, monkeypatch):
    target = tmp_path / "clock.svg"
    monkeypatch.setattr(sys, "stdin", io.StringIO("4 5\n"))
    assert main([str(target)]) == 1
    assert not target.exists()