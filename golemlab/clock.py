"""Draw an analogue clock face for a given time as an SVG document."""

from __future__ import annotations

import math
import sys
from pathlib import Path

SIZE = 1024
CENTER = SIZE // 2
STROKE = 48
RIM_COLOR = "#FF0000"
FACE_COLOR = "#FFFFFF"
OUTPUT_FILE = "ora.svg"


def _line(x2: float, y2: float, width: int) -> str:
    return (
        f'\t<line x1="{CENTER}" x2="{x2:f}" y1="{CENTER}" y2="{y2:f}" '
        f'stroke="black" stroke-width="{width}"/>\n'
    )


def _tick_width(minute_mark: int) -> int:
    if minute_mark % 15 == 0:
        return STROKE // 3 * 2
    if minute_mark % 5 == 0:
        return STROKE // 3
    return STROKE // 8


def _hand(value: float, divisor: int, length: float, width: int) -> str:
    angle = value * math.pi / divisor
    return _line(
        CENTER * (1 + math.sin(angle) * length),
        CENTER * (1 - math.cos(angle) * length),
        width,
    )


def render_clock_svg(hour: float, minute: float, second: float) -> str:
    """Return the SVG text of a clock showing the given time.

    The minute and hour hands advance smoothly with the seconds and minutes.
    """
    minute = minute + second / 60
    hour = hour + minute / 60
    radius = CENTER - STROKE

    parts = [
        '<?xml version="1.0" standalone="no"?>\n'
        f'<svg width="{SIZE}" height="{SIZE}" version="1.1" '
        'xmlns="http://www.w3.org/2000/svg">\n',
        f'\t<circle cx="{CENTER}" cy="{CENTER}" r="{radius}" fill="{FACE_COLOR}"/>\n',
    ]
    for mark in range(60):
        angle = mark * math.pi / 30
        parts.append(
            _line(
                CENTER * (1 + math.sin(angle) * radius / CENTER),
                CENTER * (1 - math.cos(angle) * radius / CENTER),
                _tick_width(mark),
            )
        )
    parts.append(
        f'\t<circle cx="{CENTER}" cy="{CENTER}" r="{radius * radius // CENTER}" '
        f'fill="{FACE_COLOR}"/>'
    )
    parts.append(
        f'\t<circle cx="{CENTER}" cy="{CENTER}" r="{radius}" stroke="{RIM_COLOR}" '
        f'fill="transparent" stroke-width="{STROKE}"/>\n'
    )
    parts.append(_hand(second, 30, 0.8, STROKE // 4))
    parts.append(_hand(minute, 30, 0.7, STROKE // 3))
    parts.append(_hand(hour, 6, 0.6, STROKE // 2))
    parts.append(f'\t<circle cx="{CENTER}" cy="{CENTER}" r="{STROKE // 2}" fill="black"/>\n')
    parts.append("</svg>")
    return "".join(parts)


def _read_time() -> tuple[float, float, float]:
    tokens: list[str] = []
    for line in sys.stdin:
        tokens.extend(line.split())
        if len(tokens) >= 3:
            break
    if len(tokens) < 3:
        raise ValueError("expected hour, minute and second")
    hour, minute, second = (float(token) for token in tokens[:3])
    return hour, minute, second


def main(argv: list[str] | None = None) -> int:
    """Ask for a time on standard input and write the clock image."""
    args = sys.argv[1:] if argv is None else argv
    target = Path(args[0]) if args else Path(OUTPUT_FILE)
    print("Enter the hour, minute and second (separated by spaces)")
    try:
        hour, minute, second = _read_time()
    except ValueError as err:
        print(f"Invalid time: {err}", file=sys.stderr)
        return 1
    try:
        target.write_text(render_clock_svg(hour, minute, second))
    except OSError as err:
        print(f'Creating "{target}" failed: {err}', file=sys.stderr)
        return 1
    print(f'"{target}" was created successfully.')
    return 0


if __name__ == "__main__":
    sys.exit(main())