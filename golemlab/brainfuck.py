"""A small interpreter for the eight-instruction tape language."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

MEMORY_SIZE = 32768
EOF_VALUE = 255

DEFAULT_PROGRAM = (
    "+++++++[>+++++++++++<-]>.>+++++++++[>+++++++++++<-]>--.>++++++++++"
    "[>+++++++++++<-]>++++++.>++++++++++[>++++++++++<-]>+.>++++[>++++++++<-]>."
    ">+++++++++[>++++++++++<-]>.>+++++++++[>+++++++++++<-]>--.>++++++++++"
    "[>+++++++++++<-]>--.>+++++++++[>+++++++++++<-]>--.>++++++++++"
    "[>+++++++++++<-]>."
)


def _match_brackets(code: str) -> tuple[dict[int, int], dict[int, int]]:
    """Map each '[' to its ']' and back; an unmatched ']' is an error."""
    forward: dict[int, int] = {}
    backward: dict[int, int] = {}
    open_positions: list[int] = []
    for pos, op in enumerate(code):
        if op == "[":
            open_positions.append(pos)
        elif op == "]":
            if not open_positions:
                raise ValueError(f"unmatched ']' at position {pos}")
            start = open_positions.pop()
            forward[start] = pos
            backward[pos] = start
    return forward, backward


def run(code: str, input_data: Iterable[int] = b"") -> bytes:
    """Run a program and return everything it printed.

    Cells are bytes that wrap around. Reading past the end of the input
    stores 255. Execution stops at the end of the program or when the
    data pointer leaves the tape.
    """
    forward, backward = _match_brackets(code)
    memory = bytearray(MEMORY_SIZE)
    source: Iterator[int] = iter(input_data)
    output = bytearray()
    end = len(code)
    pc = 0
    ptr = 0
    while pc < end and 0 <= ptr < MEMORY_SIZE:
        op = code[pc]
        if op == ">":
            ptr += 1
        elif op == "<":
            ptr -= 1
        elif op == "+":
            memory[ptr] = (memory[ptr] + 1) & 0xFF
        elif op == "-":
            memory[ptr] = (memory[ptr] - 1) & 0xFF
        elif op == ".":
            output.append(memory[ptr])
        elif op == ",":
            memory[ptr] = next(source, EOF_VALUE) & 0xFF
        elif op == "[":
            if memory[ptr] == 0:
                pc = forward.get(pc, end)
        elif op == "]":
            pc = backward[pc] - 1
        pc += 1
    return bytes(output)


def _stdin_bytes() -> Iterator[int]:
    while chunk := sys.stdin.buffer.read(1):
        yield chunk[0]


def main(argv: list[str] | None = None) -> int:
    """Run the program file named on the command line, or the built-in one."""
    args = sys.argv[1:] if argv is None else argv
    code = Path(args[0]).read_text() if args else DEFAULT_PROGRAM
    try:
        result = run(code, _stdin_bytes())
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.write(result)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())