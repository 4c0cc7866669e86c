"""A singly linked list of integers and a small demonstration of it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

SAMPLE_NUMBERS = (8, 14, 13, 17, 1, 19, 16, 5, 3, 11, 2, 15, 9, 10, 6, 22, 4, 7, 18, 27)


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: int) -> None:
        """Insert a value before the first element."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: int) -> None:
        """Insert a value after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def find(self, value: int) -> int | None:
        """Return the stored value equal to ``value``, or None if absent."""
        return next((item for item in self if item == value), None)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def sample_list() -> LinkedList:
    """Build the demonstration list by pushing each sample to the front."""
    numbers = LinkedList()
    for value in SAMPLE_NUMBERS:
        numbers.push_front(value)
    return numbers


def _format(numbers: LinkedList) -> str:
    return "".join(f"{value} " for value in numbers)


def _report(numbers: LinkedList, wanted: int) -> str:
    found = numbers.find(wanted)
    if found is None:
        return f'The value "{wanted}" is not in the list.'
    return f'The value "{wanted}" was found: {found}'


def main(argv: list[str] | None = None) -> int:
    """Print the demonstration of the list operations."""
    numbers = sample_list()
    out = sys.stdout
    out.write(_format(numbers))
    out.write(f"\n{len(numbers)}\n")
    for value in (21, 3, 2, 1):
        numbers.push_front(value)
    out.write(_format(numbers))
    numbers.append(69)
    out.write("\n" + _format(numbers))
    out.write("\n" + _report(numbers, 19))
    out.write("\n" + _report(numbers, 0))
    out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())