"""A binary min-heap used as a priority queue."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional


class MinHeap:
    """A priority queue whose smallest value is always at the root.

    Iteration yields the values in the heap's array order (level by level).
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(values)
        heapq.heapify(self._items)

    def push(self, value: Any) -> None:
        """Insert ``value``, sifting it up to its place."""
        heapq.heappush(self._items, value)

    def pop(self) -> Any:
        """Remove and return the smallest value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._items)

    def peek(self) -> Any:
        """Return the smallest value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._items) + "]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Insert and remove sample values, printing the heap between steps."""
    parser = argparse.ArgumentParser(
        prog="heap", description="Show a min-heap growing and shrinking."
    )
    parser.parse_args(argv)

    heap = MinHeap()
    for value in (1, 5, 4):
        heap.push(value)
    print(f"\nHeap atual: {heap}")
    for value in (8, 3, 7):
        heap.push(value)
    print(f"\nHeap atual: {heap}")
    heap.pop()
    heap.pop()
    print(f"\nHeap atual: {heap}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())