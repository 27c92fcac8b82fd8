"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Queue:
    """A FIFO queue; iteration runs from the front to the back."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)