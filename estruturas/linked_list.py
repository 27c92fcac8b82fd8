"""Singly linked, circular and doubly linked lists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    next: Optional[_DoubleNode] = None
    previous: Optional[_DoubleNode] = None


class LinkedList:
    """A singly linked list whose cheap insertion point is the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in reversed(list(values)):
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_sorted(self, value: Any) -> None:
        """Insert ``value`` before the first item that is not smaller than it."""
        previous: Optional[_Node] = None
        current = self._head
        while current is not None and current.value < value:
            previous, current = current, current.next
        node = _Node(value, current)
        if previous is None:
            self._head = node
        else:
            previous.next = node
        self._size += 1

    def remove(self, value: Any) -> bool:
        """Remove the first item equal to ``value``; return whether one was found."""
        previous: Optional[_Node] = None
        current = self._head
        while current is not None and current.value != value:
            previous, current = current, current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        self._size -= 1
        return True

    def find(self, value: Any) -> Optional[int]:
        """Return the position of the first item equal to ``value``, or None."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


class CircularList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in reversed(list(values)):
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front of the ring."""
        node = _Node(value)
        if self._head is None or self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._head
            self._tail.next = node
        self._head = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        """Walk the ring once, starting from the front."""
        node = self._head
        if node is None:
            return
        while True:
            yield node.value
            assert node.next is not None
            node = node.next
            if node is self._head:
                return

    def cycle(self) -> Iterator[Any]:
        """Walk the ring without end; yields nothing when the ring is empty."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


class DoublyLinkedList:
    """A linked list whose nodes point both forwards and backwards."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in reversed(list(values)):
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        node = _DoubleNode(value, next=self._head)
        if self._head is not None:
            self._head.previous = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def remove(self, value: Any) -> bool:
        """Remove the first item equal to ``value``; return whether one was found."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            return False
        if node.previous is None:
            self._head = node.next
        else:
            node.previous.next = node.next
        if node.next is None:
            self._tail = node.previous
        else:
            node.next.previous = node.previous
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.previous

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a sorted linked list from numbers and print it."""
    parser = argparse.ArgumentParser(
        prog="lista", description="Insert numbers into a sorted linked list."
    )
    parser.add_argument("numbers", nargs="*", type=int, help="numbers to insert")
    parser.add_argument(
        "--count", type=int, default=5, help="how many numbers to ask for"
    )
    args = parser.parse_args(argv)

    numbers = list(args.numbers)
    if not numbers:
        try:
            for _ in range(args.count):
                numbers.append(int(input("Digite um numero para adicionar a lista: ")))
        except (ValueError, EOFError):
            print("Entrada invalida", file=sys.stderr)
            return 1

    items = LinkedList()
    for number in numbers:
        items.insert_sorted(number)
    print(items)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())