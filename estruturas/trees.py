"""Binary trees and binary search trees."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def height(node: Optional[Node]) -> int:
    """Return the height of a tree; an empty tree has height -1."""
    if node is None:
        return -1
    return 1 + max(height(node.left), height(node.right))


def contains(node: Optional[Node], value: Any) -> bool:
    """Return True when any node of the tree holds ``value``."""
    if node is None:
        return False
    return node.value == value or contains(node.left, value) or contains(node.right, value)


def format_preorder(node: Optional[Node]) -> str:
    """Render the tree root first, each node as ``<value children>``."""
    if node is None:
        return ""
    return f"<{node.value} {format_preorder(node.left)}{format_preorder(node.right)}>"


def format_inorder(node: Optional[Node]) -> str:
    """Render the tree left subtree first, then the node and its right subtree."""
    if node is None:
        return ""
    return f"{format_inorder(node.left)}<{node.value} {format_inorder(node.right)}>"


def _remove(node: Optional[Node], value: Any) -> tuple[Optional[Node], bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _remove(node.left, value)
        return node, removed
    if value > node.value:
        node.right, removed = _remove(node.right, value)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    predecessor = node.left
    while predecessor.right is not None:
        predecessor = predecessor.right
    node.value = predecessor.value
    node.left, _ = _remove(node.left, predecessor.value)
    return node, True


class SearchTree:
    """A binary search tree of distinct values: smaller left, greater right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False when it was already present."""
        if self.root is None:
            self.root = Node(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def remove(self, value: Any) -> bool:
        """Remove ``value``; return whether it was present.

        A node with two children takes its in-order predecessor's value.
        """
        self.root, removed = _remove(self.root, value)
        if removed:
            self._size -= 1
        return removed

    def find(self, value: Any) -> Optional[Node]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        pending: list[Node] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Grow a sample binary tree step by step and print it."""
    parser = argparse.ArgumentParser(
        prog="arvore", description="Build and print a sample binary tree."
    )
    parser.parse_args(argv)

    root = Node("a")
    print(format_preorder(root))
    root.left = Node("b", Node("d"), Node("e"))
    root.right = Node("c")
    print(format_preorder(root))
    root.right.left = Node("f", Node("g"), Node("h"))
    print(format_preorder(root))
    print(f"Altura da arvore = {height(root)}")
    print("Arvore liberada!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())