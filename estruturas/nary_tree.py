"""Trees whose nodes may have any number of children."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any, Optional


class TreeNode:
    """A tree node holding a value and an ordered collection of children."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self._children: deque[TreeNode] = deque()

    def insert(self, child: TreeNode) -> TreeNode:
        """Attach ``child`` as the first child of this node; return this node."""
        self._children.appendleft(child)
        return self

    def children(self) -> Iterator[TreeNode]:
        """Yield the children from first to last."""
        return iter(self._children)

    def height(self) -> int:
        """Return the number of edges on the longest path down; a leaf has 0."""
        return 1 + max((child.height() for child in self._children), default=-1)

    def __contains__(self, value: object) -> bool:
        return self.value == value or any(value in child for child in self._children)

    def __str__(self) -> str:
        inner = "".join(f"\n{child}" for child in self._children)
        return f"<{self.value} {inner}>"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Grow a sample tree step by step, printing it with its height."""
    parser = argparse.ArgumentParser(
        prog="arvore-n-aria", description="Build and print a sample n-ary tree."
    )
    parser.parse_args(argv)

    def show(number: int, tree: TreeNode) -> None:
        print(f"Arvore {number}:")
        print(tree)
        print(f"Altura da arvore = {tree.height()}")
        print()

    root = TreeNode("a")
    show(1, root)
    first = TreeNode("b")
    root.insert(first)
    show(2, root)
    first.insert(TreeNode("c"))
    first.insert(TreeNode("d"))
    show(3, root)
    print(int("b" in root))
    print(int("f" in root))
    print("Memoria liberada!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())