"""Check that brackets in an expression are balanced."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import IntEnum
from typing import Optional

from estruturas.stack import Stack

MAX_LENGTH = 99

_PAIRS = {")": "(", "]": "[", "}": "{"}


class SymbolKind(IntEnum):
    CLOSE = -1
    OTHER = 0
    OPEN = 1


def opening_for(closing: str) -> str:
    """Return the opening bracket that matches ``closing``."""
    try:
        return _PAIRS[closing]
    except KeyError:
        raise ValueError(f"not a closing bracket: {closing!r}") from None


def symbol_kind(char: str) -> SymbolKind:
    """Classify a character as an opening bracket, closing bracket or other."""
    if char in _PAIRS.values():
        return SymbolKind.OPEN
    if char in _PAIRS:
        return SymbolKind.CLOSE
    return SymbolKind.OTHER


def is_balanced(expression: str) -> bool:
    """Return True when every bracket is closed by its partner in order."""
    pending = Stack()
    for char in expression:
        kind = symbol_kind(char)
        if kind is SymbolKind.OPEN:
            pending.push(char)
        elif kind is SymbolKind.CLOSE:
            if pending.is_empty() or pending.pop() != opening_for(char):
                return False
    return pending.is_empty()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Report whether an expression's brackets are balanced."""
    parser = argparse.ArgumentParser(
        prog="expressao", description="Check bracket balance in an expression."
    )
    parser.add_argument("expression", nargs="?", help="expression to check")
    args = parser.parse_args(argv)

    expression = args.expression
    if expression is None:
        try:
            expression = input("Digite uma expressao matematica: ")[:MAX_LENGTH]
        except EOFError:
            expression = ""

    if is_balanced(expression):
        print("A expressao esta correta")
    else:
        print("A expressao esta incorreta")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())