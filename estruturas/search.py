"""Linear and binary search over sequences of comparable values."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any, Optional

SORTED_VALUES = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
UNSORTED_VALUES = (1, 4, 3, 5, 7, 8, 5, 10, 9, 6)

StepCallback = Callable[[int, int, int], None]


def linear_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the sorted ``values``, or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        middle = (start + end) // 2
        if target > values[middle]:
            start = middle + 1
        elif target < values[middle]:
            end = middle - 1
        else:
            return middle
    return None


def _bisect(
    values: Sequence[Any],
    target: Any,
    start: int,
    end: int,
    on_step: Optional[StepCallback],
) -> Optional[int]:
    middle = (start + end) // 2
    if on_step is not None:
        on_step(start, middle, end)
    if start > end:
        return None
    if target == values[middle]:
        return middle
    if target > values[middle]:
        return _bisect(values, target, middle + 1, end, on_step)
    return _bisect(values, target, start, middle - 1, on_step)


def binary_search_recursive(
    values: Sequence[Any],
    target: Any,
    start: int = 0,
    end: Optional[int] = None,
) -> Optional[int]:
    """Search the sorted slice ``values[start:end + 1]`` recursively.

    Returns the index of ``target`` or None when it is absent.
    """
    if end is None:
        end = len(values) - 1
    if start < 0 or end >= len(values):
        raise ValueError("search bounds are outside the sequence")
    return _bisect(values, target, start, end, None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Look a number up in a fixed vector and report its position."""
    parser = argparse.ArgumentParser(
        prog="busca", description="Search a number in a fixed vector."
    )
    parser.add_argument("number", nargs="?", type=int, help="number to search for")
    parser.add_argument(
        "--method",
        choices=("linear", "binary", "recursive"),
        default="binary",
        help="search algorithm to use",
    )
    args = parser.parse_args(argv)

    number = args.number
    if number is None:
        try:
            number = int(input("Digite um numero: "))
        except (ValueError, EOFError):
            print("Entrada invalida", file=sys.stderr)
            return 1

    if args.method == "linear":
        result = linear_search(UNSORTED_VALUES, number)
    elif args.method == "binary":
        result = binary_search(SORTED_VALUES, number)
    else:

        def show(start: int, middle: int, end: int) -> None:
            print(f"\nInicio = {start + 1} | Meio = {middle + 1} | Fim = {end + 1}")

        result = _bisect(SORTED_VALUES, number, 0, len(SORTED_VALUES) - 1, show)

    if result is not None:
        print(f"Numero encontrado na posicao {result}")
    else:
        print("Numero nao encontrado")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())