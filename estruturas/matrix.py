"""Matrix copying, flattening and transposition."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

Matrix = list[list[float]]

SAMPLE = ((1.0, 4.0, 5.0), (13.0, 3.0, 6.0), (9.0, 15.0, 0.0))


def _column_count(matrix: Sequence[Sequence[float]]) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows have different lengths")
    return widths.pop() if widths else 0


def copy_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return an independent copy of a rectangular matrix."""
    _column_count(matrix)
    return [list(row) for row in matrix]


def flatten(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Return the items of a rectangular matrix in row-major order."""
    _column_count(matrix)
    return [value for row in matrix for value in row]


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a rectangular matrix."""
    _column_count(matrix)
    return [list(column) for column in zip(*matrix)]


def transpose_flat(values: Sequence[float], rows: int, columns: int) -> list[float]:
    """Transpose a row-major ``rows`` x ``columns`` matrix stored flat.

    The result is the row-major form of the ``columns`` x ``rows`` transpose.
    """
    if rows < 0 or columns < 0 or len(values) != rows * columns:
        raise ValueError("flat matrix size does not match its dimensions")
    return [value for column in range(columns) for value in values[column::columns]]


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a matrix one row per line, one decimal place per value."""
    return "\n".join("  ".join(f"{value:.1f}" for value in row) for row in matrix)


def format_flat(values: Sequence[float], columns: int) -> str:
    """Render a row-major flat matrix with ``columns`` values per line."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    if len(values) % columns:
        raise ValueError("flat matrix size is not a multiple of the column count")
    rows = [values[start:start + columns] for start in range(0, len(values), columns)]
    return format_matrix(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a sample matrix and its transpose."""
    parser = argparse.ArgumentParser(
        prog="matriz", description="Show a matrix and its transpose."
    )
    parser.add_argument(
        "--flat", action="store_true", help="transpose the row-major flat form"
    )
    args = parser.parse_args(argv)

    print("\nMatriz Original:\n")
    print(format_matrix(SAMPLE))
    print("\nMatriz Transposta:\n")
    rows, columns = len(SAMPLE), len(SAMPLE[0])
    if args.flat:
        print(format_flat(transpose_flat(flatten(SAMPLE), rows, columns), rows))
    else:
        print(format_matrix(transpose(SAMPLE)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())