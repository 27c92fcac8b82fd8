"""A queue of rectangles with their measures and areas."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from estruturas.fifo import Queue


@dataclass(frozen=True)
class Rectangle:
    base: float
    height: float

    def area(self) -> float:
        """Return base times height."""
        return self.base * self.height


def format_rectangles(rectangles: Iterable[Rectangle]) -> str:
    """Describe each rectangle, numbered from 1, with its area."""
    entries = [
        f"\nRetangulo {number}:\n"
        f" -Base = {rect.base:.2f}m\n"
        f" -Altura = {rect.height:.2f}m\n"
        f" -Area = {rect.area():.2f}m2\n"
        for number, rect in enumerate(rectangles, start=1)
    ]
    return "".join(entries) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for rectangles, queue them and print their measures."""
    parser = argparse.ArgumentParser(
        prog="retangulos", description="Queue rectangles and show their areas."
    )
    parser.parse_args(argv)

    queue = Queue()
    try:
        quantity = int(
            input("Digite a quantidade de retangulos para adicionar a fila: ")
        )
        for number in range(1, quantity + 1):
            parts = input(
                f"Digite a base e a altura do {number}o retangulo:\n"
            ).split()
            if len(parts) != 2:
                raise ValueError("expected two numbers")
            base, height = (float(part) for part in parts)
            queue.enqueue(Rectangle(base, height))
    except (ValueError, EOFError):
        print("Entrada invalida", file=sys.stderr)
        return 1

    print(format_rectangles(queue), end="")
    print("Fim do programa.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())