"""A linked list of geometric figures entered interactively."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

SEPARATOR = "----------------------------"


@dataclass(frozen=True)
class Circle:
    radius: float
    code: ClassVar[str] = "CIR"


@dataclass(frozen=True)
class Rectangle:
    base: float
    height: float
    code: ClassVar[str] = "RET"


@dataclass(frozen=True)
class Triangle:
    base: float
    height: float
    code: ClassVar[str] = "TRI"


Figure = Union[Circle, Rectangle, Triangle]

_KINDS: dict[str, type] = {"T": Triangle, "R": Rectangle, "C": Circle}


class FigureList:
    """Figures kept newest first, as when each is linked in at the front."""

    def __init__(self) -> None:
        self._figures: deque[Figure] = deque()

    def add(self, figure: Figure) -> None:
        """Place ``figure`` at the front of the list."""
        self._figures.appendleft(figure)

    def __iter__(self) -> Iterator[Figure]:
        return iter(self._figures)

    def __len__(self) -> int:
        return len(self._figures)


def figure_kind(letter: str) -> Optional[type]:
    """Return the figure class for a menu letter, or None for 'N' (none).

    Raises ValueError for any other letter.
    """
    key = letter.strip().upper()
    if key == "N":
        return None
    try:
        return _KINDS[key]
    except KeyError:
        raise ValueError(f"unknown figure letter: {letter!r}") from None


def _measures(figure: Figure) -> str:
    if isinstance(figure, Circle):
        return f" - Raio = {figure.radius:.2f}m\n"
    return f" - Base = {figure.base:.2f}m\n - Altura = {figure.height:.2f}m\n"


def format_figures(figures: Iterable[Figure]) -> str:
    """Describe each figure, numbered from 1, between separator lines."""
    entries = [
        f"\nFigura {number}:\n - Tipo: {figure.code}\n{_measures(figure)}"
        for number, figure in enumerate(figures, start=1)
    ]
    if not entries:
        return ""
    return SEPARATOR + "".join(entries) + SEPARATOR


def _read_floats(prompt: str, count: int) -> list[float]:
    parts = input(prompt).split()
    if len(parts) != count:
        raise ValueError(f"expected {count} numbers")
    return [float(part) for part in parts]


def _read_figure(kind: type) -> Figure:
    if kind is Circle:
        (radius,) = _read_floats("Digite o raio do circulo:\n", 1)
        return Circle(radius)
    name = "retangulo" if kind is Rectangle else "triangulo"
    base, height = _read_floats(f"Digite a base e a altura do {name}:\n", 2)
    return kind(base, height)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for figures, then print the list from the last one entered."""
    parser = argparse.ArgumentParser(
        prog="figuras", description="Build a list of geometric figures."
    )
    parser.parse_args(argv)

    figures = FigureList()
    try:
        quantity = int(
            input("Digite a quantidade de figuras que serao inseridas na lista:\n")
        )
        for _ in range(quantity):
            letter = input(
                "\nT = Triangulo\nR = Retangulo\nC = Circulo\nN = nenhum\n\n"
                "Digite o caractere da figura que deseja alocar: "
            )
            try:
                kind = figure_kind(letter)
            except ValueError:
                print("Caractere invalido.")
                continue
            if kind is None:
                break
            figures.add(_read_figure(kind))
    except (ValueError, EOFError):
        print("Entrada invalida", file=sys.stderr)
        return 1

    print("\nFim da manutencao da lista!")
    print("Lista final:")
    print(format_figures(figures), end="")
    print("\nFim do programa.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())