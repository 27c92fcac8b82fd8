"""Hash functions, collision probes and an open-addressing hash table."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

MULTIPLICATION_FACTOR = 0.62457513781
UNIVERSAL_PRIME = 23
FOLD_BITS = 10
_UNSIGNED_MASK = 0xFFFFFFFF
NAME_LENGTH = 40
EMAIL_LENGTH = 80
TABLE_SIZE = 17
SEPARATOR = "------------------------------------"

HashFunction = Callable[[int, int], int]


def universal_hash(size: int, key: int, rng: Any = None) -> int:
    """Hash ``key`` with coefficients drawn at random below the prime 23."""
    source = random if rng is None else rng
    first = source.randrange(UNIVERSAL_PRIME + 1)
    second = source.randrange(UNIVERSAL_PRIME)
    return ((first * key + second) % UNIVERSAL_PRIME) % size


def fold_hash(size: int, key: int) -> int:
    """Fold the key: XOR its bits above the tenth with its low bits."""
    high = key >> FOLD_BITS
    low = key & (size - 1)
    return high ^ low


def multiplication_hash(size: int, key: int) -> int:
    """Scale the fractional part of ``key`` times a constant to the table size."""
    fraction = math.modf(key * MULTIPLICATION_FACTOR)[0] % 1.0
    return int(fraction * size)


def division_hash(size: int, key: int) -> int:
    """Reduce the key, read as an unsigned 32-bit number, modulo the size."""
    return (key & _UNSIGNED_MASK) % size


def double_hash(first: int, position: int, size: int) -> int:
    """Next probe from the previous slot ``first`` on attempt ``position``."""
    second = multiplication_hash(size, position) + 1
    return first * position + second


def quadratic_probe(position: int, attempt: int, size: int) -> int:
    """Next probe by a second-degree step in the attempt number."""
    position = position + 2 * attempt + 5 * attempt * attempt
    return (position & _UNSIGNED_MASK) % size


def linear_probe(position: int, size: int) -> int:
    """Next probe: the following slot, wrapping around."""
    return ((position & _UNSIGNED_MASK) + 1) % size


class TableFullError(Exception):
    """Raised when a value cannot be placed in the table."""


class HashTable:
    """Fixed-size open-addressing table that resolves collisions by double hashing."""

    def __init__(self, size: int, hash_function: Optional[HashFunction] = None) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._slots: list[Optional[tuple[int, Any]]] = [None] * size
        self._count = 0
        if hash_function is None:
            seed = random.randrange(2**32)

            def hash_function(table_size: int, key: int) -> int:
                return universal_hash(table_size, key, random.Random(seed))

        self._hash = hash_function

    def _home(self, key: int) -> int:
        return self._hash(self.size, key) % self.size

    def _probe(self, key: int) -> Iterator[int]:
        position = self._home(key)
        for attempt in range(self.size):
            yield position
            position = double_hash(position, attempt, self.size) % self.size

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, probing past occupied slots.

        Raises TableFullError when the table is full or no free slot is reached.
        """
        if self._count == self.size:
            raise TableFullError("the table is full")
        for position in self._probe(key):
            slot = self._slots[position]
            if slot is None:
                self._slots[position] = (key, value)
                self._count += 1
                return
            if slot[0] == key:
                self._slots[position] = (key, value)
                return
        raise TableFullError(f"no free slot found for key {key}")

    def search(self, key: int) -> Optional[Any]:
        """Return the value stored under ``key``, or None."""
        for position in self._probe(key):
            slot = self._slots[position]
            if slot is None:
                return None
            if slot[0] == key:
                return slot[1]
        return None

    def insert_direct(self, key: int, value: Any) -> None:
        """Store ``value`` in the key's home slot only.

        Raises TableFullError when that slot already holds another key.
        """
        position = self._home(key)
        slot = self._slots[position]
        if slot is not None and slot[0] != key:
            raise TableFullError(f"slot {position} is already occupied")
        if slot is None:
            self._count += 1
        self._slots[position] = (key, value)

    def search_direct(self, key: int) -> Optional[Any]:
        """Return the value in the key's home slot if it belongs to ``key``."""
        slot = self._slots[self._home(key)]
        if slot is not None and slot[0] == key:
            return slot[1]
        return None

    def items(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(key, value)`` pairs in slot order."""
        return (slot for slot in self._slots if slot is not None)

    def __iter__(self) -> Iterator[int]:
        """Yield the stored keys in slot order."""
        return (key for key, _ in self.items())

    def __len__(self) -> int:
        return self._count


@dataclass(frozen=True)
class Student:
    registration: int
    group: str
    name: str
    email: str

    def __post_init__(self) -> None:
        if len(self.group) != 1:
            raise ValueError("group must be a single character")
        if len(self.name) > NAME_LENGTH:
            raise ValueError(f"name is longer than {NAME_LENGTH} characters")
        if len(self.email) > EMAIL_LENGTH:
            raise ValueError(f"email is longer than {EMAIL_LENGTH} characters")


def format_students(table: HashTable) -> str:
    """Describe every student in the table, in slot order."""
    entries = [
        f"\nNome: {student.name}\n"
        f"Email: {student.email}\n"
        f"Turma: {student.group}\n"
        f"Matricula: {student.registration}\n"
        for _, student in table.items()
    ]
    return f"{SEPARATOR}\nALUNOS:\n" + "".join(entries)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read students, store them by registration number and list them."""
    parser = argparse.ArgumentParser(
        prog="hash", description="Store students in a hash table."
    )
    parser.add_argument("--size", type=int, default=TABLE_SIZE, help="table size")
    args = parser.parse_args(argv)

    table = HashTable(args.size)
    try:
        quantity = int(input("Digite a quantidade de alunos que serao adicionados: "))
        for number in range(1, quantity + 1):
            print(f"\nAluno {number}:\n")
            name = input("Nome: ").strip()
            email = input("Email: ").strip()
            group = input("Turma: ").strip()[:1]
            registration = int(input("Matricula: "))
            student = Student(registration, group, name, email)
            try:
                table.insert(student.registration, student)
            except TableFullError:
                print("Falha na insercao.")
    except (ValueError, EOFError):
        print("Entrada invalida", file=sys.stderr)
        return 1

    print(format_students(table), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())