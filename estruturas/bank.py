"""A bank queue driven by single-letter operations."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from estruturas.fifo import Queue

MAX_OPERATIONS = 40


@dataclass
class RoundResult:
    """What one line of operations did to the queue."""

    inserted: list[int] = field(default_factory=list)
    served: list[int] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)
    empty_attempts: int = 0
    stop: bool = False


class BankQueue:
    """Customers get increasing ticket numbers and are served in arrival order."""

    def __init__(self) -> None:
        self.queue = Queue()
        self.next_ticket = 1

    def process(self, operations: str) -> RoundResult:
        """Apply each letter: I inserts, A serves, S asks to stop.

        Every letter of the line is applied, even after an S.
        """
        result = RoundResult()
        for op in operations.rstrip("\r\n"):
            key = op.upper()
            if key == "S":
                result.stop = True
            elif key == "I":
                self.queue.enqueue(self.next_ticket)
                result.inserted.append(self.next_ticket)
                self.next_ticket += 1
            elif key == "A":
                if self.queue.is_empty():
                    result.empty_attempts += 1
                else:
                    result.served.append(self.queue.dequeue())
            else:
                result.invalid.append(op)
        return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive bank queue until asked to stop."""
    parser = argparse.ArgumentParser(
        prog="banco", description="Simulate a bank customer queue."
    )
    parser.parse_args(argv)

    bank = BankQueue()
    while True:
        print(f"\nFila atual: {bank.queue}")
        print("\nI - Inserir cliente na fila\nA - Atender cliente da fila\nS - Sair")
        try:
            line = input(
                f"Digite as operacoes que serao realizadas (MAX = {MAX_OPERATIONS}): "
            )
        except EOFError:
            break
        result = bank.process(line[: MAX_OPERATIONS - 1])
        for _ in result.invalid:
            print("Caractere invalido, tente novamente.")
        for _ in range(result.empty_attempts):
            print("A fila esta vazia.")
        print()
        if result.inserted:
            print(f"Clientes inseridos = {len(result.inserted)}")
        if result.served:
            print(f"Clientes atendidos = {len(result.served)}")
        if result.stop:
            break
    print("Fim do programa.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())