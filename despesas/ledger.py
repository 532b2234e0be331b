"""The list of expenses, with rendering and binary persistence."""

from __future__ import annotations

import os
from functools import partial
from typing import Iterable, Iterator, Union

from despesas.expense import RECORD_SIZE, Expense

PathLike = Union[str, "os.PathLike[str]"]

_SEPARATOR = "--------------------------"
_DOUBLE_SEPARATOR = "=========================="


class ExpenseList:
    """Expenses kept newest first."""

    def __init__(self, expenses: Iterable[Expense] = ()) -> None:
        self._items: list[Expense] = list(expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, expense: Expense) -> None:
        """Put an expense at the head of the list."""
        self._items.insert(0, expense)

    def remove(self, position: int) -> Expense:
        """Remove and return the expense at a 1-based position."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"no expense at position {position}")
        return self._items.pop(position - 1)

    def total(self) -> float:
        """Return the sum of all expense values."""
        return sum(expense.value for expense in self._items)

    def render(self) -> str:
        """Return the printable listing of the expenses and their total."""
        lines = ["", "--- LISTA DE DESPESAS ---"]
        if not self._items:
            lines.append("Nenhuma despesa cadastrada.")
            return "\n".join(lines) + "\n"
        for number, expense in enumerate(self._items, start=1):
            lines += [
                _SEPARATOR,
                f"Despesa #{number}",
                f"Nome da despesa: {expense.description}",
                f"Valor: R$ {expense.value:.2f}",
                f"Data: {expense.day:02d}/{expense.month:02d}/{expense.year}",
            ]
        lines += [
            _DOUBLE_SEPARATOR,
            f"TOTAL DAS DESPESAS: R$ {self.total():.2f}",
            _DOUBLE_SEPARATOR,
        ]
        return "\n".join(lines) + "\n"

    def save(self, path: PathLike) -> None:
        """Write every expense, in list order, as binary records."""
        with open(path, "wb") as stream:
            for expense in self._items:
                stream.write(expense.to_bytes())

    @classmethod
    def load(cls, path: PathLike) -> ExpenseList:
        """Read records from a file, each inserted at the head; a missing file gives an empty list."""
        ledger = cls()
        try:
            stream = open(path, "rb")
        except FileNotFoundError:
            return ledger
        with stream:
            for chunk in iter(partial(stream.read, RECORD_SIZE), b""):
                if len(chunk) < RECORD_SIZE:
                    break
                ledger.insert(Expense.from_bytes(chunk))
        return ledger