"""Port for reading and writing the expenses of a split."""

from typing import Protocol

from splitbetter.domain.models import Expense


class ExpenseRepositoryPort(Protocol):
    """Port exposing the expense history of splits."""

    def fetch_expenses(self, split_id: str) -> list[Expense]:
        """Return every expense of the split, settlements included."""

    def add_expense(self, split_id: str, expense: Expense) -> str:
        """Persist the expense and return its identifier."""


__all__ = ["ExpenseRepositoryPort"]
