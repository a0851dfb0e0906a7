"""Application use cases package."""

from .add_expense import AddExpenseUseCase
from .get_split_balances import GetSplitBalancesUseCase, SplitBalancesView
from .record_settlement import RecordSettlementUseCase

__all__ = [
    "AddExpenseUseCase",
    "GetSplitBalancesUseCase",
    "SplitBalancesView",
    "RecordSettlementUseCase",
]
