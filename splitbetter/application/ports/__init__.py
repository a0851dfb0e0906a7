"""Application ports package."""

from .database import DatabaseEnginePort
from .exchange_rates import ExchangeRatePort
from .expense_repository import ExpenseRepositoryPort
from .split_repository import SplitRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "ExchangeRatePort",
    "ExpenseRepositoryPort",
    "SplitRepositoryPort",
]
