"""Domain package for business rules and core models."""

from .constants import CUSTOM_AMOUNT_TOLERANCE, SETTLEMENT_EPSILON
from .models import (
    CustomSplit,
    EqualSplit,
    Expense,
    ExpenseKind,
    ParticipantPosition,
    ParticipantStatus,
    SettlementInstruction,
    Split,
    SplitBalancesView,
    SplitRuleType,
    SplitSummary,
    UserSettlementSummary,
)
from .services import (
    ExpenseValidationError,
    build_settlement_expense,
    compute_net_balances,
    compute_settlements,
    compute_split_summary,
    compute_total_spend,
    liability_for,
    resolve_participants,
    validate_new_expense,
)

__all__ = [
    "CUSTOM_AMOUNT_TOLERANCE",
    "SETTLEMENT_EPSILON",
    "CustomSplit",
    "EqualSplit",
    "Expense",
    "ExpenseKind",
    "ParticipantPosition",
    "ParticipantStatus",
    "SettlementInstruction",
    "Split",
    "SplitBalancesView",
    "SplitRuleType",
    "SplitSummary",
    "UserSettlementSummary",
    "ExpenseValidationError",
    "build_settlement_expense",
    "compute_net_balances",
    "compute_settlements",
    "compute_split_summary",
    "compute_total_spend",
    "liability_for",
    "resolve_participants",
    "validate_new_expense",
]
