"""Domain models package."""

from .balances import (
    ParticipantPosition,
    ParticipantStatus,
    SettlementInstruction,
    SplitBalancesView,
    SplitSummary,
    UserSettlementSummary,
)
from .expenses import (
    CustomSplit,
    EqualSplit,
    Expense,
    ExpenseKind,
    SplitRule,
    SplitRuleType,
    parse_expense_kind,
    parse_split_rule,
)
from .splits import ParticipantId, Split

__all__ = [
    "ParticipantId",
    "Split",
    "SplitRuleType",
    "ExpenseKind",
    "EqualSplit",
    "CustomSplit",
    "SplitRule",
    "Expense",
    "parse_split_rule",
    "parse_expense_kind",
    "SettlementInstruction",
    "ParticipantStatus",
    "ParticipantPosition",
    "SplitSummary",
    "UserSettlementSummary",
    "SplitBalancesView",
]
