"""Domain services package."""

from .balances import compute_net_balances, compute_settlements
from .liability import liability_for, resolve_participants
from .normalization import normalize_currency_code, normalize_participant_ids
from .settlements import build_settlement_expense
from .summaries import (
    compute_participant_positions,
    compute_participant_share,
    compute_split_summary,
    compute_total_spend,
    summarize_user_settlements,
)
from .validation import (
    ExpenseValidationError,
    find_integrity_issues,
    validate_new_expense,
    warn_on_integrity_issues,
)

__all__ = [
    "resolve_participants",
    "liability_for",
    "compute_net_balances",
    "compute_settlements",
    "compute_total_spend",
    "compute_participant_share",
    "compute_split_summary",
    "compute_participant_positions",
    "summarize_user_settlements",
    "build_settlement_expense",
    "normalize_currency_code",
    "normalize_participant_ids",
    "ExpenseValidationError",
    "validate_new_expense",
    "find_integrity_issues",
    "warn_on_integrity_issues",
]
