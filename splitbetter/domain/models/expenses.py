"""Domain models for expenses and their splitting rules."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from splitbetter.utils.decimal_utils import coerce_decimal

from .splits import ParticipantId


class SplitRuleType(str, Enum):
    """Tag of the rule used to share an expense."""

    EQUAL = "Equal"
    CUSTOM = "Custom"


class ExpenseKind(str, Enum):
    """Whether an expense is a real spend or a transfer between people."""

    REGULAR = "Regular"
    SETTLEMENT = "Settlement"


@dataclass(frozen=True)
class EqualSplit:
    """Divide the amount evenly across the expense participants."""

    @property
    def rule_type(self) -> SplitRuleType:
        return SplitRuleType.EQUAL


@dataclass(frozen=True)
class CustomSplit:
    """Explicit per-participant amounts.

    Attributes:
        custom_amounts: Amount owed by each participant. Entries are expected
            to sum to the expense amount but this is not enforced here.
    """

    custom_amounts: Mapping[ParticipantId, Decimal] = field(
        default_factory=dict
    )

    @property
    def rule_type(self) -> SplitRuleType:
        return SplitRuleType.CUSTOM


SplitRule = EqualSplit | CustomSplit


@dataclass(frozen=True)
class Expense:
    """A single financial event belonging to a split.

    Attributes:
        amount: Non-negative amount in the split currency.
        paid_by: Participant who fronted the money.
        participants: Participants sharing the expense, or None to fall back
            on the split participants.
        rule: Splitting rule variant.
        kind: Regular spend or settlement transfer.
        expense_id: Identifier in the backing store, when persisted.
        title: Free-form description.
        original_amount: Amount before currency conversion, if any.
        original_currency: Currency the amount was entered in, if converted.
        conversion_rate: Rate applied to reach the split currency.
    """

    amount: Decimal
    paid_by: ParticipantId
    participants: tuple[ParticipantId, ...] | None = None
    rule: SplitRule = field(default_factory=EqualSplit)
    kind: ExpenseKind = ExpenseKind.REGULAR
    expense_id: str | None = None
    title: str = ""
    original_amount: Decimal | None = None
    original_currency: str | None = None
    conversion_rate: Decimal | None = None

    @property
    def is_settlement(self) -> bool:
        """Return True for settlement transfers."""
        return self.kind is ExpenseKind.SETTLEMENT


def parse_split_rule(
    split_type: str | None,
    custom_amounts: Mapping[str, object] | None,
) -> SplitRule:
    """Build a rule variant from raw stored values.

    ``"Custom"`` with a mapping yields a CustomSplit. Anything else, including
    the legacy ``"Equally"`` label or a custom label without amounts, yields an
    EqualSplit.

    Args:
        split_type: Raw rule label.
        custom_amounts: Raw participant to amount mapping.

    Returns:
        SplitRule: Parsed rule variant.
    """
    if (
        split_type == SplitRuleType.CUSTOM.value
        and isinstance(custom_amounts, Mapping)
    ):
        return CustomSplit(
            custom_amounts={
                str(participant): coerce_decimal(amount)
                for participant, amount in custom_amounts.items()
            }
        )
    return EqualSplit()


def parse_expense_kind(kind: str | None) -> ExpenseKind:
    """Return the expense kind for a raw label, defaulting to Regular."""
    if kind == ExpenseKind.SETTLEMENT.value:
        return ExpenseKind.SETTLEMENT
    return ExpenseKind.REGULAR


__all__ = [
    "SplitRuleType",
    "ExpenseKind",
    "EqualSplit",
    "CustomSplit",
    "SplitRule",
    "Expense",
    "parse_split_rule",
    "parse_expense_kind",
]
