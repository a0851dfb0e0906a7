"""Domain models for balances and settlements."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .splits import ParticipantId, Split


@dataclass(frozen=True)
class SettlementInstruction:
    """Suggested transfer that moves balances toward zero.

    Attributes:
        from_participant: Debtor who should pay.
        to_participant: Creditor who should receive.
        amount: Strictly positive transfer amount.
    """

    from_participant: ParticipantId
    to_participant: ParticipantId
    amount: Decimal

    def involves(self, participant: ParticipantId) -> bool:
        """Return True when the participant sends or receives the transfer."""
        return participant in (self.from_participant, self.to_participant)


class ParticipantStatus(str, Enum):
    """Display status derived from a net balance."""

    GETS_BACK = "gets back"
    OWES = "owes"
    SETTLED = "settled"


@dataclass(frozen=True)
class ParticipantPosition:
    """Net balance of one participant with its display status."""

    participant: ParticipantId
    net: Decimal
    status: ParticipantStatus


@dataclass(frozen=True)
class SplitSummary:
    """Spending summary of a split.

    Attributes:
        total_spend: Sum of regular expenses, settlements excluded.
        budget: Budget ceiling of the split.
        currency_code: Split currency.
    """

    total_spend: Decimal
    budget: Decimal
    currency_code: str

    @property
    def budget_left(self) -> Decimal:
        """Return budget minus total spend, negative when over budget."""
        return self.budget - self.total_spend


@dataclass(frozen=True)
class UserSettlementSummary:
    """Settlement figures from the point of view of one participant."""

    participant: ParticipantId
    total_owed_by_user: Decimal
    total_owed_to_user: Decimal
    instructions: list[SettlementInstruction]


@dataclass(frozen=True)
class SplitBalancesView:
    """Balances, settlements and summaries for rendering a split."""

    split: Split
    summary: SplitSummary
    net_balances: dict[ParticipantId, Decimal]
    positions: list[ParticipantPosition]
    settlements: list[SettlementInstruction]
    user_summary: UserSettlementSummary | None = None
    user_share: Decimal | None = None

    @property
    def is_settled(self) -> bool:
        """Return True when no transfer is needed."""
        return not self.settlements


__all__ = [
    "SettlementInstruction",
    "ParticipantStatus",
    "ParticipantPosition",
    "SplitSummary",
    "UserSettlementSummary",
    "SplitBalancesView",
]
