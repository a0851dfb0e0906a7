"""Domain services for split summaries."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from splitbetter.domain.constants import SETTLEMENT_EPSILON, ZERO
from splitbetter.domain.models import (
    Expense,
    ParticipantId,
    ParticipantPosition,
    ParticipantStatus,
    SettlementInstruction,
    Split,
    SplitSummary,
    UserSettlementSummary,
)
from splitbetter.domain.services.liability import liability_for
from splitbetter.utils.decimal_utils import coerce_decimal


def compute_total_spend(expenses: Iterable[Expense]) -> Decimal:
    """Return the total of regular expenses.

    Settlement transfers move money between participants and never count as
    spend.
    """
    total = ZERO
    for expense in expenses:
        if expense.is_settlement:
            continue
        total += coerce_decimal(expense.amount)
    return total


def compute_participant_share(
    participant: ParticipantId,
    split_participants: Sequence[ParticipantId],
    expenses: Iterable[Expense],
) -> Decimal:
    """Return the participant's share of the regular expenses.

    Args:
        participant: Participant whose share is requested.
        split_participants: Participants of the split.
        expenses: Full expense history of the split.

    Returns:
        Decimal: Sum of the participant's liabilities, settlements excluded.
    """
    share = ZERO
    for expense in expenses:
        if expense.is_settlement:
            continue
        share += liability_for(expense, split_participants).get(
            participant,
            ZERO,
        )
    return share


def compute_split_summary(
    split: Split,
    expenses: Iterable[Expense],
) -> SplitSummary:
    """Compute total spend against the split budget."""
    return SplitSummary(
        total_spend=compute_total_spend(expenses),
        budget=coerce_decimal(split.budget),
        currency_code=split.currency,
    )


def compute_participant_positions(
    split_participants: Sequence[ParticipantId],
    net_balances: Mapping[ParticipantId, Decimal],
) -> list[ParticipantPosition]:
    """Return one position per split participant, in split order.

    Args:
        split_participants: Participants of the split, in display order.
        net_balances: Signed net balance per participant.

    Returns:
        list[ParticipantPosition]: Net balance and status per participant.
    """
    positions = []
    for participant in split_participants:
        net = coerce_decimal(net_balances.get(participant, ZERO))
        positions.append(
            ParticipantPosition(
                participant=participant,
                net=net,
                status=_status_for(net),
            )
        )
    return positions


def summarize_user_settlements(
    participant: ParticipantId,
    settlements: Iterable[SettlementInstruction],
) -> UserSettlementSummary:
    """Summarize the transfers a participant sends and receives."""
    involved = [s for s in settlements if s.involves(participant)]
    owed_by_user = sum(
        (s.amount for s in involved if s.from_participant == participant),
        ZERO,
    )
    owed_to_user = sum(
        (s.amount for s in involved if s.to_participant == participant),
        ZERO,
    )
    return UserSettlementSummary(
        participant=participant,
        total_owed_by_user=owed_by_user,
        total_owed_to_user=owed_to_user,
        instructions=involved,
    )


def _status_for(net: Decimal) -> ParticipantStatus:
    if abs(net) <= SETTLEMENT_EPSILON:
        return ParticipantStatus.SETTLED
    if net > 0:
        return ParticipantStatus.GETS_BACK
    return ParticipantStatus.OWES


__all__ = [
    "compute_total_spend",
    "compute_participant_share",
    "compute_split_summary",
    "compute_participant_positions",
    "summarize_user_settlements",
]
