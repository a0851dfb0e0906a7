"""Expense normalizer: per-participant liability of a single expense."""

from collections.abc import Sequence
from decimal import Decimal

from splitbetter.domain.constants import ZERO
from splitbetter.domain.models import (
    CustomSplit,
    EqualSplit,
    Expense,
    ParticipantId,
)
from splitbetter.utils.decimal_utils import coerce_decimal


def resolve_participants(
    expense: Expense,
    split_participants: Sequence[ParticipantId],
) -> tuple[ParticipantId, ...]:
    """Return the participants sharing an expense.

    Args:
        expense: Expense being normalized.
        split_participants: Participants of the owning split.

    Returns:
        tuple[ParticipantId, ...]: The expense participants when present and
        non-empty, otherwise the split participants.
    """
    if expense.participants:
        return tuple(expense.participants)
    return tuple(split_participants)


def liability_for(
    expense: Expense,
    split_participants: Sequence[ParticipantId],
) -> dict[ParticipantId, Decimal]:
    """Compute what each participant owes for one expense.

    Malformed records degrade to an empty or zero liability instead of
    raising, so one bad historical expense cannot block a whole split.

    Args:
        expense: Expense to normalize.
        split_participants: Participants of the owning split, used when the
            expense does not list its own.

    Returns:
        dict[ParticipantId, Decimal]: Liability per resolved participant.

    Raises:
        TypeError: If the expense carries an unknown rule variant.
    """
    participants = resolve_participants(expense, split_participants)
    if not participants:
        return {}

    amount = coerce_decimal(expense.amount)
    if expense.is_settlement:
        recipients = tuple(p for p in participants if p != expense.paid_by)
        if recipients:
            return _equal_shares(amount, recipients)

    rule = expense.rule
    if isinstance(rule, CustomSplit):
        return {
            participant: coerce_decimal(
                rule.custom_amounts.get(participant, ZERO)
            )
            for participant in participants
        }
    if isinstance(rule, EqualSplit):
        return _equal_shares(amount, participants)
    raise TypeError(f"Unsupported split rule: {type(rule).__name__}")


def _equal_shares(
    amount: Decimal,
    participants: tuple[ParticipantId, ...],
) -> dict[ParticipantId, Decimal]:
    share = amount / len(participants)
    liability: dict[ParticipantId, Decimal] = {}
    for participant in participants:
        liability[participant] = liability.get(participant, ZERO) + share
    return liability


__all__ = ["resolve_participants", "liability_for"]
