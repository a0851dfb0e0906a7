"""Balance engine: net positions and greedy settlement instructions."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from splitbetter.domain.constants import SETTLEMENT_EPSILON, ZERO
from splitbetter.domain.models import (
    Expense,
    ParticipantId,
    SettlementInstruction,
)
from splitbetter.domain.services.liability import liability_for
from splitbetter.utils.decimal_utils import coerce_decimal


def compute_net_balances(
    split_participants: Sequence[ParticipantId],
    expenses: Iterable[Expense],
) -> dict[ParticipantId, Decimal]:
    """Compute paid minus owed for every participant.

    The payer is credited with the full amount of each expense and every
    participant is debited with their liability. Identifiers outside the
    split (an unknown payer, for instance) are kept after the split
    participants so their amounts are not silently dropped.

    Args:
        split_participants: Participants of the split, in display order.
        expenses: Full expense history of the split.

    Returns:
        dict[ParticipantId, Decimal]: Signed net balance per participant.
        Positive means the participant is owed money.
    """
    paid: dict[ParticipantId, Decimal] = {}
    owed: dict[ParticipantId, Decimal] = {}
    for participant in split_participants:
        paid[participant] = ZERO
        owed[participant] = ZERO

    for expense in expenses:
        payer = expense.paid_by
        paid[payer] = paid.get(payer, ZERO) + coerce_decimal(expense.amount)
        owed.setdefault(payer, ZERO)
        for participant, share in liability_for(
            expense,
            split_participants,
        ).items():
            paid.setdefault(participant, ZERO)
            owed[participant] = owed.get(participant, ZERO) + share

    return {
        participant: paid[participant] - owed[participant]
        for participant in paid
    }


def compute_settlements(
    net_balances: Mapping[ParticipantId, Decimal],
) -> list[SettlementInstruction]:
    """Match debtors with creditors using a greedy two-pointer sweep.

    Both sides are sorted by amount, largest first, keeping the input order
    for ties. Each step settles the smaller of the current creditor and
    debtor remainders and moves past whichever side dropped below the
    settlement epsilon.

    Args:
        net_balances: Signed net balance per participant.

    Returns:
        list[SettlementInstruction]: Transfers in emission order.
    """
    creditors: list[list] = []
    debtors: list[list] = []
    for participant, raw_amount in net_balances.items():
        amount = coerce_decimal(raw_amount)
        if amount > SETTLEMENT_EPSILON:
            creditors.append([participant, amount])
        elif amount < -SETTLEMENT_EPSILON:
            debtors.append([participant, -amount])

    creditors.sort(key=lambda entry: entry[1], reverse=True)
    debtors.sort(key=lambda entry: entry[1], reverse=True)

    settlements: list[SettlementInstruction] = []
    i = j = 0
    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]
        settled_amount = min(debtor[1], creditor[1])
        settlements.append(
            SettlementInstruction(
                from_participant=debtor[0],
                to_participant=creditor[0],
                amount=settled_amount,
            )
        )
        debtor[1] -= settled_amount
        creditor[1] -= settled_amount
        if debtor[1] < SETTLEMENT_EPSILON:
            i += 1
        if creditor[1] < SETTLEMENT_EPSILON:
            j += 1
    return settlements


__all__ = ["compute_net_balances", "compute_settlements"]
