"""Conversion of settlement instructions into settlement expenses."""

from splitbetter.domain.models import (
    EqualSplit,
    Expense,
    ExpenseKind,
    SettlementInstruction,
)


def build_settlement_expense(
    instruction: SettlementInstruction,
    title: str | None = None,
) -> Expense:
    """Return the expense recording a settlement transfer.

    The debtor is the payer and the creditor the only other participant, so
    the creditor carries the full amount as liability once the expense is fed
    back into the balance engine.

    Args:
        instruction: Transfer chosen by the user.
        title: Optional description, defaults to ``"Settlement"``.

    Returns:
        Expense: Settlement-kind expense ready to be persisted.
    """
    return Expense(
        amount=instruction.amount,
        paid_by=instruction.from_participant,
        participants=(
            instruction.from_participant,
            instruction.to_participant,
        ),
        rule=EqualSplit(),
        kind=ExpenseKind.SETTLEMENT,
        title=title or "Settlement",
    )


__all__ = ["build_settlement_expense"]
