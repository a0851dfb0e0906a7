"""Tests for the expense normalizer."""

from decimal import Decimal

import pytest

from splitbetter.domain.models import (
    CustomSplit,
    EqualSplit,
    Expense,
    ExpenseKind,
    parse_expense_kind,
    parse_split_rule,
)
from splitbetter.domain.services.balances import compute_net_balances
from splitbetter.domain.services.liability import (
    liability_for,
    resolve_participants,
)

SPLIT_PARTICIPANTS = ("alice", "bob", "carol", "dave")


def test_resolve_participants_prefers_expense_participants() -> None:
    """Listed participants should win over the split participants."""
    expense = Expense(
        amount=Decimal("10"),
        paid_by="alice",
        participants=("alice", "bob"),
    )

    assert resolve_participants(expense, SPLIT_PARTICIPANTS) == (
        "alice",
        "bob",
    )


def test_resolve_participants_falls_back_on_split() -> None:
    """Missing or empty participant lists fall back on the split."""
    missing = Expense(amount=Decimal("10"), paid_by="alice")
    empty = Expense(amount=Decimal("10"), paid_by="alice", participants=())

    assert resolve_participants(missing, SPLIT_PARTICIPANTS) == SPLIT_PARTICIPANTS
    assert resolve_participants(empty, SPLIT_PARTICIPANTS) == SPLIT_PARTICIPANTS


def test_equal_split_divides_amount_evenly() -> None:
    """Equal rule should give each participant amount / n."""
    expense = Expense(amount=Decimal("100"), paid_by="alice")

    liability = liability_for(expense, SPLIT_PARTICIPANTS)

    assert liability == {
        "alice": Decimal("25"),
        "bob": Decimal("25"),
        "carol": Decimal("25"),
        "dave": Decimal("25"),
    }


def test_equal_split_keeps_fractional_cents() -> None:
    """Shares are not rounded per expense."""
    expense = Expense(
        amount=Decimal("10"),
        paid_by="alice",
        participants=("alice", "bob", "carol"),
    )

    liability = liability_for(expense, SPLIT_PARTICIPANTS)

    assert liability["bob"] == Decimal("10") / 3
    assert liability["bob"] != Decimal("3.33")


def test_custom_split_uses_listed_amounts() -> None:
    """Custom rule should use the explicit per-participant amounts."""
    expense = Expense(
        amount=Decimal("90"),
        paid_by="alice",
        participants=("alice", "bob"),
        rule=CustomSplit({"alice": Decimal("30"), "bob": Decimal("60")}),
    )

    assert liability_for(expense, SPLIT_PARTICIPANTS) == {
        "alice": Decimal("30"),
        "bob": Decimal("60"),
    }


def test_custom_split_missing_entry_is_zero() -> None:
    """A participant without a custom amount owes nothing."""
    expense = Expense(
        amount=Decimal("90"),
        paid_by="alice",
        participants=("alice", "bob", "carol"),
        rule=CustomSplit({"alice": Decimal("30"), "bob": Decimal("60")}),
    )

    liability = liability_for(expense, SPLIT_PARTICIPANTS)

    assert liability["carol"] == Decimal("0")


def test_custom_split_with_empty_amounts_owes_nothing() -> None:
    """An empty custom mapping leaves every participant owing zero."""
    expense = Expense(
        amount=Decimal("90"),
        paid_by="alice",
        participants=("alice", "bob", "carol"),
        rule=CustomSplit({}),
    )

    assert liability_for(expense, SPLIT_PARTICIPANTS) == {
        "alice": Decimal("0"),
        "bob": Decimal("0"),
        "carol": Decimal("0"),
    }
    assert compute_net_balances(SPLIT_PARTICIPANTS, [expense]) == {
        "alice": Decimal("90"),
        "bob": Decimal("0"),
        "carol": Decimal("0"),
        "dave": Decimal("0"),
    }


def test_empty_participants_everywhere_yields_empty_liability() -> None:
    """Malformed records degrade to no liability instead of raising."""
    expense = Expense(amount=Decimal("30"), paid_by="alice", participants=())

    assert liability_for(expense, ()) == {}


def test_settlement_charges_the_recipient_in_full() -> None:
    """The recipient of a settlement carries the whole amount."""
    expense = Expense(
        amount=Decimal("30"),
        paid_by="bob",
        participants=("bob", "alice"),
        rule=EqualSplit(),
        kind=ExpenseKind.SETTLEMENT,
    )

    assert liability_for(expense, SPLIT_PARTICIPANTS) == {
        "alice": Decimal("30"),
    }


def test_unknown_rule_variant_raises_type_error() -> None:
    """Unsupported rule objects are programming errors."""
    expense = Expense(amount=Decimal("30"), paid_by="alice", rule=object())

    with pytest.raises(TypeError):
        liability_for(expense, SPLIT_PARTICIPANTS)


def test_liability_for_does_not_mutate_expense() -> None:
    """The normalizer is a pure function of its inputs."""
    amounts = {"alice": Decimal("30"), "bob": Decimal("60")}
    expense = Expense(
        amount=Decimal("90"),
        paid_by="alice",
        participants=("alice", "bob"),
        rule=CustomSplit(amounts),
    )

    liability_for(expense, SPLIT_PARTICIPANTS)

    assert amounts == {"alice": Decimal("30"), "bob": Decimal("60")}
    assert expense.participants == ("alice", "bob")


def test_parse_split_rule_from_stored_values() -> None:
    """Raw labels should map onto rule variants."""
    custom = parse_split_rule("Custom", {"alice": 1.5, "bob": "2.50"})

    assert custom == CustomSplit(
        {"alice": Decimal("1.5"), "bob": Decimal("2.50")}
    )
    assert parse_split_rule("Equally", None) == EqualSplit()
    assert parse_split_rule("Custom", None) == EqualSplit()
    assert parse_split_rule(None, {"alice": 1}) == EqualSplit()


def test_parse_expense_kind_defaults_to_regular() -> None:
    """Unknown kind labels are treated as regular expenses."""
    assert parse_expense_kind("Settlement") is ExpenseKind.SETTLEMENT
    assert parse_expense_kind(None) is ExpenseKind.REGULAR
    assert parse_expense_kind("refund") is ExpenseKind.REGULAR
