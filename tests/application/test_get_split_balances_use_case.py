"""Tests for the GetSplitBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from splitbetter.application.ports.expense_repository import (
    ExpenseRepositoryPort,
)
from splitbetter.application.ports.split_repository import SplitRepositoryPort
from splitbetter.application.use_cases.get_split_balances import (
    GetSplitBalancesUseCase,
)
from splitbetter.domain.models import (
    CustomSplit,
    Expense,
    ExpenseKind,
    ParticipantStatus,
    SettlementInstruction,
    Split,
)


class FakeSplitRepository(SplitRepositoryPort):
    """In-memory split source."""

    def __init__(self, splits: list[Split]) -> None:
        self._splits = {split.split_id: split for split in splits}

    def fetch_split(self, split_id: str) -> Split:
        try:
            return self._splits[split_id]
        except KeyError:
            raise LookupError(f"Unknown split: {split_id}") from None


class FakeExpenseRepository(ExpenseRepositoryPort):
    """In-memory expense source."""

    def __init__(self, expenses: dict[str, list[Expense]]) -> None:
        self._expenses = expenses
        self.fetch_calls = 0

    def fetch_expenses(self, split_id: str) -> list[Expense]:
        self.fetch_calls += 1
        return list(self._expenses.get(split_id, []))

    def add_expense(self, split_id: str, expense: Expense) -> str:
        self._expenses.setdefault(split_id, []).append(expense)
        return f"e{len(self._expenses[split_id])}"


def _split() -> Split:
    return Split(
        split_id="trip",
        title="Lisbon",
        currency="EUR",
        budget=Decimal("200"),
        participants=("a", "b", "c"),
    )


def test_execute_returns_balances_and_settlements() -> None:
    """Use case should aggregate the snapshot into a balances view."""
    expenses = {
        "trip": [
            Expense(amount=Decimal("90"), paid_by="a"),
            Expense(
                amount=Decimal("60"),
                paid_by="b",
                participants=("b", "c"),
                rule=CustomSplit({"b": Decimal("20"), "c": Decimal("40")}),
            ),
            Expense(
                amount=Decimal("10"),
                paid_by="c",
                participants=("c", "a"),
                kind=ExpenseKind.SETTLEMENT,
            ),
        ]
    }
    use_case = GetSplitBalancesUseCase(
        split_repository=FakeSplitRepository([_split()]),
        expense_repository=FakeExpenseRepository(expenses),
        logger=MagicMock(),
    )

    view = use_case.execute("trip", current_user_id="c")

    assert view.net_balances == {
        "a": Decimal("50"),
        "b": Decimal("10"),
        "c": Decimal("-60"),
    }
    assert view.settlements == [
        SettlementInstruction("c", "a", Decimal("50")),
        SettlementInstruction("c", "b", Decimal("10")),
    ]
    assert view.summary.total_spend == Decimal("150")
    assert view.summary.budget_left == Decimal("50")
    assert [p.status for p in view.positions] == [
        ParticipantStatus.GETS_BACK,
        ParticipantStatus.GETS_BACK,
        ParticipantStatus.OWES,
    ]
    assert view.user_summary.total_owed_by_user == Decimal("60")
    assert view.user_summary.total_owed_to_user == Decimal("0")
    assert view.user_share == Decimal("70")
    assert view.is_settled is False


def test_execute_without_user_skips_personal_summary() -> None:
    """No current user means no personal summary."""
    use_case = GetSplitBalancesUseCase(
        split_repository=FakeSplitRepository([_split()]),
        expense_repository=FakeExpenseRepository({}),
        logger=MagicMock(),
    )

    view = use_case.execute("trip")

    assert view.user_summary is None
    assert view.user_share is None
    assert view.settlements == []
    assert view.is_settled is True


def test_execute_warns_about_integrity_issues() -> None:
    """Suspicious records are logged but still aggregated."""
    logger = MagicMock()
    expenses = {
        "trip": [Expense(amount=Decimal("30"), paid_by="zed", expense_id="x")]
    }
    use_case = GetSplitBalancesUseCase(
        split_repository=FakeSplitRepository([_split()]),
        expense_repository=FakeExpenseRepository(expenses),
        logger=logger,
    )

    view = use_case.execute("trip")

    assert view.net_balances["zed"] == Decimal("30")
    assert [p.participant for p in view.positions] == ["a", "b", "c"]
    warnings = [call.args[0] for call in logger.warning.call_args_list]
    assert any("unknown participant zed" in message for message in warnings)


def test_execute_refetches_snapshot_each_call() -> None:
    """Every call reads a fresh snapshot."""
    expense_repository = FakeExpenseRepository({})
    use_case = GetSplitBalancesUseCase(
        split_repository=FakeSplitRepository([_split()]),
        expense_repository=expense_repository,
        logger=MagicMock(),
    )

    first = use_case.execute("trip")
    expense_repository.add_expense(
        "trip",
        Expense(amount=Decimal("30"), paid_by="a"),
    )
    second = use_case.execute("trip")

    assert expense_repository.fetch_calls == 2
    assert first.settlements == []
    assert len(second.settlements) == 2
