"""Tests for the composition root."""

from unittest.mock import MagicMock

from splitbetter.application.use_cases import (
    AddExpenseUseCase,
    GetSplitBalancesUseCase,
    RecordSettlementUseCase,
)
from splitbetter.infrastructure import container
from splitbetter.infrastructure.exchange_rates import CachedExchangeRateProvider
from splitbetter.infrastructure.settings import SplitBetterSettings


def test_builders_share_the_given_database_port(monkeypatch) -> None:
    """Use cases are wired with repositories on the provided port."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        container.SplitBetterSettings,
        "from_env",
        classmethod(lambda cls: cls(exchange_rate_ttl_seconds=5)),
    )
    db_port = MagicMock()

    balances = container.build_get_split_balances_use_case(db_port)
    add_expense = container.build_add_expense_use_case(db_port)
    record = container.build_record_settlement_use_case(db_port)

    assert isinstance(balances, GetSplitBalancesUseCase)
    assert isinstance(add_expense, AddExpenseUseCase)
    assert isinstance(record, RecordSettlementUseCase)
    assert balances._split_repository._db_port is db_port
    assert balances._expense_repository._db_port is db_port
    assert isinstance(add_expense._exchange_rates, CachedExchangeRateProvider)


def test_exchange_rate_provider_uses_configured_ttl(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    provider = container.build_exchange_rate_provider(
        MagicMock(),
        settings=SplitBetterSettings(exchange_rate_ttl_seconds=42),
    )

    assert provider._cache._ttl_seconds == 42


def test_add_expense_use_case_receives_default_currency(monkeypatch) -> None:
    """The configured default currency reaches the add-expense use case."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    use_case = container.build_add_expense_use_case(
        MagicMock(),
        settings=SplitBetterSettings(
            exchange_rate_ttl_seconds=42,
            default_currency="USD",
        ),
    )

    assert use_case._default_currency == "USD"
    assert use_case._exchange_rates._cache._ttl_seconds == 42
