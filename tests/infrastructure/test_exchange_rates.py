"""Tests for the exchange-rate source and cache."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from splitbetter.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from splitbetter.infrastructure.exchange_rates import (
    CachedExchangeRateProvider,
    ExchangeRateCache,
    SqlAlchemyExchangeRateRepository,
)
from splitbetter.infrastructure.schema import ensure_schema


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def db_port(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'rates.db'}")
    adapter = SqlAlchemyDatabaseEngineAdapter(engine=engine)
    ensure_schema(adapter)
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                INSERT INTO exchange_rates (from_currency, to_currency, rate, date)
                VALUES (:from_currency, :to_currency, :rate, :date)
                """
            ),
            [
                {
                    "from_currency": "USD",
                    "to_currency": "EUR",
                    "rate": "0.8",
                    "date": "2026-10-01",
                },
                {
                    "from_currency": "USD",
                    "to_currency": "EUR",
                    "rate": "0.9",
                    "date": "2026-10-18",
                },
                {
                    "from_currency": "GBP",
                    "to_currency": "EUR",
                    "rate": "0",
                    "date": "2026-10-18",
                },
            ],
        )
    yield adapter
    engine.dispose()


def test_sql_rates_prefer_latest_direct_pair(db_port) -> None:
    """The most recent direct rate wins."""
    repository = SqlAlchemyExchangeRateRepository(db_port, logger=MagicMock())

    assert repository.fetch_rate("usd", "eur") == Decimal("0.9")


def test_sql_rates_invert_opposite_pair(db_port) -> None:
    """A stored opposite pair is inverted."""
    repository = SqlAlchemyExchangeRateRepository(db_port, logger=MagicMock())

    assert repository.fetch_rate("EUR", "USD") == Decimal("1") / Decimal("0.9")


def test_sql_rates_same_currency_is_one(db_port) -> None:
    repository = SqlAlchemyExchangeRateRepository(db_port, logger=MagicMock())

    assert repository.fetch_rate("EUR", "eur") == Decimal("1")


def test_sql_rates_missing_or_zero_warn(db_port) -> None:
    """Unknown pairs and zero inverse rates return None with a warning."""
    logger = MagicMock()
    repository = SqlAlchemyExchangeRateRepository(db_port, logger=logger)

    assert repository.fetch_rate("JPY", "EUR") is None
    assert repository.fetch_rate("EUR", "GBP") is None
    assert logger.warning.call_count == 2


def test_cache_expires_entries_after_ttl() -> None:
    clock = FakeClock()
    cache = ExchangeRateCache(ttl_seconds=60, clock=clock)
    cache.put("USD", "EUR", Decimal("0.9"))

    clock.now = 59
    assert cache.get("USD", "EUR") == Decimal("0.9")
    clock.now = 60
    assert cache.get("USD", "EUR") is None
    assert len(cache) == 0


def test_cache_rejects_negative_ttl() -> None:
    with pytest.raises(ValueError):
        ExchangeRateCache(ttl_seconds=-1)


def test_provider_queries_source_once_per_ttl() -> None:
    """Cached rates are reused until they expire."""
    clock = FakeClock()
    source = MagicMock()
    source.fetch_rate.return_value = Decimal("0.9")
    provider = CachedExchangeRateProvider(
        source,
        ExchangeRateCache(ttl_seconds=10, clock=clock),
        logger=MagicMock(),
    )

    assert provider.fetch_rate("USD", "EUR") == Decimal("0.9")
    assert provider.fetch_rate("USD", "EUR") == Decimal("0.9")
    assert source.fetch_rate.call_count == 1

    clock.now = 10
    provider.fetch_rate("USD", "EUR")
    assert source.fetch_rate.call_count == 2


def test_provider_does_not_cache_missing_rates() -> None:
    source = MagicMock()
    source.fetch_rate.return_value = None
    cache = ExchangeRateCache(ttl_seconds=10, clock=FakeClock())
    provider = CachedExchangeRateProvider(source, cache, logger=MagicMock())

    assert provider.fetch_rate("USD", "EUR") is None
    assert provider.fetch_rate("USD", "EUR") is None
    assert source.fetch_rate.call_count == 2
    assert len(cache) == 0


def test_provider_shares_entries_across_code_casing() -> None:
    """Currency codes are normalized before the cache is consulted."""
    source = MagicMock()
    source.fetch_rate.return_value = Decimal("0.9")
    cache = ExchangeRateCache(ttl_seconds=10, clock=FakeClock())
    provider = CachedExchangeRateProvider(source, cache, logger=MagicMock())

    assert provider.fetch_rate("usd", "eur") == Decimal("0.9")
    assert provider.fetch_rate(" USD ", "EUR") == Decimal("0.9")

    source.fetch_rate.assert_called_once_with("USD", "EUR")
    assert len(cache) == 1
