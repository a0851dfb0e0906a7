"""Exchange-rate adapters: SQL source and an explicit TTL cache."""

from decimal import Decimal
import time
from typing import Callable

from sqlalchemy import text

from splitbetter.application.ports.database import DatabaseEnginePort
from splitbetter.application.ports.exchange_rates import ExchangeRatePort
from splitbetter.domain.services import normalize_currency_code
from splitbetter.infrastructure.logging.logger import get_app_logger
from splitbetter.utils.decimal_utils import coerce_decimal

SELECT_LATEST_RATE_SQL = text(
    """
    SELECT rate, date
    FROM exchange_rates
    WHERE from_currency = :from_currency AND to_currency = :to_currency
    ORDER BY date DESC
    LIMIT 1
    """
)


class SqlAlchemyExchangeRateRepository(ExchangeRatePort):
    """Read the latest stored rate for a currency pair.

    When only the opposite pair is stored, its inverse is returned.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the database engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_rate(
        self,
        from_currency: str,
        to_currency: str,
    ) -> Decimal | None:
        source = normalize_currency_code(from_currency)
        target = normalize_currency_code(to_currency)
        if source is None or target is None:
            return None
        if source == target:
            return Decimal("1")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            direct = conn.execute(
                SELECT_LATEST_RATE_SQL,
                {"from_currency": source, "to_currency": target},
            ).first()
            inverse = None
            if direct is None:
                inverse = conn.execute(
                    SELECT_LATEST_RATE_SQL,
                    {"from_currency": target, "to_currency": source},
                ).first()

        if direct is not None:
            return coerce_decimal(direct.rate)
        if inverse is None:
            self._logger.warning(f"Missing exchange rate for {source} to {target}")
            return None
        rate = coerce_decimal(inverse.rate)
        if rate == 0:
            self._logger.warning(
                f"Skipping zero exchange rate for {target} to {source}"
            )
            return None
        return Decimal("1") / rate


class ExchangeRateCache:
    """In-memory rate cache with a time-to-live.

    The cache is an ordinary object owned by whoever needs it; nothing is
    shared at module level.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Lifetime of an entry. Zero disables caching.
            clock: Monotonic clock returning seconds.
        """
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must not be negative")
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[tuple[str, str], tuple[Decimal, float]] = {}

    def get(self, from_currency: str, to_currency: str) -> Decimal | None:
        """Return a fresh cached rate, dropping it once expired."""
        key = (from_currency, to_currency)
        entry = self._entries.get(key)
        if entry is None:
            return None
        rate, stored_at = entry
        if self._clock() - stored_at >= self._ttl_seconds:
            del self._entries[key]
            return None
        return rate

    def put(self, from_currency: str, to_currency: str, rate: Decimal) -> None:
        self._entries[(from_currency, to_currency)] = (rate, self._clock())

    def __len__(self) -> int:
        return len(self._entries)


class CachedExchangeRateProvider(ExchangeRatePort):
    """Serve rates from a cache, falling back on a source port."""

    def __init__(
        self,
        source: ExchangeRatePort,
        cache: ExchangeRateCache,
        logger=None,
    ) -> None:
        """Initialize the provider.

        Args:
            source: Port queried on cache misses.
            cache: Cache owned by this provider.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._source = source
        self._cache = cache
        self._logger = logger or get_app_logger()

    def fetch_rate(
        self,
        from_currency: str,
        to_currency: str,
    ) -> Decimal | None:
        source = normalize_currency_code(from_currency)
        target = normalize_currency_code(to_currency)
        if source is None or target is None:
            return None
        cached = self._cache.get(source, target)
        if cached is not None:
            return cached
        rate = self._source.fetch_rate(source, target)
        if rate is None:
            return None
        self._logger.info(f"Cached exchange rate {source}->{target}: {rate}")
        self._cache.put(source, target, rate)
        return rate


__all__ = [
    "SqlAlchemyExchangeRateRepository",
    "ExchangeRateCache",
    "CachedExchangeRateProvider",
]
