"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from splitbetter.infrastructure.logging.logger import get_app_logger

DEFAULT_EXCHANGE_RATE_TTL_SECONDS = 3600


@dataclass(frozen=True)
class SplitBetterSettings:
    """Runtime settings for SplitBetter adapters.

    Attributes:
        exchange_rate_ttl_seconds: How long a fetched exchange rate is reused.
        default_currency: Currency assumed for expenses entered without one.
    """

    exchange_rate_ttl_seconds: int = DEFAULT_EXCHANGE_RATE_TTL_SECONDS
    default_currency: str | None = None

    @classmethod
    def from_env(cls) -> "SplitBetterSettings":
        """Build settings from environment variables.

        Returns:
            SplitBetterSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        ttl = cls._parse_ttl(
            os.getenv("EXCHANGE_RATE_TTL_SECONDS"),
            logger=logger,
        )
        raw_currency = os.getenv("SPLITBETTER_DEFAULT_CURRENCY", "").strip()
        default_currency = raw_currency.upper() or None
        return cls(
            exchange_rate_ttl_seconds=ttl,
            default_currency=default_currency,
        )

    @staticmethod
    def _parse_ttl(raw_value: str | None, logger) -> int:
        """Parse the exchange-rate TTL.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Parsed TTL, or the default when missing or invalid.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_EXCHANGE_RATE_TTL_SECONDS
        try:
            ttl = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid EXCHANGE_RATE_TTL_SECONDS '{raw_value}'. "
                f"Using {DEFAULT_EXCHANGE_RATE_TTL_SECONDS}."
            )
            return DEFAULT_EXCHANGE_RATE_TTL_SECONDS
        if ttl < 0:
            logger.warning(
                "EXCHANGE_RATE_TTL_SECONDS must not be negative. "
                f"Using {DEFAULT_EXCHANGE_RATE_TTL_SECONDS}."
            )
            return DEFAULT_EXCHANGE_RATE_TTL_SECONDS
        return ttl


__all__ = ["SplitBetterSettings", "DEFAULT_EXCHANGE_RATE_TTL_SECONDS"]
