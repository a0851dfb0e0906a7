"""Port for currency exchange rates."""

from decimal import Decimal
from typing import Protocol


class ExchangeRatePort(Protocol):
    """Port exposing conversion rates between currencies."""

    def fetch_rate(
        self,
        from_currency: str,
        to_currency: str,
    ) -> Decimal | None:
        """Return how many ``to_currency`` units one ``from_currency`` buys.

        Returns None when no rate is known.
        """


__all__ = ["ExchangeRatePort"]
