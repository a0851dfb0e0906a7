"""Domain constants for balances and settlements."""

from decimal import Decimal

# Balances within this distance of zero count as settled.
SETTLEMENT_EPSILON = Decimal("0.01")

# Allowed gap between custom amounts and the expense total.
CUSTOM_AMOUNT_TOLERANCE = Decimal("0.01")

ZERO = Decimal("0")


__all__ = ["SETTLEMENT_EPSILON", "CUSTOM_AMOUNT_TOLERANCE", "ZERO"]
