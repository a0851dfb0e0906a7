"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Cannot convert {value!r} to Decimal") from exc


def sum_decimals(values) -> Decimal:
    """Return the Decimal sum of an iterable, starting from zero."""
    return sum((coerce_decimal(value) for value in values), Decimal("0"))


__all__ = ["coerce_decimal", "sum_decimals"]
