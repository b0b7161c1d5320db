"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

MONEY_QUANTUM = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(value) -> Decimal:
    """Round a monetary value to the two decimal places stored by the ledger.

    Args:
        value: Raw numeric value.

    Returns:
        Decimal: Value rounded half-up to cents.
    """
    return coerce_decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = ["MONEY_QUANTUM", "coerce_decimal", "quantize_money"]
