"""Validation of caller-supplied transaction payloads."""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from src.domain.constants import RECURRING_INTERVALS, TRANSACTION_TYPES
from src.domain.errors import InvalidPayload, Unauthorized
from src.domain.models.transactions import TransactionPayload
from src.utils.decimal_utils import quantize_money


def _require(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise InvalidPayload(f"Missing required field: {key}")
    return value


def parse_amount(value) -> Decimal:
    """Parse a strictly positive monetary amount.

    Args:
        value: Raw amount (Decimal, int, float or numeric string).

    Returns:
        Decimal: Parsed amount rounded to cents.

    Raises:
        InvalidPayload: If the amount is not a finite positive number.
    """
    if isinstance(value, bool):
        raise InvalidPayload(f"Invalid amount: {value!r}")
    try:
        amount = quantize_money(value)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidPayload(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite() or amount <= 0:
        raise InvalidPayload(f"Amount must be greater than zero: {value!r}")
    return amount


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_flag(value) -> bool:
    """Parse a boolean flag sent as a bool, number or string.

    Raises:
        InvalidPayload: If a string flag is not a recognized boolean.
    """
    if value is None:
        return False
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise InvalidPayload(f"Invalid boolean flag: {value!r}")
    return bool(value)


def parse_date(value) -> date:
    """Parse a calendar date from a date, datetime or ISO string.

    Raises:
        InvalidPayload: If the value is not a valid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError as exc:
            raise InvalidPayload(f"Invalid date: {value!r}") from exc
    raise InvalidPayload(f"Invalid date: {value!r}")


def parse_transaction_payload(data: Mapping[str, Any]) -> TransactionPayload:
    """Build a validated payload from a raw mapping.

    Args:
        data: Mapping with account_id, type, amount, date, category and the
            optional description, is_recurring and recurring_interval keys.

    Returns:
        TransactionPayload: Normalized payload.

    Raises:
        InvalidPayload: If a field is missing or malformed.
    """
    transaction_type = str(_require(data, "type")).upper()
    if transaction_type not in TRANSACTION_TYPES:
        raise InvalidPayload(f"Unknown transaction type: {transaction_type}")

    interval = data.get("recurring_interval")
    if interval:
        interval = str(interval).upper()
        if interval not in RECURRING_INTERVALS:
            raise InvalidPayload(f"Unknown recurring interval: {interval}")
    else:
        interval = None

    description = data.get("description")
    return TransactionPayload(
        account_id=str(_require(data, "account_id")),
        type=transaction_type,
        amount=parse_amount(_require(data, "amount")),
        date=parse_date(_require(data, "date")),
        category=str(_require(data, "category")),
        description=str(description) if description else None,
        is_recurring=parse_flag(data.get("is_recurring")),
        recurring_interval=interval,
    )


def require_owner(owner_id: str | None) -> str:
    """Return the caller identity or raise when it is missing."""
    if not owner_id or not str(owner_id).strip():
        raise Unauthorized()
    return str(owner_id)


__all__ = [
    "parse_amount",
    "parse_date",
    "parse_flag",
    "parse_transaction_payload",
    "require_owner",
]
