"""Recurrence date computation."""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from src.domain.constants import DAILY, MONTHLY, WEEKLY, YEARLY
from src.domain.errors import InvalidPayload

_INTERVAL_STEPS = {
    DAILY: timedelta(days=1),
    WEEKLY: timedelta(days=7),
    MONTHLY: relativedelta(months=1),
    YEARLY: relativedelta(years=1),
}


def calculate_next_recurring_date(start: date, interval: str) -> date:
    """Advance a date by exactly one recurrence interval.

    Month and year steps are calendar aware and clamp to the last day of the
    target month (2024-01-31 + MONTHLY gives 2024-02-29).

    Args:
        start: Date of the current occurrence.
        interval: DAILY, WEEKLY, MONTHLY or YEARLY.

    Returns:
        date: Date of the next occurrence.

    Raises:
        InvalidPayload: If the interval is unknown.
    """
    step = _INTERVAL_STEPS.get(interval)
    if step is None:
        raise InvalidPayload(f"Unknown recurring interval: {interval}")
    return start + step


def next_recurring_date(
    start: date,
    is_recurring: bool,
    interval: str | None,
) -> date | None:
    """Return the next occurrence, or None for non-recurring transactions."""
    if is_recurring and interval:
        return calculate_next_recurring_date(start, interval)
    return None


__all__ = ["calculate_next_recurring_date", "next_recurring_date"]
