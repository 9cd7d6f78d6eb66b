"""Time range parsing and window resolution rules."""

from datetime import date
from logging import Logger

from dateutil.relativedelta import relativedelta

from src.domain.constants import DEFAULT_TIME_RANGE
from src.domain.models.finance import TimeRange


def parse_time_range(
    value: str | TimeRange | None,
    logger: Logger,
    default: TimeRange = DEFAULT_TIME_RANGE,
) -> TimeRange:
    """Parse a user supplied time range label.

    Args:
        value: Raw label such as ``"6M"`` or ``"all"``.
        logger: Logger used for warnings.
        default: Range returned for missing or unknown labels.

    Returns:
        TimeRange: Parsed range, or ``default`` when invalid.
    """
    if isinstance(value, TimeRange):
        return value
    if not value:
        return default
    cleaned = value.strip().upper()
    try:
        return TimeRange(cleaned)
    except ValueError:
        logger.warning(
            f"Unknown time range '{value}'. Falling back to {default.value}."
        )
        return default


def range_start(time_range: TimeRange, end_date: date) -> date | None:
    """Return the first day covered by a bounded range.

    Args:
        time_range: Selected range.
        end_date: Last day of the window.

    Returns:
        date | None: ``end_date`` minus the range months, None for ALL.
    """
    months = time_range.months
    if months is None:
        return None
    return end_date - relativedelta(months=months)


def is_in_current_month(value: date, today: date) -> bool:
    """Return True when ``value`` falls in the calendar month of ``today``."""
    return value.year == today.year and value.month == today.month


__all__ = ["parse_time_range", "range_start", "is_in_current_month"]
