"""Tests for time range parsing and windows."""

from datetime import date
from unittest.mock import MagicMock

from src.domain.models.finance import TimeRange
from src.domain.policies.time_ranges import (
    is_in_current_month,
    parse_time_range,
    range_start,
)


def test_parse_time_range_accepts_labels_case_insensitively() -> None:
    logger = MagicMock()

    assert parse_time_range("6m", logger) == TimeRange.SIX_MONTHS
    assert parse_time_range(" all ", logger) == TimeRange.ALL
    assert parse_time_range(TimeRange.TWO_YEARS, logger) == TimeRange.TWO_YEARS
    logger.warning.assert_not_called()


def test_parse_time_range_falls_back_with_warning() -> None:
    logger = MagicMock()

    assert parse_time_range("5Y", logger) == TimeRange.ONE_YEAR
    logger.warning.assert_called_once()
    assert parse_time_range(None, logger) == TimeRange.ONE_YEAR


def test_range_start_subtracts_months_with_clipping() -> None:
    assert range_start(TimeRange.ONE_MONTH, date(2024, 3, 31)) == date(2024, 2, 29)
    assert range_start(TimeRange.TWO_YEARS, date(2024, 3, 31)) == date(2022, 3, 31)
    assert range_start(TimeRange.ALL, date(2024, 3, 31)) is None


def test_time_range_months() -> None:
    assert TimeRange.THREE_MONTHS.months == 3
    assert TimeRange.ALL.months is None


def test_is_in_current_month() -> None:
    today = date(2024, 6, 15)

    assert is_in_current_month(date(2024, 6, 1), today)
    assert not is_in_current_month(date(2024, 5, 31), today)
    assert not is_in_current_month(date(2023, 6, 15), today)
