"""Compound growth and decay of asset values.

Values compound monthly at ``annual_rate / 12``. A curve point exists for
every monthly anniversary of the start date; anniversaries are computed from
the start date (not chained), so a purchase on the 31st lands on the last
day of shorter months without drifting.
"""

from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from src.domain.models.finance import GrowthPoint
from src.utils.decimal_utils import coerce_decimal, round_money


def add_months(start_date: date, months: int) -> date:
    """Return ``start_date`` shifted by ``months``, clipped to month end."""
    return start_date + relativedelta(months=months)


def months_elapsed(start_date: date, as_of: date) -> int:
    """Count the monthly anniversaries of ``start_date`` reached by ``as_of``.

    Args:
        start_date: First day of the curve.
        as_of: Evaluation date.

    Returns:
        int: Number of full months elapsed, never negative.
    """
    months = (as_of.year - start_date.year) * 12 + (
        as_of.month - start_date.month
    )
    if months > 0 and add_months(start_date, months) > as_of:
        months -= 1
    return max(months, 0)


def monthly_growth_factor(annual_rate_percent) -> Decimal:
    """Return ``1 + annual_rate / 12 / 100``."""
    return Decimal("1") + coerce_decimal(annual_rate_percent) / 12 / 100


def compound_value(initial_value, annual_rate_percent, periods: int) -> Decimal:
    """Compound ``initial_value`` over monthly periods.

    Args:
        initial_value: Value at period zero.
        annual_rate_percent: Signed annual rate in percent.
        periods: Number of months to compound.

    Returns:
        Decimal: Compounded value rounded to cents.
    """
    factor = monthly_growth_factor(annual_rate_percent)
    return round_money(coerce_decimal(initial_value) * factor**periods)


def calculate_asset_growth(
    initial_value,
    annual_rate_percent,
    months: int,
    start_date: date | str,
) -> list[GrowthPoint]:
    """Build the monthly value curve of a compounding asset.

    Use a positive rate for appreciation and a negative one for
    depreciation. Inputs are not validated: a zero or negative initial value
    propagates through the formula.

    Args:
        initial_value: Value at ``start_date``.
        annual_rate_percent: Signed annual rate in percent.
        months: Number of months after the start to include.
        start_date: First point of the curve (date or ISO string).

    Returns:
        list[GrowthPoint]: ``months + 1`` points, one per anniversary.
    """
    if isinstance(start_date, str):
        start_date = date.fromisoformat(start_date[:10])
    initial = coerce_decimal(initial_value)
    factor = monthly_growth_factor(annual_rate_percent)
    points: list[GrowthPoint] = []
    for index in range(months + 1):
        point_date = add_months(start_date, index)
        points.append(
            GrowthPoint(
                month=point_date.strftime("%Y-%m"),
                date=point_date,
                value=round_money(initial * factor**index),
            )
        )
    return points


def value_at(
    initial_value,
    annual_rate_percent,
    start_date: date,
    as_of: date,
) -> Decimal:
    """Evaluate the growth curve at the offset reached by ``as_of``."""
    return compound_value(
        initial_value,
        annual_rate_percent,
        months_elapsed(start_date, as_of),
    )


__all__ = [
    "add_months",
    "months_elapsed",
    "monthly_growth_factor",
    "compound_value",
    "calculate_asset_growth",
    "value_at",
]
