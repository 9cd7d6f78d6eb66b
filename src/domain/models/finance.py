"""Domain models for derived financial figures."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from .assets import Asset, ExcludedAsset


class TimeRange(str, Enum):
    """Dashboard time window selector."""

    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    TWO_YEARS = "2Y"
    ALL = "ALL"

    @property
    def months(self) -> int | None:
        """Return the number of months covered, or None for ALL."""
        return _TIME_RANGE_MONTHS[self]


_TIME_RANGE_MONTHS = {
    TimeRange.ONE_MONTH: 1,
    TimeRange.THREE_MONTHS: 3,
    TimeRange.SIX_MONTHS: 6,
    TimeRange.ONE_YEAR: 12,
    TimeRange.TWO_YEARS: 24,
    TimeRange.ALL: None,
}


@dataclass(frozen=True)
class NetWorthDataPoint:
    """Net worth at the end of a calendar day."""

    date: date
    net_worth: Decimal


@dataclass(frozen=True)
class GrowthPoint:
    """Value of a compounding asset at one monthly anniversary.

    Attributes:
        month: ``YYYY-MM`` label of the anniversary.
        date: Anniversary date (start date plus ``index`` months).
        value: Value rounded to cents.
    """

    month: str
    date: date
    value: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    """Loan repayment progress after a number of monthly payments."""

    months_paid: int
    total_paid: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        account_total: Sum of account balances.
        asset_total: Sum of derived asset values.
        net_worth: Accounts plus assets.
        as_of: Valuation date.
    """

    account_total: Decimal
    asset_total: Decimal
    net_worth: Decimal
    as_of: date


@dataclass(frozen=True)
class NetWorthTimeline:
    """Net worth series together with the inputs left out of it."""

    time_range: TimeRange
    points: list[NetWorthDataPoint]
    summary: NetWorthSummary
    excluded_assets: list[ExcludedAsset]

    @property
    def change(self) -> Decimal:
        """Return the difference between the last and first points."""
        if not self.points:
            return Decimal("0")
        return self.points[-1].net_worth - self.points[0].net_worth


@dataclass(frozen=True)
class MonthlyTotal:
    """Amount aggregated for one ``YYYY-MM`` month."""

    month: str
    amount: Decimal


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a transaction category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class CashflowView:
    """Income and spending breakdowns for UI rendering."""

    time_range: TimeRange
    income: list[MonthlyTotal]
    spending: list[MonthlyTotal]
    spending_by_category: list[CategoryAmount]

    @property
    def total_income(self) -> Decimal:
        """Return the summed income."""
        return sum((item.amount for item in self.income), Decimal("0"))

    @property
    def total_spending(self) -> Decimal:
        """Return the summed spending as a positive amount."""
        return sum((item.amount for item in self.spending), Decimal("0"))


@dataclass(frozen=True)
class RentalMetrics:
    """Monthly rental economics of a property.

    Attributes:
        monthly_income: Rent collected per month.
        monthly_expenses: Tax, insurance and maintenance spread per month.
        monthly_cash_flow: Income minus expenses and the loan payment.
        cap_rate_percent: Annual rent over current value, in percent.
    """

    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_cash_flow: Decimal
    cap_rate_percent: Decimal


@dataclass(frozen=True)
class AssetProjection:
    """Valuation and financing details for a single asset."""

    asset: Asset
    growth_rate: Decimal
    curve: list[GrowthPoint]
    current_value: Decimal
    roi_percent: Decimal | None
    financing: AmortizationResult | None
    financing_progress_percent: Decimal
    rental: RentalMetrics | None = None


__all__ = [
    "TimeRange",
    "NetWorthDataPoint",
    "GrowthPoint",
    "AmortizationResult",
    "NetWorthSummary",
    "NetWorthTimeline",
    "MonthlyTotal",
    "CategoryAmount",
    "CashflowView",
    "RentalMetrics",
    "AssetProjection",
]
