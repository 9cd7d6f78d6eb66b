"""Domain services for asset valuation and net worth totals."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models.accounts import Account, Transaction
from src.domain.models.assets import Asset, RentalTerms
from src.domain.models.finance import NetWorthSummary, RentalMetrics
from src.domain.policies.asset_eligibility import (
    exclusion_reason,
    resolve_growth_rate,
)
from src.domain.services.growth import value_at
from src.utils.decimal_utils import coerce_decimal, round_money


def calculate_account_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Return the sum of signed transaction amounts."""
    return sum((tx.amount for tx in transactions), Decimal("0"))


def current_asset_value(asset: Asset, as_of: date) -> Decimal:
    """Derive the value of an asset at a date.

    Args:
        asset: Asset with purchase data.
        as_of: Valuation date.

    Returns:
        Decimal: Compounded value; 0 before the purchase date or when the
        asset lacks purchase data.
    """
    if exclusion_reason(asset) is not None:
        return Decimal("0")
    if as_of < asset.purchase_date:
        return Decimal("0")
    return value_at(
        asset.purchase_price,
        resolve_growth_rate(asset),
        asset.purchase_date,
        as_of,
    )


def calculate_roi(purchase_price, current_value) -> Decimal | None:
    """Return the return on investment in percent.

    Args:
        purchase_price: Price paid for the asset.
        current_value: Present value of the asset.

    Returns:
        Decimal | None: ROI rounded to cents, None when the purchase price is
        missing or zero.
    """
    if purchase_price is None or current_value is None:
        return None
    price = coerce_decimal(purchase_price)
    if price == 0:
        return None
    return round_money((coerce_decimal(current_value) - price) / price * 100)


def compute_rental_metrics(
    rental: RentalTerms,
    current_value,
    monthly_payment=None,
) -> RentalMetrics:
    """Return the monthly cash flow and cap rate of a rented property.

    Args:
        rental: Rent and yearly carrying costs; missing amounts count as 0.
        current_value: Present value of the property.
        monthly_payment: Mortgage payment deducted from the cash flow.

    Returns:
        RentalMetrics: Amounts rounded to cents. The cap rate is 0 without
        rent or without a positive current value.
    """
    income = coerce_decimal(rental.monthly_rent)
    yearly_costs = (
        coerce_decimal(rental.property_tax_annual)
        + coerce_decimal(rental.insurance_annual)
        + coerce_decimal(rental.maintenance_annual)
    )
    expenses = yearly_costs / 12
    cash_flow = income - expenses - coerce_decimal(monthly_payment)
    value = coerce_decimal(current_value)
    cap_rate = Decimal("0")
    if income > 0 and value > 0:
        cap_rate = income * 12 / value * 100
    return RentalMetrics(
        monthly_income=round_money(income),
        monthly_expenses=round_money(expenses),
        monthly_cash_flow=round_money(cash_flow),
        cap_rate_percent=round_money(cap_rate),
    )


def compute_net_worth_summary(
    accounts: Iterable[Account],
    assets: Iterable[Asset],
    as_of: date,
) -> NetWorthSummary:
    """Compute net worth totals at a date.

    Args:
        accounts: Account snapshots with current balances.
        assets: Owned assets.
        as_of: Valuation date.

    Returns:
        NetWorthSummary: Account, asset and net worth totals.
    """
    account_total = sum(
        (coerce_decimal(account.balance) for account in accounts),
        Decimal("0"),
    )
    asset_total = sum(
        (current_asset_value(asset, as_of) for asset in assets),
        Decimal("0"),
    )
    return NetWorthSummary(
        account_total=account_total,
        asset_total=asset_total,
        net_worth=account_total + asset_total,
        as_of=as_of,
    )


__all__ = [
    "calculate_account_balance",
    "current_asset_value",
    "calculate_roi",
    "compute_rental_metrics",
    "compute_net_worth_summary",
]
