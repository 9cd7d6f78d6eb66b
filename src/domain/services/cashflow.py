"""Domain services for income and spending aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Literal

from src.domain.models.accounts import Transaction
from src.domain.models.finance import CategoryAmount, MonthlyTotal, TimeRange
from src.domain.policies.time_ranges import range_start
from src.domain.services.normalization import normalize_category

CashflowKind = Literal["income", "spending"]


def filter_transactions_by_range(
    transactions: Iterable[Transaction],
    time_range: TimeRange,
    today: date,
) -> list[Transaction]:
    """Keep transactions dated on or after the start of the range.

    Args:
        transactions: Transactions to filter.
        time_range: Selected range; ALL keeps everything.
        today: Reference date.

    Returns:
        list[Transaction]: Matching transactions in input order.
    """
    cutoff = range_start(time_range, today)
    if cutoff is None:
        return list(transactions)
    return [tx for tx in transactions if tx.date >= cutoff]


def compute_monthly_totals(
    transactions: Iterable[Transaction],
    kind: CashflowKind,
) -> list[MonthlyTotal]:
    """Group income or spending by ``YYYY-MM`` month.

    Args:
        transactions: Transactions to aggregate.
        kind: ``income`` keeps positive amounts, ``spending`` keeps negative
            amounts and reports them as absolute values.

    Returns:
        list[MonthlyTotal]: Totals in ascending month order.
    """
    totals: dict[str, Decimal] = {}
    for tx in transactions:
        if kind == "income" and tx.amount <= 0:
            continue
        if kind == "spending" and tx.amount >= 0:
            continue
        month = tx.date.strftime("%Y-%m")
        totals[month] = totals.get(month, Decimal("0")) + abs(tx.amount)
    return [
        MonthlyTotal(month=month, amount=amount)
        for month, amount in sorted(totals.items())
    ]


def compute_spending_by_category(
    transactions: Iterable[Transaction],
) -> list[CategoryAmount]:
    """Aggregate outflows by category, largest first."""
    totals: dict[str, Decimal] = {}
    for tx in transactions:
        if tx.amount >= 0:
            continue
        category = normalize_category(tx.category)
        totals[category] = totals.get(category, Decimal("0")) + abs(tx.amount)
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in ordered
    ]


__all__ = [
    "CashflowKind",
    "filter_transactions_by_range",
    "compute_monthly_totals",
    "compute_spending_by_category",
]
