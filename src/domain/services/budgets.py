"""Domain services for budget tracking."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from src.domain.models.accounts import Transaction
from src.domain.models.budgets import Budget, BudgetFrequency, BudgetProgress
from src.domain.services.normalization import normalize_category
from src.utils.decimal_utils import round_money


def budget_period_start(frequency: BudgetFrequency, today: date) -> date:
    """Return the first day of the current budget period."""
    if frequency == BudgetFrequency.DAILY:
        return today
    if frequency == BudgetFrequency.WEEKLY:
        return today - timedelta(days=today.weekday())
    if frequency == BudgetFrequency.MONTHLY:
        return today.replace(day=1)
    return today.replace(month=1, day=1)


def compute_budget_progress(
    budget: Budget,
    transactions: Iterable[Transaction],
    today: date,
) -> BudgetProgress:
    """Measure spending against a budget for the current period.

    Args:
        budget: Budget definition.
        transactions: Candidate transactions across accounts.
        today: Reference date.

    Returns:
        BudgetProgress: Spent and remaining amounts; percent used is 0 for a
        zero budget.
    """
    period_start = budget_period_start(budget.frequency, today)
    categories = {category.lower() for category in budget.categories}
    spent = Decimal("0")
    for tx in transactions:
        if tx.amount >= 0 or not period_start <= tx.date <= today:
            continue
        if normalize_category(tx.category).lower() not in categories:
            continue
        spent += abs(tx.amount)

    percent_used = (
        round_money(spent / budget.amount * 100)
        if budget.amount
        else Decimal("0")
    )
    return BudgetProgress(
        budget=budget,
        spent=spent,
        remaining=budget.amount - spent,
        percent_used=percent_used,
    )


__all__ = ["budget_period_start", "compute_budget_progress"]
