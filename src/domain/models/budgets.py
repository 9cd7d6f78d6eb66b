"""Domain models for spending budgets."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BudgetFrequency(str, Enum):
    """Budget reset period."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Budget:
    """Spending limit over one or more categories."""

    id: str
    name: str
    categories: tuple[str, ...]
    amount: Decimal
    frequency: BudgetFrequency


@dataclass(frozen=True)
class BudgetProgress:
    """Spending measured against a budget for the current period."""

    budget: Budget
    spent: Decimal
    remaining: Decimal
    percent_used: Decimal

    @property
    def is_over_budget(self) -> bool:
        """Return True when spending exceeds the budget amount."""
        return self.spent > self.budget.amount


__all__ = ["BudgetFrequency", "Budget", "BudgetProgress"]
