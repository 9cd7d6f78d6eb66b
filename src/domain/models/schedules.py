"""Domain models for recurring transaction schedules."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class Frequency(str, Enum):
    """How often a recurring schedule produces a transaction."""

    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


@dataclass(frozen=True)
class RecurringSchedule:
    """Template that materializes into transactions on each due date."""

    id: str
    account_id: str
    frequency: Frequency
    start_date: date
    amount: Decimal
    end_date: date | None = None
    merchant: str | None = None
    category: str | None = None


__all__ = ["Frequency", "RecurringSchedule"]
