"""Recurring schedule occurrence and materialization rules."""

from collections.abc import Iterable
from datetime import date

from dateutil.relativedelta import relativedelta

from src.domain.models.accounts import Transaction
from src.domain.models.schedules import Frequency, RecurringSchedule
from src.domain.services.normalization import normalize_merchant

_STEPS = {
    Frequency.DAILY: relativedelta(days=1),
    Frequency.WEEKLY: relativedelta(weeks=1),
    Frequency.BIWEEKLY: relativedelta(weeks=2),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.QUARTERLY: relativedelta(months=3),
    Frequency.ANNUALLY: relativedelta(years=1),
}


def occurrence(schedule: RecurringSchedule, index: int) -> date:
    """Return the ``index``-th occurrence, counted from the start date.

    Offsets are applied to the start date rather than chained, so a
    schedule starting on the 31st falls on each month's last day instead of
    drifting to the 28th.
    """
    return schedule.start_date + _STEPS[schedule.frequency] * index


def is_schedule_active(schedule: RecurringSchedule, today: date) -> bool:
    """Return True when the schedule has started and not yet ended."""
    if schedule.end_date is not None and schedule.end_date < today:
        return False
    return schedule.start_date <= today


def occurrences_between(
    schedule: RecurringSchedule,
    start_date: date,
    end_date: date,
) -> list[date]:
    """List occurrence dates within ``[start_date, end_date]``.

    Args:
        schedule: Recurring schedule.
        start_date: First day of the window.
        end_date: Last day of the window; clipped to the schedule end date.

    Returns:
        list[date]: Ascending occurrence dates.
    """
    last_day = end_date
    if schedule.end_date is not None and schedule.end_date < last_day:
        last_day = schedule.end_date
    dates: list[date] = []
    index = 0
    current = occurrence(schedule, index)
    while current <= last_day:
        if current >= start_date:
            dates.append(current)
        index += 1
        current = occurrence(schedule, index)
    return dates


def next_occurrence(schedule: RecurringSchedule, today: date) -> date | None:
    """Return the first occurrence on or after ``today``.

    Returns:
        date | None: Next due date, or None once the schedule has ended.
    """
    if schedule.end_date is not None and schedule.end_date < today:
        return None
    index = 0
    current = occurrence(schedule, index)
    while current < today:
        index += 1
        current = occurrence(schedule, index)
    if schedule.end_date is not None and current > schedule.end_date:
        return None
    return current


def _transaction_key(tx: Transaction) -> tuple:
    return (tx.account_id, tx.date, tx.amount, normalize_merchant(tx.merchant))


def materialize_schedule(
    schedule: RecurringSchedule,
    until: date,
    existing: Iterable[Transaction] = (),
) -> list[Transaction]:
    """Create the transactions a schedule owes up to ``until``.

    Occurrences already present in ``existing`` (same account, date, amount
    and merchant, compared after merchant normalization) are skipped, so
    repeated runs do not duplicate rows.

    Args:
        schedule: Recurring schedule to materialize.
        until: Last due date to include.
        existing: Transactions already recorded on the account.

    Returns:
        list[Transaction]: New transactions in ascending date order.
    """
    seen = {_transaction_key(tx) for tx in existing}
    created: list[Transaction] = []
    for due_date in occurrences_between(schedule, schedule.start_date, until):
        tx = Transaction(
            id=f"{schedule.id}:{due_date.isoformat()}",
            account_id=schedule.account_id,
            date=due_date,
            amount=schedule.amount,
            merchant=normalize_merchant(schedule.merchant),
            category=schedule.category,
        )
        if _transaction_key(tx) in seen:
            continue
        seen.add(_transaction_key(tx))
        created.append(tx)
    return created


__all__ = [
    "occurrence",
    "is_schedule_active",
    "occurrences_between",
    "next_occurrence",
    "materialize_schedule",
]
