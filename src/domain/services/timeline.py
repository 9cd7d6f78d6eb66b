"""Net worth timeline reconstruction.

The series is rebuilt backwards from today's net worth: every dated change
(transaction, asset revaluation, asset purchase) is undone in reverse
chronological order, emitting the net worth observed at the end of each day
that carries a change. Walking backwards anchors the most recent point on the
independently computed current net worth, so the curve always ends on the
figure shown in the summary.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import Decimal
from logging import Logger

from dateutil.relativedelta import relativedelta

from src.domain.constants import ALL_RANGE_FALLBACK_YEARS, NEAR_ZERO_NET_WORTH
from src.domain.models.accounts import Account, Transaction
from src.domain.models.assets import Asset
from src.domain.models.finance import NetWorthDataPoint, TimeRange
from src.domain.policies.asset_eligibility import partition_valuable_assets
from src.domain.policies.time_ranges import is_in_current_month, range_start
from src.domain.services.growth import add_months, months_elapsed
from src.domain.services.valuation import (
    compute_net_worth_summary,
    current_asset_value,
)


def resolve_start_date(
    time_range: TimeRange,
    today: date,
    transactions: Sequence[Transaction],
    assets: Sequence[Asset],
) -> date:
    """Return the first day of the timeline window.

    Args:
        time_range: Selected range.
        today: Last day of the window.
        transactions: All transactions across accounts.
        assets: Assets with purchase data.

    Returns:
        date: ``today`` minus the range months, or for ALL the earliest
        transaction or purchase date.
    """
    start_date = range_start(time_range, today)
    if start_date is not None:
        return start_date
    candidates = [tx.date for tx in transactions]
    candidates.extend(
        asset.purchase_date for asset in assets if asset.purchase_date
    )
    if not candidates:
        return today - relativedelta(years=ALL_RANGE_FALLBACK_YEARS)
    return min(min(candidates), today)


def asset_event_dates(asset: Asset, start_date: date, end_date: date) -> set[date]:
    """Return the purchase and revaluation dates of an asset in a window."""
    purchase_date = asset.purchase_date
    dates: set[date] = set()
    if purchase_date is None or purchase_date > end_date:
        return dates
    first = months_elapsed(purchase_date, start_date)
    last = months_elapsed(purchase_date, end_date)
    for offset in range(first, last + 1):
        event_date = add_months(purchase_date, offset)
        if start_date <= event_date <= end_date:
            dates.add(event_date)
    return dates


def _drop_leading_near_zero(
    points: list[NetWorthDataPoint],
) -> list[NetWorthDataPoint]:
    for index, point in enumerate(points[:-1]):
        if abs(point.net_worth) >= NEAR_ZERO_NET_WORTH:
            return points[index:]
    return points[-1:]


def _apply_range_filter(
    points: list[NetWorthDataPoint],
    time_range: TimeRange,
    today: date,
) -> list[NetWorthDataPoint]:
    if time_range == TimeRange.ALL:
        return _drop_leading_near_zero(points)
    if time_range == TimeRange.ONE_MONTH:
        return [
            point for point in points if is_in_current_month(point.date, today)
        ]
    return points


def build_net_worth_timeline(
    accounts: Iterable[Account],
    assets: Iterable[Asset],
    time_range: TimeRange,
    *,
    today: date | None = None,
    logger: Logger,
) -> list[NetWorthDataPoint]:
    """Reconstruct the net worth series for a time range.

    Args:
        accounts: Account snapshots, each with its transactions.
        assets: Owned assets; those without a purchase date or price are
            excluded and reported through ``logger``.
        time_range: Window to cover.
        today: Reference date, defaults to the current date.
        logger: Logger used for warnings.

    Returns:
        list[NetWorthDataPoint]: Points in strictly ascending date order,
        ending on today's net worth.
    """
    today = today or date.today()
    accounts = list(accounts)
    valuable, excluded = partition_valuable_assets(assets)
    for item in excluded:
        logger.warning(
            f"Excluding asset '{item.name}' ({item.asset_id}) from net worth: "
            f"{item.reason}"
        )

    transactions = [tx for account in accounts for tx in account.transactions]
    start_date = resolve_start_date(time_range, today, transactions, valuable)

    transaction_totals: dict[date, Decimal] = defaultdict(Decimal)
    for tx in transactions:
        if start_date <= tx.date <= today:
            transaction_totals[tx.date] += tx.amount

    event_dates = {today, *transaction_totals}
    for asset in valuable:
        event_dates |= asset_event_dates(asset, start_date, today)

    running = compute_net_worth_summary(accounts, valuable, today).net_worth
    tracked = {asset.id: current_asset_value(asset, today) for asset in valuable}
    removed: set[str] = set()

    points: list[NetWorthDataPoint] = []
    for event_date in sorted(event_dates, reverse=True):
        points.append(NetWorthDataPoint(date=event_date, net_worth=running))

        running -= transaction_totals.get(event_date, Decimal("0"))
        previous_day = event_date - timedelta(days=1)
        for asset in valuable:
            if asset.id in removed:
                continue
            if asset.purchase_date == event_date:
                running -= tracked[asset.id]
                removed.add(asset.id)
                continue
            previous_value = current_asset_value(asset, previous_day)
            if previous_value != tracked[asset.id]:
                running -= tracked[asset.id] - previous_value
                tracked[asset.id] = previous_value

    points.reverse()
    return _apply_range_filter(points, time_range, today)


__all__ = [
    "resolve_start_date",
    "asset_event_dates",
    "build_net_worth_timeline",
]
