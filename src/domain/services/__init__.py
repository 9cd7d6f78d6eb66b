"""Domain services package."""

from .amortization import (
    amortize,
    calculate_financing_progress,
    calculate_monthly_payment,
    financing_progress_percent,
)
from .budgets import budget_period_start, compute_budget_progress
from .cashflow import (
    compute_monthly_totals,
    compute_spending_by_category,
    filter_transactions_by_range,
)
from .growth import calculate_asset_growth, months_elapsed, value_at
from .normalization import (
    normalize_category,
    normalize_merchant,
    parse_category_list,
)
from .schedules import (
    is_schedule_active,
    materialize_schedule,
    next_occurrence,
    occurrences_between,
)
from .timeline import build_net_worth_timeline
from .validation import validate_accounts
from .valuation import (
    calculate_account_balance,
    calculate_roi,
    compute_net_worth_summary,
    compute_rental_metrics,
    current_asset_value,
)

__all__ = [
    "amortize",
    "calculate_financing_progress",
    "calculate_monthly_payment",
    "financing_progress_percent",
    "budget_period_start",
    "compute_budget_progress",
    "compute_monthly_totals",
    "compute_spending_by_category",
    "filter_transactions_by_range",
    "calculate_asset_growth",
    "months_elapsed",
    "value_at",
    "normalize_category",
    "normalize_merchant",
    "parse_category_list",
    "is_schedule_active",
    "materialize_schedule",
    "next_occurrence",
    "occurrences_between",
    "build_net_worth_timeline",
    "validate_accounts",
    "calculate_account_balance",
    "calculate_roi",
    "compute_net_worth_summary",
    "compute_rental_metrics",
    "current_asset_value",
]
