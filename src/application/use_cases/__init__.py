"""Application use cases package."""

from .get_asset_projection import GetAssetProjectionUseCase
from .get_budget_progress import GetBudgetProgressUseCase
from .get_cashflow import GetCashflowUseCase
from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .get_net_worth_timeline import GetNetWorthTimelineUseCase
from .materialize_recurring import (
    MaterializeRecurringSchedulesUseCase,
    MaterializeResult,
)

__all__ = [
    "GetAssetProjectionUseCase",
    "GetBudgetProgressUseCase",
    "GetCashflowUseCase",
    "GetNetWorthSummaryUseCase",
    "GetNetWorthTimelineUseCase",
    "MaterializeRecurringSchedulesUseCase",
    "MaterializeResult",
]
