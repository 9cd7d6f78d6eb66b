"""Domain models package."""

from .accounts import Account, AccountType, Transaction
from .assets import (
    Asset,
    AssetKind,
    ExcludedAsset,
    Financing,
    PaymentMethod,
    RentalTerms,
)
from .budgets import Budget, BudgetFrequency, BudgetProgress
from .finance import (
    AmortizationResult,
    AssetProjection,
    CashflowView,
    CategoryAmount,
    GrowthPoint,
    MonthlyTotal,
    NetWorthDataPoint,
    NetWorthSummary,
    NetWorthTimeline,
    RentalMetrics,
    TimeRange,
)
from .schedules import Frequency, RecurringSchedule

__all__ = [
    "Account",
    "AccountType",
    "Transaction",
    "Asset",
    "AssetKind",
    "ExcludedAsset",
    "Financing",
    "PaymentMethod",
    "RentalTerms",
    "Budget",
    "BudgetFrequency",
    "BudgetProgress",
    "AmortizationResult",
    "AssetProjection",
    "CashflowView",
    "CategoryAmount",
    "GrowthPoint",
    "MonthlyTotal",
    "NetWorthDataPoint",
    "NetWorthSummary",
    "NetWorthTimeline",
    "RentalMetrics",
    "TimeRange",
    "Frequency",
    "RecurringSchedule",
]
