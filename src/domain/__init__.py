"""Domain package for business rules and core models."""

from .constants import DEFAULT_GROWTH_RATES, DEFAULT_TIME_RANGE
from .models import (
    Account,
    AccountType,
    Asset,
    AssetKind,
    NetWorthDataPoint,
    NetWorthSummary,
    TimeRange,
    Transaction,
)
from .policies import parse_time_range, partition_valuable_assets
from .services import (
    amortize,
    build_net_worth_timeline,
    calculate_asset_growth,
    compute_net_worth_summary,
)

__all__ = [
    "DEFAULT_GROWTH_RATES",
    "DEFAULT_TIME_RANGE",
    "Account",
    "AccountType",
    "Asset",
    "AssetKind",
    "NetWorthDataPoint",
    "NetWorthSummary",
    "TimeRange",
    "Transaction",
    "parse_time_range",
    "partition_valuable_assets",
    "amortize",
    "build_net_worth_timeline",
    "calculate_asset_growth",
    "compute_net_worth_summary",
]
