"""Domain policies package."""

from .asset_eligibility import (
    exclusion_reason,
    partition_valuable_assets,
    resolve_growth_rate,
)
from .time_ranges import is_in_current_month, parse_time_range, range_start

__all__ = [
    "exclusion_reason",
    "partition_valuable_assets",
    "resolve_growth_rate",
    "is_in_current_month",
    "parse_time_range",
    "range_start",
]
