"""Domain constants for net worth analytics."""

from decimal import Decimal

from src.domain.models.assets import AssetKind
from src.domain.models.finance import TimeRange

DEFAULT_GROWTH_RATES = {
    AssetKind.VEHICLE: Decimal("-15"),
    AssetKind.REAL_ESTATE: Decimal("3"),
    AssetKind.GENERIC: Decimal("0"),
}

DEFAULT_TIME_RANGE = TimeRange.ONE_YEAR

# Lookback used for ALL when there is no transaction or purchase date.
ALL_RANGE_FALLBACK_YEARS = 10

NEAR_ZERO_NET_WORTH = Decimal("0.01")

DEFAULT_PROJECTION_MONTHS = 60

UNCATEGORIZED = "Uncategorized"


__all__ = [
    "DEFAULT_GROWTH_RATES",
    "DEFAULT_TIME_RANGE",
    "ALL_RANGE_FALLBACK_YEARS",
    "NEAR_ZERO_NET_WORTH",
    "DEFAULT_PROJECTION_MONTHS",
    "UNCATEGORIZED",
]
