"""Rules deciding which assets take part in valuation."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import DEFAULT_GROWTH_RATES
from src.domain.models.assets import Asset, ExcludedAsset

MISSING_PURCHASE_DATE = "missing purchase date"
MISSING_PURCHASE_PRICE = "missing purchase price"


def resolve_growth_rate(asset: Asset) -> Decimal:
    """Return the stored growth rate or the default for the asset kind."""
    if asset.annual_growth_rate is not None:
        return asset.annual_growth_rate
    return DEFAULT_GROWTH_RATES.get(asset.kind, Decimal("0"))


def exclusion_reason(asset: Asset) -> str | None:
    """Return why an asset cannot be valued, or None when it can."""
    if asset.purchase_date is None:
        return MISSING_PURCHASE_DATE
    if not asset.purchase_price:
        return MISSING_PURCHASE_PRICE
    return None


def partition_valuable_assets(
    assets: Iterable[Asset],
) -> tuple[list[Asset], list[ExcludedAsset]]:
    """Split assets into valuable ones and reported exclusions.

    Args:
        assets: Assets loaded for a user.

    Returns:
        Valuable assets in input order, and the excluded ones with reasons.
    """
    valuable: list[Asset] = []
    excluded: list[ExcludedAsset] = []
    for asset in assets:
        reason = exclusion_reason(asset)
        if reason is None:
            valuable.append(asset)
        else:
            excluded.append(
                ExcludedAsset(asset_id=asset.id, name=asset.name, reason=reason)
            )
    return valuable, excluded


__all__ = [
    "MISSING_PURCHASE_DATE",
    "MISSING_PURCHASE_PRICE",
    "resolve_growth_rate",
    "exclusion_reason",
    "partition_valuable_assets",
]
