"""Use case to project the value and loan progress of one asset."""

from datetime import date
from decimal import Decimal

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import DEFAULT_PROJECTION_MONTHS
from src.domain.models.finance import AssetProjection
from src.domain.policies.asset_eligibility import (
    exclusion_reason,
    resolve_growth_rate,
)
from src.domain.services.amortization import (
    calculate_financing_progress,
    calculate_monthly_payment,
    financing_progress_percent,
    has_financing,
)
from src.domain.services.growth import calculate_asset_growth
from src.domain.services.valuation import (
    calculate_roi,
    compute_rental_metrics,
    current_asset_value,
)
from src.infrastructure.logging.logger import get_app_logger


class GetAssetProjectionUseCase:
    """Build the growth curve, ROI, financing and rental figures of an asset."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        months: int = DEFAULT_PROJECTION_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing asset snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            months: Number of months projected after the purchase date.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._months = months

    def execute(
        self,
        user_id: str,
        asset_id: str,
        today: date | None = None,
    ) -> AssetProjection | None:
        """Return the projection of one asset.

        Args:
            user_id: Owner of the asset.
            asset_id: Identifier of the asset.
            today: Optional reference date, defaults to the current date.

        Returns:
            AssetProjection | None: Projection, or None when the asset is
            unknown or lacks purchase data.
        """
        today = today or date.today()
        asset = next(
            (
                item
                for item in self._repository.fetch_assets(user_id)
                if item.id == asset_id
            ),
            None,
        )
        if asset is None:
            self._logger.warning(f"Asset {asset_id} not found for {user_id}")
            return None
        reason = exclusion_reason(asset)
        if reason is not None:
            self._logger.warning(
                f"Cannot project asset '{asset.name}' ({asset.id}): {reason}"
            )
            return None

        growth_rate = resolve_growth_rate(asset)
        current_value = current_asset_value(asset, today)
        financing = None
        progress = Decimal("0")
        monthly_payment = Decimal("0")
        if has_financing(asset.financing):
            financing = calculate_financing_progress(
                asset.financing,
                today,
                purchase_date=asset.purchase_date,
            )
            progress = financing_progress_percent(
                financing.principal_paid,
                asset.financing.loan_amount,
            )
            if financing.remaining_balance > 0:
                monthly_payment = asset.financing.monthly_payment or (
                    calculate_monthly_payment(
                        asset.financing.loan_amount,
                        asset.financing.interest_rate,
                        asset.financing.term_months,
                    )
                )

        rental = None
        if asset.rental is not None:
            rental = compute_rental_metrics(
                asset.rental,
                current_value,
                monthly_payment,
            )

        return AssetProjection(
            asset=asset,
            growth_rate=growth_rate,
            curve=calculate_asset_growth(
                asset.purchase_price,
                growth_rate,
                self._months,
                asset.purchase_date,
            ),
            current_value=current_value,
            roi_percent=calculate_roi(asset.purchase_price, current_value),
            financing=financing,
            financing_progress_percent=progress,
            rental=rental,
        )


__all__ = ["GetAssetProjectionUseCase"]
