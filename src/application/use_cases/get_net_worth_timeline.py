"""Use case to build the net worth timeline of a user."""

from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.finance import NetWorthTimeline, TimeRange
from src.domain.policies.asset_eligibility import partition_valuable_assets
from src.domain.services.timeline import build_net_worth_timeline
from src.domain.services.validation import validate_accounts
from src.domain.services.valuation import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthTimelineUseCase:
    """Reconstruct the net worth series from accounts and assets."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing account and asset snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        time_range: TimeRange,
        today: date | None = None,
    ) -> NetWorthTimeline:
        """Return the timeline, current summary and excluded assets.

        Args:
            user_id: Owner of the accounts and assets.
            time_range: Window to cover.
            today: Optional reference date, defaults to the current date.

        Returns:
            NetWorthTimeline: Ascending points ending on today's net worth.
        """
        today = today or date.today()
        accounts = self._repository.fetch_accounts(user_id)
        assets = self._repository.fetch_assets(user_id)
        self._logger.info(
            f"Building {time_range.value} timeline from {len(accounts)} "
            f"accounts and {len(assets)} assets"
        )

        out_of_sync = validate_accounts(accounts, self._logger)
        if out_of_sync:
            self._logger.warning(
                f"{out_of_sync} account balance(s) disagree with their "
                "transactions"
            )

        valuable, excluded = partition_valuable_assets(assets)
        points = build_net_worth_timeline(
            accounts,
            assets,
            time_range,
            today=today,
            logger=self._logger,
        )
        summary = compute_net_worth_summary(accounts, valuable, today)
        return NetWorthTimeline(
            time_range=time_range,
            points=points,
            summary=summary,
            excluded_assets=excluded,
        )


__all__ = ["GetNetWorthTimelineUseCase"]
