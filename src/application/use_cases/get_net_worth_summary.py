"""Use case to compute the current net worth of a user."""

from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.finance import NetWorthSummary
from src.domain.services.valuation import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute account, asset and net worth totals."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing account and asset snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, as_of: date | None = None) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            user_id: Owner of the accounts and assets.
            as_of: Optional valuation date, defaults to today.

        Returns:
            NetWorthSummary: Computed account, asset and net worth totals.
        """
        as_of = as_of or date.today()
        summary = compute_net_worth_summary(
            self._repository.fetch_accounts(user_id),
            self._repository.fetch_assets(user_id),
            as_of,
        )
        self._logger.info(
            f"Net worth computed: accounts={summary.account_total}, "
            f"assets={summary.asset_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase"]
