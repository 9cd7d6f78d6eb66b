"""Use case to compute income and spending breakdowns for a period."""

from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.finance import CashflowView, TimeRange
from src.domain.services.cashflow import (
    compute_monthly_totals,
    compute_spending_by_category,
    filter_transactions_by_range,
)
from src.infrastructure.logging.logger import get_app_logger


class GetCashflowUseCase:
    """Compute monthly income, spending and category totals."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing account snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        time_range: TimeRange,
        today: date | None = None,
    ) -> CashflowView:
        """Return cashflow series for the period.

        Args:
            user_id: Owner of the accounts.
            time_range: Window to cover.
            today: Optional reference date, defaults to the current date.

        Returns:
            CashflowView: Monthly income and spending plus category totals.
        """
        today = today or date.today()
        transactions = [
            tx
            for account in self._repository.fetch_accounts(user_id)
            for tx in account.transactions
        ]
        in_range = filter_transactions_by_range(transactions, time_range, today)
        self._logger.info(
            f"Cashflow over {time_range.value}: {len(in_range)} of "
            f"{len(transactions)} transactions"
        )
        return CashflowView(
            time_range=time_range,
            income=compute_monthly_totals(in_range, "income"),
            spending=compute_monthly_totals(in_range, "spending"),
            spending_by_category=compute_spending_by_category(in_range),
        )


__all__ = ["GetCashflowUseCase"]
