"""Use case to measure spending against budgets."""

from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.budgets import BudgetProgress
from src.domain.services.budgets import compute_budget_progress
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetProgressUseCase:
    """Compute budget progress for the current periods."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing budgets and accounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        today: date | None = None,
    ) -> list[BudgetProgress]:
        """Return progress for each budget of the user."""
        today = today or date.today()
        budgets = self._repository.fetch_budgets(user_id)
        if not budgets:
            return []
        transactions = [
            tx
            for account in self._repository.fetch_accounts(user_id)
            for tx in account.transactions
        ]
        progress = [
            compute_budget_progress(budget, transactions, today)
            for budget in budgets
        ]
        for item in progress:
            if item.is_over_budget:
                self._logger.warning(
                    f"Budget '{item.budget.name}' exceeded: spent "
                    f"{item.spent} of {item.budget.amount}"
                )
        return progress


__all__ = ["GetBudgetProgressUseCase"]
