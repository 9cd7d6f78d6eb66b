"""Use case to turn due recurring schedules into transactions."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.accounts import AccountType
from src.domain.services.schedules import materialize_schedule
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MaterializeResult:
    """Outcome of a materialization run.

    Attributes:
        schedules: Number of schedules inspected.
        created: Number of transactions inserted.
    """

    schedules: int
    created: int


class MaterializeRecurringSchedulesUseCase:
    """Insert the transactions owed by recurring schedules."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing schedules and accepting transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, until: date | None = None) -> MaterializeResult:
        """Materialize every occurrence due up to ``until``.

        Args:
            user_id: Owner of the schedules.
            until: Last due date to include, defaults to today.

        Returns:
            MaterializeResult: Counts of schedules seen and rows inserted.
        """
        until = until or date.today()
        schedules = self._repository.fetch_recurring_schedules(user_id)
        if not schedules:
            self._logger.info(f"No recurring schedules for {user_id}")
            return MaterializeResult(schedules=0, created=0)

        accounts = {
            account.id: account
            for account in self._repository.fetch_accounts(user_id)
        }
        pending = []
        for schedule in schedules:
            account = accounts.get(schedule.account_id)
            if account is None:
                self._logger.warning(
                    f"Schedule {schedule.id} references unknown account "
                    f"{schedule.account_id}; skipping"
                )
                continue
            # Materialized rows land in the bank transactions table.
            if account.account_type != AccountType.BANK:
                self._logger.warning(
                    f"Schedule {schedule.id} targets "
                    f"{account.account_type.value} account {account.id}; "
                    "only bank accounts are supported, skipping"
                )
                continue
            pending.extend(
                materialize_schedule(schedule, until, account.transactions)
            )

        created = self._repository.insert_transactions(pending) if pending else 0
        self._logger.info(
            f"Materialized {created} transactions from {len(schedules)} "
            "schedules"
        )
        return MaterializeResult(schedules=len(schedules), created=created)


__all__ = ["MaterializeRecurringSchedulesUseCase", "MaterializeResult"]
