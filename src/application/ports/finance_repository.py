"""Port for reading and writing personal finance records."""

from typing import Protocol

from src.domain.models.accounts import Account, Transaction
from src.domain.models.assets import Asset
from src.domain.models.budgets import Budget
from src.domain.models.schedules import RecurringSchedule


class FinanceRepositoryPort(Protocol):
    """Port exposing a user's accounts, assets, schedules and budgets.

    Implementations return immutable snapshots; use cases never receive live
    ORM objects or open connections.
    """

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return the user's accounts with their transactions loaded.

        Args:
            user_id: Owner of the accounts.

        Returns:
            list[Account]: Account snapshots.
        """

    def fetch_assets(self, user_id: str) -> list[Asset]:
        """Return the user's vehicles, properties and other assets."""

    def fetch_recurring_schedules(self, user_id: str) -> list[RecurringSchedule]:
        """Return the user's recurring schedules."""

    def fetch_budgets(self, user_id: str) -> list[Budget]:
        """Return the user's budgets."""

    def insert_transactions(self, transactions: list[Transaction]) -> int:
        """Persist new transactions.

        Args:
            transactions: Transactions to insert.

        Returns:
            int: Number of inserted rows.
        """


__all__ = ["FinanceRepositoryPort"]
