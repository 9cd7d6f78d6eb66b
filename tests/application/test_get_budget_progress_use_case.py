"""Tests for the GetBudgetProgressUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_budget_progress import (
    GetBudgetProgressUseCase,
)
from src.domain.models.accounts import Account, AccountType, Transaction
from src.domain.models.budgets import Budget, BudgetFrequency


def test_execute_warns_when_budget_is_exceeded() -> None:
    repository = MagicMock()
    repository.fetch_budgets.return_value = [
        Budget(
            id="b1",
            name="Dining",
            categories=("Dining",),
            amount=Decimal("100"),
            frequency=BudgetFrequency.MONTHLY,
        )
    ]
    repository.fetch_accounts.return_value = [
        Account(
            id="acc-1",
            user_id="user-1",
            name="Visa",
            account_type=AccountType.CREDIT,
            balance=Decimal("-150"),
            transactions=(
                Transaction(
                    id="t1",
                    account_id="acc-1",
                    date=date(2024, 6, 3),
                    amount=Decimal("-150"),
                    category="Dining",
                ),
            ),
        )
    ]
    logger = MagicMock()

    progress = GetBudgetProgressUseCase(repository, logger=logger).execute(
        "user-1",
        today=date(2024, 6, 20),
    )

    assert len(progress) == 1
    assert progress[0].spent == Decimal("150")
    assert progress[0].remaining == Decimal("-50")
    assert progress[0].percent_used == Decimal("150.00")
    assert "Dining" in logger.warning.call_args[0][0]


def test_execute_skips_accounts_when_no_budgets() -> None:
    repository = MagicMock()
    repository.fetch_budgets.return_value = []

    assert GetBudgetProgressUseCase(
        repository,
        logger=MagicMock(),
    ).execute("user-1") == []
    repository.fetch_accounts.assert_not_called()
