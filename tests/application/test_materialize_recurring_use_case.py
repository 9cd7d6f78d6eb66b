"""Tests for the MaterializeRecurringSchedulesUseCase."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.materialize_recurring import (
    MaterializeRecurringSchedulesUseCase,
)
from src.domain.models.accounts import Account, AccountType, Transaction
from src.domain.models.schedules import Frequency, RecurringSchedule
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository


def _schedule(schedule_id: str, account_id: str) -> RecurringSchedule:
    return RecurringSchedule(
        id=schedule_id,
        account_id=account_id,
        frequency=Frequency.WEEKLY,
        start_date=date(2024, 3, 4),
        amount=Decimal("-20"),
        merchant="Coffee Club",
        category="Dining",
    )


def test_execute_inserts_missing_occurrences() -> None:
    account = Account(
        id="acc-1",
        user_id="user-1",
        name="Checking",
        account_type=AccountType.BANK,
        balance=Decimal("0"),
        transactions=(
            Transaction(
                id="existing",
                account_id="acc-1",
                date=date(2024, 3, 4),
                amount=Decimal("-20"),
                merchant="Coffee Club",
            ),
        ),
    )
    repository = MagicMock()
    repository.fetch_recurring_schedules.return_value = [
        _schedule("s1", "acc-1"),
        _schedule("s2", "acc-unknown"),
    ]
    repository.fetch_accounts.return_value = [account]
    repository.insert_transactions.side_effect = lambda rows: len(rows)
    logger = MagicMock()

    result = MaterializeRecurringSchedulesUseCase(
        repository,
        logger=logger,
    ).execute("user-1", until=date(2024, 3, 20))

    inserted = repository.insert_transactions.call_args[0][0]
    assert [tx.date for tx in inserted] == [date(2024, 3, 11), date(2024, 3, 18)]
    assert result.schedules == 2
    assert result.created == 2
    assert "acc-unknown" in logger.warning.call_args[0][0]


def test_execute_without_schedules_does_nothing() -> None:
    repository = MagicMock()
    repository.fetch_recurring_schedules.return_value = []

    result = MaterializeRecurringSchedulesUseCase(
        repository,
        logger=MagicMock(),
    ).execute("user-1", until=date(2024, 1, 1))

    assert result.created == 0
    repository.insert_transactions.assert_not_called()


def test_execute_skips_schedules_on_non_bank_accounts() -> None:
    wallet = Account(
        id="acc-crypto",
        user_id="user-1",
        name="Wallet",
        account_type=AccountType.CRYPTO,
        balance=Decimal("0"),
    )
    repository = MagicMock()
    repository.fetch_recurring_schedules.return_value = [
        _schedule("s1", "acc-crypto"),
    ]
    repository.fetch_accounts.return_value = [wallet]
    logger = MagicMock()

    result = MaterializeRecurringSchedulesUseCase(
        repository,
        logger=logger,
    ).execute("user-1", until=date(2024, 3, 20))

    assert result.schedules == 1
    assert result.created == 0
    repository.insert_transactions.assert_not_called()
    message = logger.warning.call_args[0][0]
    assert "crypto" in message
    assert "acc-crypto" in message


class _FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return list(self._rows)


def test_rerun_against_stored_rows_inserts_nothing() -> None:
    """Rows written by an earlier run match even with a padded merchant."""
    schedule_row = SimpleNamespace(
        id="s1",
        account_id="acc-1",
        frequency="weekly",
        start_date=date(2024, 3, 4),
        end_date=None,
        merchant="Coffee Club ",
        category="Dining",
        amount=Decimal("-20.00"),
    )
    account_row = SimpleNamespace(
        id="acc-1",
        user_id="user-1",
        account_name="Checking",
        account_type="bank",
        balance=Decimal("-40.00"),
    )
    stored_rows = [
        SimpleNamespace(
            id=f"tx-{day}",
            account_id="acc-1",
            transaction_date=datetime(2024, 3, day),
            amount=Decimal("-20.00"),
            merchant="Coffee Club ",
            category="Dining",
        )
        for day in (4, 11)
    ]
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [
        _FakeResult([schedule_row]),
        _FakeResult([account_row]),
        _FakeResult(stored_rows),
    ]
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    logger = MagicMock()
    repository = SqlAlchemyFinanceRepository(db_port, logger=logger)

    result = MaterializeRecurringSchedulesUseCase(
        repository,
        logger=logger,
    ).execute("user-1", until=date(2024, 3, 12))

    assert result.schedules == 1
    assert result.created == 0
    engine.begin.assert_not_called()
