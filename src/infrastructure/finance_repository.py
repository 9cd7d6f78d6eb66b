"""SQLAlchemy-backed repository for personal finance records."""

from collections import defaultdict
from datetime import date, datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models.accounts import Account, AccountType, Transaction
from src.domain.models.assets import (
    Asset,
    AssetKind,
    Financing,
    PaymentMethod,
    RentalTerms,
)
from src.domain.models.budgets import Budget, BudgetFrequency
from src.domain.models.schedules import Frequency, RecurringSchedule
from src.domain.services.normalization import (
    normalize_merchant,
    parse_category_list,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, user_id, account_name, account_type, balance
    FROM accounts
    WHERE user_id = :user_id
    ORDER BY account_name
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT t.id, t.account_id, t.transaction_date, t.amount,
           t.merchant, t.category
    FROM bank_accounts_transactions t
    JOIN accounts a ON a.id = t.account_id
    WHERE a.user_id = :user_id
    UNION ALL
    SELECT t.id, t.account_id, t.transaction_date,
           t.amount * t.price_at_transaction AS amount,
           NULL AS merchant, NULL AS category
    FROM crypto_wallet_transactions t
    JOIN accounts a ON a.id = t.account_id
    WHERE a.user_id = :user_id
    UNION ALL
    SELECT t.id, t.account_id, t.transaction_date, t.amount,
           t.ticker_symbol AS merchant, t.transaction_type AS category
    FROM investment_transactions t
    JOIN accounts a ON a.id = t.account_id
    WHERE a.user_id = :user_id
    """
)

SELECT_VEHICLES_SQL = text(
    """
    SELECT id, user_id, make, model, year, purchase_price, purchase_date,
           payment_method, loan_amount, interest_rate, loan_term_months,
           loan_start_date, monthly_payment
    FROM vehicles
    WHERE user_id = :user_id
    """
)

SELECT_REAL_ESTATE_SQL = text(
    """
    SELECT id, user_id, address, purchase_price, purchase_date,
           mortgage_balance, mortgage_interest_rate, mortgage_term_years,
           property_tax_annual
    FROM real_estate
    WHERE user_id = :user_id
    """
)

SELECT_SCHEDULES_SQL = text(
    """
    SELECT s.id, s.account_id, s.frequency, s.start_date, s.end_date,
           s.merchant, s.category, s.amount
    FROM recurring_schedules s
    JOIN accounts a ON a.id = s.account_id
    WHERE a.user_id = :user_id
    ORDER BY s.start_date
    """
)

SELECT_BUDGETS_SQL = text(
    """
    SELECT id, budget_name, category, budget_amount, frequency
    FROM budgets
    WHERE user_id = :user_id
    ORDER BY budget_name
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO bank_accounts_transactions (
        account_id,
        transaction_date,
        amount,
        merchant,
        category
    )
    VALUES (
        :account_id,
        :transaction_date,
        :amount,
        :merchant,
        :category
    )
    """
)


def _to_date(value) -> date | None:
    """Normalize SQL date and timestamp values to ``date``."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository backed by SQLAlchemy for the finance schema."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return the user's accounts with their transactions.

        Crypto transactions are valued at their price at transaction time.
        """
        params = {"user_id": user_id}
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            account_rows = conn.execute(SELECT_ACCOUNTS_SQL, params).all()
            transaction_rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                params,
            ).all()

        by_account: dict[str, list[Transaction]] = defaultdict(list)
        for row in transaction_rows:
            tx_date = _to_date(row.transaction_date)
            if tx_date is None:
                continue
            by_account[str(row.account_id)].append(
                Transaction(
                    id=str(row.id),
                    account_id=str(row.account_id),
                    date=tx_date,
                    amount=coerce_decimal(row.amount),
                    merchant=normalize_merchant(row.merchant),
                    category=row.category,
                )
            )

        accounts = []
        for row in account_rows:
            account_id = str(row.id)
            try:
                account_type = AccountType(str(row.account_type).lower())
            except ValueError:
                self._logger.warning(
                    f"Skipping account {account_id} with unknown type "
                    f"'{row.account_type}'"
                )
                continue
            transactions = sorted(
                by_account.get(account_id, []),
                key=lambda tx: tx.date,
            )
            accounts.append(
                Account(
                    id=account_id,
                    user_id=str(row.user_id),
                    name=row.account_name,
                    account_type=account_type,
                    balance=coerce_decimal(row.balance),
                    transactions=tuple(transactions),
                )
            )
        self._logger.info(
            f"Loaded {len(accounts)} accounts and {len(transaction_rows)} "
            f"transactions for {user_id}"
        )
        return accounts

    def fetch_assets(self, user_id: str) -> list[Asset]:
        """Return the user's vehicles and real estate as assets."""
        params = {"user_id": user_id}
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            vehicle_rows = conn.execute(SELECT_VEHICLES_SQL, params).all()
            property_rows = conn.execute(SELECT_REAL_ESTATE_SQL, params).all()
        assets = [self._vehicle_to_asset(row) for row in vehicle_rows]
        assets.extend(self._property_to_asset(row) for row in property_rows)
        return assets

    def fetch_recurring_schedules(self, user_id: str) -> list[RecurringSchedule]:
        """Return the recurring schedules attached to the user's accounts."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_SCHEDULES_SQL, {"user_id": user_id}).all()
        schedules = []
        for row in rows:
            try:
                frequency = Frequency(str(row.frequency).lower())
            except ValueError:
                self._logger.warning(
                    f"Skipping schedule {row.id} with unknown frequency "
                    f"'{row.frequency}'"
                )
                continue
            schedules.append(
                RecurringSchedule(
                    id=str(row.id),
                    account_id=str(row.account_id),
                    frequency=frequency,
                    start_date=_to_date(row.start_date),
                    end_date=_to_date(row.end_date),
                    merchant=normalize_merchant(row.merchant),
                    category=row.category,
                    amount=coerce_decimal(row.amount),
                )
            )
        return schedules

    def fetch_budgets(self, user_id: str) -> list[Budget]:
        """Return the user's budgets with their category lists split."""
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_BUDGETS_SQL, {"user_id": user_id}).all()
        return [
            Budget(
                id=str(row.id),
                name=row.budget_name,
                categories=parse_category_list(row.category),
                amount=coerce_decimal(row.budget_amount),
                frequency=BudgetFrequency(str(row.frequency).lower()),
            )
            for row in rows
        ]

    def insert_transactions(self, transactions: list[Transaction]) -> int:
        """Insert transactions into the bank transactions table.

        Args:
            transactions: Transactions to insert; ids are assigned by the
                database.

        Returns:
            int: Number of inserted rows.
        """
        if not transactions:
            return 0
        payload = [
            {
                "account_id": tx.account_id,
                "transaction_date": tx.date,
                "amount": tx.amount,
                "merchant": tx.merchant,
                "category": tx.category,
            }
            for tx in transactions
        ]
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_TRANSACTION_SQL, payload)
        return len(payload)

    @staticmethod
    def _vehicle_to_asset(row) -> Asset:
        method = row.payment_method or PaymentMethod.CASH.value
        financing = Financing(
            loan_amount=coerce_optional_decimal(row.loan_amount),
            interest_rate=coerce_optional_decimal(row.interest_rate),
            term_months=row.loan_term_months,
            start_date=_to_date(row.loan_start_date),
            monthly_payment=coerce_optional_decimal(row.monthly_payment),
            payment_method=PaymentMethod(str(method).lower()),
        )
        return Asset(
            id=str(row.id),
            user_id=str(row.user_id),
            kind=AssetKind.VEHICLE,
            name=f"{row.year} {row.make} {row.model}",
            purchase_date=_to_date(row.purchase_date),
            purchase_price=coerce_optional_decimal(row.purchase_price),
            financing=financing,
        )

    @staticmethod
    def _property_to_asset(row) -> Asset:
        financing = None
        if row.mortgage_balance is not None:
            term_years = row.mortgage_term_years
            financing = Financing(
                loan_amount=coerce_optional_decimal(row.mortgage_balance),
                interest_rate=coerce_optional_decimal(
                    row.mortgage_interest_rate
                ),
                term_months=term_years * 12 if term_years else None,
            )
        rental = None
        if row.property_tax_annual is not None:
            rental = RentalTerms(
                property_tax_annual=coerce_decimal(row.property_tax_annual),
            )
        return Asset(
            id=str(row.id),
            user_id=str(row.user_id),
            kind=AssetKind.REAL_ESTATE,
            name=row.address,
            purchase_date=_to_date(row.purchase_date),
            purchase_price=coerce_optional_decimal(row.purchase_price),
            financing=financing,
            rental=rental,
        )


__all__ = ["SqlAlchemyFinanceRepository"]
