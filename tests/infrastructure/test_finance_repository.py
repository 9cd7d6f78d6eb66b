"""Tests for the SQLAlchemy finance repository."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.domain.models.accounts import AccountType, Transaction
from src.domain.models.assets import AssetKind, PaymentMethod
from src.domain.models.budgets import BudgetFrequency
from src.domain.models.schedules import Frequency
from src.domain.policies.asset_eligibility import resolve_growth_rate
from src.infrastructure.finance_repository import (
    INSERT_TRANSACTION_SQL,
    SELECT_REAL_ESTATE_SQL,
    SELECT_VEHICLES_SQL,
    SqlAlchemyFinanceRepository,
)


class _FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return list(self._rows)


def _build_repository(*results):
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    engine.begin.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    logger = MagicMock()
    repo = SqlAlchemyFinanceRepository(db_port, logger=logger)
    return repo, engine, conn, logger


def _vehicle_row(**overrides):
    values = {
        "id": "veh-1",
        "user_id": "user-1",
        "make": "Subaru",
        "model": "Outback",
        "year": 2021,
        "purchase_price": "32000.00",
        "purchase_date": date(2021, 6, 1),
        "payment_method": "Finance",
        "loan_amount": "25000",
        "interest_rate": "4.9",
        "loan_term_months": 60,
        "loan_start_date": datetime(2021, 6, 15, 10, 30),
        "monthly_payment": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def _property_row(**overrides):
    values = {
        "id": "home-1",
        "user_id": "user-1",
        "address": "12 Maple Street",
        "purchase_price": Decimal("450000"),
        "purchase_date": "2019-03-01",
        "mortgage_balance": Decimal("300000"),
        "mortgage_interest_rate": Decimal("3.25"),
        "mortgage_term_years": 25,
        "property_tax_annual": Decimal("4800"),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_fetch_accounts_attaches_sorted_transactions():
    """Accounts should carry their own transactions in date order."""
    account_rows = [
        SimpleNamespace(
            id="acc-1",
            user_id="user-1",
            account_name="Chequing",
            account_type="Bank",
            balance="1500.25",
        ),
        SimpleNamespace(
            id="acc-2",
            user_id="user-1",
            account_name="Visa",
            account_type="credit",
            balance=Decimal("-200"),
        ),
    ]
    transaction_rows = [
        SimpleNamespace(
            id="tx-2",
            account_id="acc-1",
            transaction_date=datetime(2024, 5, 10, 18, 0),
            amount="-45.10",
            merchant="  corner   cafe ",
            category="Food",
        ),
        SimpleNamespace(
            id="tx-1",
            account_id="acc-1",
            transaction_date=date(2024, 5, 1),
            amount=Decimal("2000"),
            merchant=None,
            category="Salary",
        ),
        SimpleNamespace(
            id="tx-3",
            account_id="acc-2",
            transaction_date="2024-05-03",
            amount=-200,
            merchant="Hardware Store",
            category="Home",
        ),
    ]
    repo, engine, conn, _ = _build_repository(account_rows, transaction_rows)

    accounts = repo.fetch_accounts("user-1")

    engine.connect.assert_called_once()
    assert conn.execute.call_count == 2
    assert conn.execute.call_args_list[0].args[1] == {"user_id": "user-1"}
    assert [account.id for account in accounts] == ["acc-1", "acc-2"]
    chequing, visa = accounts
    assert chequing.account_type == AccountType.BANK
    assert chequing.balance == Decimal("1500.25")
    assert [tx.id for tx in chequing.transactions] == ["tx-1", "tx-2"]
    assert chequing.transactions[1].date == date(2024, 5, 10)
    assert chequing.transactions[1].amount == Decimal("-45.10")
    assert visa.account_type == AccountType.CREDIT
    assert visa.transactions[0].date == date(2024, 5, 3)
    assert visa.transactions[0].amount == Decimal("-200")


def test_fetch_accounts_skips_unknown_account_types():
    """Unknown account types should be logged and dropped."""
    account_rows = [
        SimpleNamespace(
            id="acc-9",
            user_id="user-1",
            account_name="Mystery",
            account_type="pension",
            balance=0,
        )
    ]
    repo, _, _, logger = _build_repository(account_rows, [])

    accounts = repo.fetch_accounts("user-1")

    assert accounts == []
    logger.warning.assert_called_once()
    assert "acc-9" in logger.warning.call_args.args[0]


def test_fetch_assets_maps_vehicles_and_real_estate():
    """Vehicles and properties should become assets with financing."""
    repo, _, conn, _ = _build_repository([_vehicle_row()], [_property_row()])

    vehicle, home = repo.fetch_assets("user-1")

    assert conn.execute.call_count == 2
    assert vehicle.kind == AssetKind.VEHICLE
    assert vehicle.name == "2021 Subaru Outback"
    assert vehicle.purchase_price == Decimal("32000.00")
    assert vehicle.annual_growth_rate is None
    assert resolve_growth_rate(vehicle) == Decimal("-15")
    assert vehicle.financing.payment_method == PaymentMethod.FINANCE
    assert vehicle.financing.loan_amount == Decimal("25000")
    assert vehicle.financing.start_date == date(2021, 6, 15)
    assert vehicle.financing.monthly_payment is None

    assert home.kind == AssetKind.REAL_ESTATE
    assert home.name == "12 Maple Street"
    assert home.purchase_date == date(2019, 3, 1)
    assert home.annual_growth_rate is None
    assert home.financing.loan_amount == Decimal("300000")
    assert home.financing.term_months == 300
    assert home.rental.property_tax_annual == Decimal("4800")
    assert home.rental.monthly_rent is None


def test_fetch_assets_defaults_cash_vehicle_and_unfinanced_home():
    """Missing payment method and mortgage should not create a loan."""
    repo, _, _, _ = _build_repository(
        [
            _vehicle_row(
                payment_method=None,
                loan_amount=None,
                interest_rate=None,
                loan_term_months=None,
                loan_start_date=None,
            )
        ],
        [_property_row(mortgage_balance=None, property_tax_annual=None)],
    )

    vehicle, home = repo.fetch_assets("user-1")

    assert vehicle.financing.payment_method == PaymentMethod.CASH
    assert vehicle.financing.loan_amount is None
    assert home.financing is None
    assert home.rental is None


def test_fetch_recurring_schedules_skips_unknown_frequency():
    """Schedules should be mapped and unknown frequencies skipped."""
    rows = [
        SimpleNamespace(
            id="sch-1",
            account_id="acc-1",
            frequency="Monthly",
            start_date=date(2024, 1, 31),
            end_date=None,
            merchant=" Landlord ",
            category="Rent",
            amount="-1800",
        ),
        SimpleNamespace(
            id="sch-2",
            account_id="acc-1",
            frequency="fortnightly",
            start_date=date(2024, 1, 1),
            end_date=None,
            merchant="Gym",
            category="Health",
            amount="-30",
        ),
    ]
    repo, _, _, logger = _build_repository(rows)

    schedules = repo.fetch_recurring_schedules("user-1")

    assert len(schedules) == 1
    schedule = schedules[0]
    assert schedule.frequency == Frequency.MONTHLY
    assert schedule.start_date == date(2024, 1, 31)
    assert schedule.end_date is None
    assert schedule.amount == Decimal("-1800")
    assert schedule.merchant == "Landlord"
    logger.warning.assert_called_once()


def test_fetch_budgets_splits_categories():
    """Budget category strings should be split into a tuple."""
    rows = [
        SimpleNamespace(
            id="bud-1",
            budget_name="Eating out",
            category="Food, Restaurants",
            budget_amount="400",
            frequency="Monthly",
        )
    ]
    repo, _, _, _ = _build_repository(rows)

    budgets = repo.fetch_budgets("user-1")

    assert len(budgets) == 1
    budget = budgets[0]
    assert budget.name == "Eating out"
    assert budget.categories == ("Food", "Restaurants")
    assert budget.amount == Decimal("400")
    assert budget.frequency == BudgetFrequency.MONTHLY


def test_insert_transactions_runs_in_a_transaction():
    """Inserts should run inside engine.begin() with one payload row each."""
    repo, engine, conn, _ = _build_repository(None)
    transactions = [
        Transaction(
            id="sch-1:2024-02-29",
            account_id="acc-1",
            date=date(2024, 2, 29),
            amount=Decimal("-1800"),
            merchant="Landlord",
            category="Rent",
        )
    ]

    inserted = repo.insert_transactions(transactions)

    assert inserted == 1
    engine.begin.assert_called_once()
    statement, payload = conn.execute.call_args.args
    assert statement is INSERT_TRANSACTION_SQL
    assert payload == [
        {
            "account_id": "acc-1",
            "transaction_date": date(2024, 2, 29),
            "amount": Decimal("-1800"),
            "merchant": "Landlord",
            "category": "Rent",
        }
    ]


def test_insert_transactions_skips_empty_batches():
    """No database access should happen for an empty batch."""
    repo, engine, _, _ = _build_repository()

    assert repo.insert_transactions([]) == 0
    engine.begin.assert_not_called()


def test_asset_queries_select_stored_columns_only():
    """Vehicles have no growth rate column; properties carry their tax."""
    assert "annual_growth_rate" not in SELECT_VEHICLES_SQL.text
    assert "property_tax_annual" in SELECT_REAL_ESTATE_SQL.text
