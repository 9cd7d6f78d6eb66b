"""Domain models for financial accounts and their transactions."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class AccountType(str, Enum):
    """Account categories stored in the accounts table."""

    BANK = "bank"
    CRYPTO = "crypto"
    CREDIT = "credit"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    REAL_ESTATE = "real_estate"
    VEHICLE = "vehicle"


@dataclass(frozen=True)
class Transaction:
    """Signed cash movement on an account.

    Attributes:
        id: Transaction identifier.
        account_id: Identifier of the owning account.
        date: Calendar date the transaction was posted.
        amount: Signed amount, positive for inflows.
        merchant: Optional counterparty label.
        category: Optional spending or income category.
    """

    id: str
    account_id: str
    date: date
    amount: Decimal
    merchant: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class Account:
    """Account snapshot with its cached balance and transactions."""

    id: str
    user_id: str
    name: str
    account_type: AccountType
    balance: Decimal
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)


__all__ = ["AccountType", "Transaction", "Account"]
