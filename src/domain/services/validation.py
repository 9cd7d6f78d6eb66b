"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from src.domain.models.accounts import Account, AccountType
from src.domain.services.valuation import calculate_account_balance


def validate_account_balance(account: Account, logger: Logger) -> bool:
    """Warn when a cached balance disagrees with its transactions.

    Accounts without loaded transactions are not checked.

    Args:
        account: Account snapshot.
        logger: Logger used for warnings.

    Returns:
        bool: True when the balance matches or cannot be checked.
    """
    if not account.transactions:
        return True
    expected = calculate_account_balance(account.transactions)
    if expected != account.balance:
        logger.warning(
            f"Balance out of sync for account {account.id}: "
            f"stored={account.balance}, transactions={expected}"
        )
        return False
    return True


def validate_balance_sign(account: Account, logger: Logger) -> None:
    """Warn when balances violate expected sign conventions.

    Args:
        account: Account snapshot.
        logger: Logger used for warnings.
    """
    if account.account_type == AccountType.CREDIT and account.balance > 0:
        logger.warning(
            f"Credit balance is positive for account {account.id}: "
            f"{account.balance}"
        )
    elif account.account_type != AccountType.CREDIT and account.balance < 0:
        logger.warning(
            f"Balance is negative for {account.account_type.value} "
            f"account {account.id}: {account.balance}"
        )


def validate_accounts(accounts: Iterable[Account], logger: Logger) -> int:
    """Run account checks and return how many accounts are out of sync."""
    out_of_sync = 0
    for account in accounts:
        validate_balance_sign(account, logger)
        if not validate_account_balance(account, logger):
            out_of_sync += 1
    return out_of_sync


__all__ = [
    "validate_account_balance",
    "validate_balance_sign",
    "validate_accounts",
]
