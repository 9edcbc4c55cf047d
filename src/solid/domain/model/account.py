"""Single Responsibility: the bank account, twice.

``BankAccount`` keeps the account data, moves money and reports on
itself, so a change to any of those three concerns touches the same
class. ``BankAccountInfo`` and ``BankAccountTransaction`` split the
data/reporting side from the transaction side.

Neither design validates amounts. Withdrawing more than the balance,
or depositing a negative amount, simply moves the balance.
"""

from __future__ import annotations

from solid.domain.model.value_objects import Money
from solid.logging import get_logger

logger = get_logger(__name__)


def _report_lines(account_number: str, balance: Money) -> list[str]:
    return [
        f"Account Number: {account_number}",
        f"Balance: {balance}",
    ]


class BankAccount:
    """Account data, transactions and reporting in one class."""

    def __init__(self, account_number: str, initial_balance: Money) -> None:
        self.account_number = account_number
        self.balance = initial_balance

    def deposit(self, amount: Money) -> None:
        self.balance = self.balance + amount
        logger.debug("Deposited %s into %s", amount, self.account_number)

    def withdraw(self, amount: Money) -> None:
        self.balance = self.balance - amount
        logger.debug("Withdrew %s from %s", amount, self.account_number)

    def report_info(self) -> list[str]:
        return _report_lines(self.account_number, self.balance)


class BankAccountInfo:
    """Account number and balance, plus the report built from them."""

    def __init__(self, account_number: str, initial_balance: Money) -> None:
        self.account_number = account_number
        self.balance = initial_balance

    def report_info(self) -> list[str]:
        return _report_lines(self.account_number, self.balance)


class BankAccountTransaction:
    """Deposits and withdrawals against one ``BankAccountInfo``.

    Mutates the referenced account's balance in place; the transaction
    object itself holds no balance.
    """

    def __init__(self, account: BankAccountInfo) -> None:
        self.account = account

    def deposit(self, amount: Money) -> None:
        self.account.balance = self.account.balance + amount
        logger.debug("Deposited %s into %s", amount, self.account.account_number)

    def withdraw(self, amount: Money) -> None:
        self.account.balance = self.account.balance - amount
        logger.debug("Withdrew %s from %s", amount, self.account.account_number)
