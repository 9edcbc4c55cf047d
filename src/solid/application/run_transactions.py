"""Application service: run deposits and withdrawals on an account.

Either account design can be chosen; both must land on the same
balance for the same operations.
"""

from __future__ import annotations

from enum import Enum

from solid.application.dto import AccountDTO, TransactionSpec
from solid.domain.exceptions import ValidationError
from solid.domain.model.account import (
    BankAccount,
    BankAccountInfo,
    BankAccountTransaction,
)
from solid.domain.model.value_objects import Money
from solid.logging import get_logger

logger = get_logger(__name__)


class AccountDesign(Enum):
    COMBINED = "combined"
    SEPARATED = "separated"


TRANSACTION_KINDS = ("deposit", "withdraw")


class RunTransactionsHandler:

    def __init__(self, currency: str = "USD") -> None:
        self._currency = currency

    def handle(
        self,
        account_number: str,
        initial_balance: str,
        operations: list[TransactionSpec],
        design: AccountDesign = AccountDesign.SEPARATED,
    ) -> AccountDTO:
        """Open an account, apply *operations* in order, report it.

        Amounts are parsed up front so a malformed one leaves no
        half-applied account behind.
        """
        balance = Money.of(initial_balance, self._currency)
        steps: list[tuple[str, Money]] = []
        for op in operations:
            if op.kind not in TRANSACTION_KINDS:
                raise ValidationError(
                    f"Unknown transaction kind '{op.kind}'. "
                    f"Expected one of: {', '.join(TRANSACTION_KINDS)}"
                )
            steps.append((op.kind, Money.of(op.amount, self._currency)))

        logger.info(
            "Running %d transaction(s) on %s (%s design)",
            len(steps),
            account_number,
            design.value,
            extra={"account_number": account_number, "design": design.value},
        )

        if design is AccountDesign.COMBINED:
            account = BankAccount(account_number, balance)
            for kind, amount in steps:
                if kind == "deposit":
                    account.deposit(amount)
                else:
                    account.withdraw(amount)
            return self._to_dto(account.account_number, account.balance, account.report_info())

        info = BankAccountInfo(account_number, balance)
        transaction = BankAccountTransaction(info)
        for kind, amount in steps:
            if kind == "deposit":
                transaction.deposit(amount)
            else:
                transaction.withdraw(amount)
        return self._to_dto(info.account_number, info.balance, info.report_info())

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(account_number: str, balance: Money, report: list[str]) -> AccountDTO:
        return AccountDTO(
            account_number=account_number,
            balance=str(balance),
            exact_balance=str(balance.amount),
            report=report,
        )
