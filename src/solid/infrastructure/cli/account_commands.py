"""CLI commands for the Single Responsibility example."""

from __future__ import annotations

from decimal import Decimal

import click

from solid.application.dto import AccountDTO, TransactionSpec
from solid.application.run_transactions import AccountDesign, RunTransactionsHandler
from solid.config import SolidConfig
from solid.domain.exceptions import DomainException


def _operations(deposits: tuple[str, ...], withdrawals: tuple[str, ...]) -> list[TransactionSpec]:
    """Deposits first, then withdrawals, each in the order given."""
    return [TransactionSpec("deposit", amount) for amount in deposits] + [
        TransactionSpec("withdraw", amount) for amount in withdrawals
    ]


def balances_match(results: list[AccountDTO]) -> bool:
    """Compare unrounded balances; the displayed ones stop at cents."""
    return len({Decimal(dto.exact_balance) for dto in results}) == 1


def _display_account(dto: AccountDTO) -> None:
    for line in dto.report:
        click.echo(line)


@click.command("run")
@click.option("--number", "account_number", required=True, help="Account number.")
@click.option("--balance", "initial_balance", required=True, help="Opening balance.")
@click.option("--deposit", "deposits", multiple=True, help="Amount to deposit (repeatable).")
@click.option("--withdraw", "withdrawals", multiple=True, help="Amount to withdraw (repeatable).")
@click.option(
    "--design",
    type=click.Choice([d.value for d in AccountDesign]),
    default=AccountDesign.SEPARATED.value,
    show_default=True,
    help="Which account design runs the transactions.",
)
@click.pass_obj
def account_run(
    config: SolidConfig,
    account_number: str,
    initial_balance: str,
    deposits: tuple[str, ...],
    withdrawals: tuple[str, ...],
    design: str,
) -> None:
    """Open an account, run transactions and report on it."""
    handler = RunTransactionsHandler(currency=config.currency)

    try:
        dto = handler.handle(
            account_number,
            initial_balance,
            _operations(deposits, withdrawals),
            AccountDesign(design),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_account(dto)


@click.command("compare")
@click.option("--number", "account_number", required=True, help="Account number.")
@click.option("--balance", "initial_balance", required=True, help="Opening balance.")
@click.option("--deposit", "deposits", multiple=True, help="Amount to deposit (repeatable).")
@click.option("--withdraw", "withdrawals", multiple=True, help="Amount to withdraw (repeatable).")
@click.pass_obj
def account_compare(
    config: SolidConfig,
    account_number: str,
    initial_balance: str,
    deposits: tuple[str, ...],
    withdrawals: tuple[str, ...],
) -> None:
    """Run the same transactions through both designs."""
    handler = RunTransactionsHandler(currency=config.currency)
    operations = _operations(deposits, withdrawals)

    try:
        results = [
            handler.handle(account_number, initial_balance, operations, design)
            for design in AccountDesign
        ]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for design, dto in zip(AccountDesign, results):
        click.echo(f"{design.value:<10} {dto.balance:>12}")

    if balances_match(results):
        click.echo("Balances match.")
    else:
        click.echo("Balances differ!")
