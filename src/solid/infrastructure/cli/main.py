import click

from solid.config import SolidConfig
from solid.infrastructure.cli.account_commands import account_compare, account_run
from solid.infrastructure.cli.bird_commands import bird_fly
from solid.infrastructure.cli.device_commands import device_print, device_scan
from solid.infrastructure.cli.notify_commands import notify_send
from solid.infrastructure.cli.order_commands import order_total
from solid.logging import LOG_FORMATS, setup_logging


@click.group()
@click.option("--log-level", default=None, help="Override SOLID_LOG_LEVEL.")
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS),
    default=None,
    help="Override SOLID_LOG_FORMAT.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_format: str | None) -> None:
    """SOLID: one runnable example per principle"""
    config = SolidConfig.from_env()
    if log_level:
        config.log_level = log_level
    if log_format:
        config.log_format = log_format
    setup_logging(config.log_level, config.log_format)
    ctx.obj = config


@cli.group()
def account() -> None:
    """Single Responsibility: bank accounts."""


@cli.group()
def order() -> None:
    """Open/Closed: order totals and discounts."""


@cli.group()
def bird() -> None:
    """Liskov Substitution: birds and penguins."""


@cli.group()
def device() -> None:
    """Interface Segregation: printers and scanners."""


@cli.group()
def notify() -> None:
    """Dependency Inversion: notifications."""


# Register subcommands
account.add_command(account_compare)
account.add_command(account_run)
order.add_command(order_total)
bird.add_command(bird_fly)
device.add_command(device_print)
device.add_command(device_scan)
notify.add_command(notify_send)
