"""CLI commands for the Dependency Inversion example."""

from __future__ import annotations

import click

from solid.config import SolidConfig
from solid.domain.exceptions import DomainException
from solid.infrastructure.bootstrap import CHANNELS, notifier
from solid.infrastructure.messaging.direct_notifier import DirectNotifier


@click.command("send")
@click.option("--message", required=True, help="Notification text.")
@click.option("--recipient", required=True, help="Address or phone number.")
@click.option(
    "--channel",
    type=click.Choice(sorted(CHANNELS)),
    default=None,
    help="Delivery channel. Defaults to SOLID_CHANNEL, then email.",
)
@click.option(
    "--legacy",
    is_flag=True,
    default=False,
    help="Use the notifier that builds its own senders.",
)
@click.pass_obj
def notify_send(
    config: SolidConfig,
    message: str,
    recipient: str,
    channel: str | None,
    legacy: bool,
) -> None:
    """Send a notification through the chosen channel."""
    channel = channel or config.default_channel
    if channel not in CHANNELS:
        raise click.ClickException(f"Unknown channel '{channel}'.")

    if legacy:
        DirectNotifier().send_notification(message, recipient, via_email=channel == "email")
        return

    try:
        service_notifier = notifier(channel)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    service_notifier.send_notification(message, recipient)
