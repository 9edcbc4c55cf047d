"""A notifier wired straight to its concrete senders.

``DirectNotifier`` builds its own ``EmailSender`` and ``SmsSender`` and
picks one with a boolean flag. Adding a channel means editing the
notifier, and the notifier cannot be exercised without both senders.
Compare with ``solid.domain.service.messaging.Notifier``.
"""

from __future__ import annotations

import click

from solid.logging import get_logger

logger = get_logger(__name__)


class EmailSender:

    def send_email(self, message: str, recipient: str) -> None:
        logger.debug("Emailing %s", recipient)
        click.echo(f"Sending email to {recipient}: {message}")


class SmsSender:

    def send_sms(self, message: str, recipient: str) -> None:
        logger.debug("Texting %s", recipient)
        click.echo(f"Sending SMS to {recipient}: {message}")


class DirectNotifier:

    def __init__(self) -> None:
        self.email_sender = EmailSender()
        self.sms_sender = SmsSender()

    def send_notification(self, message: str, recipient: str, via_email: bool) -> None:
        logger.info(
            "Sending notification to %s via %s",
            recipient,
            "email" if via_email else "sms",
        )
        if via_email:
            self.email_sender.send_email(message, recipient)
        else:
            self.sms_sender.send_sms(message, recipient)
