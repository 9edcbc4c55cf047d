"""Email delivery behind the ``MessageService`` abstraction."""

from __future__ import annotations

import click

from solid.domain.service.messaging import MessageService
from solid.logging import get_logger

logger = get_logger(__name__)


class EmailService(MessageService):

    channel = "email"

    def send_message(self, message: str, recipient: str) -> None:
        logger.debug("Emailing %s", recipient)
        click.echo(f"Sending email to {recipient}: {message}")
