"""SMS delivery behind the ``MessageService`` abstraction."""

from __future__ import annotations

import click

from solid.domain.service.messaging import MessageService
from solid.logging import get_logger

logger = get_logger(__name__)


class SmsService(MessageService):

    channel = "sms"

    def send_message(self, message: str, recipient: str) -> None:
        logger.debug("Texting %s", recipient)
        click.echo(f"Sending SMS to {recipient}: {message}")
