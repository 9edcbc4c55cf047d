"""Composition root: wires concrete services to the domain abstraction.

This is the only place that knows which ``MessageService`` backs a
channel name. ``Notifier`` itself depends only on the abstraction.
"""

from __future__ import annotations

from solid.domain.exceptions import ValidationError
from solid.domain.service.messaging import MessageService, Notifier
from solid.infrastructure.messaging.email_service import EmailService
from solid.infrastructure.messaging.sms_service import SmsService

CHANNELS: dict[str, type[MessageService]] = {
    "email": EmailService,
    "sms": SmsService,
}


def message_service(channel: str) -> MessageService:
    try:
        return CHANNELS[channel.strip().lower()]()
    except KeyError:
        raise ValidationError(
            f"Unknown channel '{channel}'. Expected one of: {', '.join(sorted(CHANNELS))}"
        ) from None


def notifier(channel: str) -> Notifier:
    return Notifier(message_service(channel))
