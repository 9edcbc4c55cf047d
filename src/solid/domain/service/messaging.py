"""Dependency Inversion: the notifier depends on an abstraction.

``MessageService`` is defined here, next to the high-level ``Notifier``
that uses it. Concrete email and SMS services live in the
infrastructure layer and are handed to the notifier at construction
(see ``solid.infrastructure.bootstrap``). Nothing in this module
imports a concrete service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solid.logging import get_logger

logger = get_logger(__name__)


class MessageService(ABC):

    @abstractmethod
    def send_message(self, message: str, recipient: str) -> None:
        """Deliver *message* to *recipient* over this channel."""


class Notifier:
    """Sends notifications through whatever service it was given."""

    def __init__(self, service: MessageService) -> None:
        self._service = service

    @property
    def service(self) -> MessageService:
        return self._service

    def send_notification(self, message: str, recipient: str) -> None:
        logger.info(
            "Sending notification to %s via %s",
            recipient,
            type(self._service).__name__,
            extra={"recipient": recipient, "service": type(self._service).__name__},
        )
        self._service.send_message(message, recipient)
