"""In-memory fakes for testing.

These implement the same abstract contracts as the concrete services
and devices but only record what they were asked to do. No console
output, no side effects.
"""

from __future__ import annotations

from solid.domain.model.devices import Printer, Scanner
from solid.domain.service.messaging import MessageService


class RecordingMessageService(MessageService):

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send_message(self, message: str, recipient: str) -> None:
        self.sent.append((message, recipient))


class RecordingPrinter(Printer):

    def __init__(self) -> None:
        self.printed = 0

    def print_document(self) -> None:
        self.printed += 1


class RecordingScanner(Scanner):

    def __init__(self) -> None:
        self.scanned = 0

    def scan_document(self) -> None:
        self.scanned += 1
