"""Interface Segregation: one capability per contract.

A device implements only the contracts for what it can actually do.
Client code that prints depends on ``Printer`` alone and never sees a
scan method it would have to stub out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Printer(ABC):

    @abstractmethod
    def print_document(self) -> None:
        """Print the current document."""


class Scanner(ABC):

    @abstractmethod
    def scan_document(self) -> None:
        """Scan the current document."""
