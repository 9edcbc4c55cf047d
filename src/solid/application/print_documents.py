"""Application service: print on every printer given.

Depends on the ``Printer`` contract only.
"""

from __future__ import annotations

from solid.domain.model.devices import Printer


class PrintDocumentsHandler:

    def __init__(self, printers: list[Printer]) -> None:
        self._printers = printers

    def handle(self) -> int:
        for printer in self._printers:
            printer.print_document()
        return len(self._printers)
