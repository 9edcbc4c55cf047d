"""Application service: scan on every scanner given.

Depends on the ``Scanner`` contract only.
"""

from __future__ import annotations

from solid.domain.model.devices import Scanner


class ScanDocumentsHandler:

    def __init__(self, scanners: list[Scanner]) -> None:
        self._scanners = scanners

    def handle(self) -> int:
        for scanner in self._scanners:
            scanner.scan_document()
        return len(self._scanners)
