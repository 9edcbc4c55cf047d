"""Concrete office devices.

Each device implements exactly the capability contracts it supports.
The "printing" and "scanning" are console lines; there is no hardware.
"""

from __future__ import annotations

import click

from solid.domain.exceptions import ValidationError
from solid.domain.model.devices import Printer, Scanner
from solid.logging import get_logger

logger = get_logger(__name__)


class BasicPrinter(Printer):

    name = "Basic printer"

    def print_document(self) -> None:
        logger.debug("%s: print requested", self.name)
        click.echo(f"{self.name}: Printing document...")


class BasicScanner(Scanner):

    name = "Basic scanner"

    def scan_document(self) -> None:
        logger.debug("%s: scan requested", self.name)
        click.echo(f"{self.name}: Scanning document...")


class MultiFunctionPrinter(Printer, Scanner):
    """Prints and scans; satisfies both contracts independently."""

    name = "Multifunction printer"

    def print_document(self) -> None:
        logger.debug("%s: print requested", self.name)
        click.echo(f"{self.name}: Printing document...")

    def scan_document(self) -> None:
        logger.debug("%s: scan requested", self.name)
        click.echo(f"{self.name}: Scanning document...")


PRINTERS: dict[str, type[Printer]] = {
    "printer": BasicPrinter,
    "multifunction": MultiFunctionPrinter,
}

SCANNERS: dict[str, type[Scanner]] = {
    "scanner": BasicScanner,
    "multifunction": MultiFunctionPrinter,
}


def printer_from_name(name: str) -> Printer:
    try:
        return PRINTERS[name.strip().lower()]()
    except KeyError:
        raise ValidationError(f"'{name}' cannot print") from None


def scanner_from_name(name: str) -> Scanner:
    try:
        return SCANNERS[name.strip().lower()]()
    except KeyError:
        raise ValidationError(f"'{name}' cannot scan") from None
