"""CLI commands for the Interface Segregation example."""

from __future__ import annotations

import click

from solid.application.print_documents import PrintDocumentsHandler
from solid.application.scan_documents import ScanDocumentsHandler
from solid.infrastructure.devices import (
    PRINTERS,
    SCANNERS,
    printer_from_name,
    scanner_from_name,
)


@click.command("print")
@click.option(
    "--device",
    "devices",
    multiple=True,
    type=click.Choice(sorted(PRINTERS)),
    help="Device to print on (repeatable). Defaults to every printer.",
)
def device_print(devices: tuple[str, ...]) -> None:
    """Print a document on each printing device."""
    printers = [printer_from_name(name) for name in devices or sorted(PRINTERS)]
    count = PrintDocumentsHandler(printers).handle()
    click.echo(f"{count} document(s) printed.")


@click.command("scan")
@click.option(
    "--device",
    "devices",
    multiple=True,
    type=click.Choice(sorted(SCANNERS)),
    help="Device to scan on (repeatable). Defaults to every scanner.",
)
def device_scan(devices: tuple[str, ...]) -> None:
    """Scan a document on each scanning device."""
    scanners = [scanner_from_name(name) for name in devices or sorted(SCANNERS)]
    count = ScanDocumentsHandler(scanners).handle()
    click.echo(f"{count} document(s) scanned.")
