"""CLI commands for the Liskov Substitution example."""

from __future__ import annotations

import click

from solid.application.describe_flight import DescribeFlightHandler
from solid.domain.model.bird import bird_from_kind, bird_kinds


@click.command("fly")
@click.option(
    "--kind",
    "kinds",
    multiple=True,
    type=click.Choice(bird_kinds()),
    help="Creature to ask (repeatable). Defaults to all kinds.",
)
def bird_fly(kinds: tuple[str, ...]) -> None:
    """Ask each creature how it flies."""
    birds = [bird_from_kind(kind) for kind in kinds or bird_kinds()]

    for flight in DescribeFlightHandler().handle(birds):
        click.echo(f"{flight.kind}: {flight.message}")
