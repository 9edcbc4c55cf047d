"""CLI commands for the Open/Closed example."""

from __future__ import annotations

import click

from solid.application.calculate_order_total import CalculateOrderTotalHandler
from solid.application.dto import OrderTotalDTO, ProductSpec
from solid.config import SolidConfig
from solid.domain.exceptions import DomainException


def _parse_items(raw: str) -> list[ProductSpec]:
    """Parse 'Widget:15.00,Gadget:25' into ProductSpec list."""
    specs: list[ProductSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Price'."
            )
        name, price = pair.rsplit(":", 1)
        if not name.strip():
            raise click.BadParameter(f"Missing product name in '{pair}'.")
        specs.append(ProductSpec(name=name.strip(), price=price.strip()))
    return specs


def _display_total(dto: OrderTotalDTO) -> None:
    click.echo(f"  {'Product':<20} {'Price':>10}")
    click.echo(f"  {'-'*31}")
    for item in dto.items:
        click.echo(f"  {item.name:<20} {item.price:>10}")
    click.echo(f"  {'-'*31}")
    if dto.discount_percentage is not None:
        click.echo(f"  {'Subtotal':<20} {dto.subtotal:>10}")
        click.echo(f"  {'Discount':<20} {dto.discount_percentage.rstrip('%') + '%':>10}")
    click.echo(f"  {'Order Total':<20} {dto.total:>10}")


@click.command("total")
@click.option("--items", required=True, help="Items as 'Product:Price,Product:Price'.")
@click.option("--discount", default=None, help="Discount percentage, e.g. 10.")
@click.pass_obj
def order_total(config: SolidConfig, items: str, discount: str | None) -> None:
    """Price an order, optionally with a percentage discount."""
    specs = _parse_items(items)
    handler = CalculateOrderTotalHandler(currency=config.currency)

    try:
        dto = handler.handle(specs, discount_percentage=discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_total(dto)
