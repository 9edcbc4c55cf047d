"""Application service: price an order, with or without a discount."""

from __future__ import annotations

from solid.application.dto import OrderItemDTO, OrderTotalDTO, ProductSpec
from solid.domain.model.order import DiscountedOrder, Order, PricedOrder, Product
from solid.domain.model.value_objects import Money, parse_decimal


class CalculateOrderTotalHandler:

    def __init__(self, currency: str = "USD") -> None:
        self._currency = currency

    def handle(
        self,
        item_specs: list[ProductSpec],
        discount_percentage: str | None = None,
    ) -> OrderTotalDTO:
        """Build the products, choose the order variant, compute totals.

        The subtotal always comes from a plain ``Order``; the total from
        whichever ``PricedOrder`` variant applies.
        """
        products = [
            Product(name=spec.name, price=Money.of(spec.price, self._currency))
            for spec in item_specs
        ]

        order: PricedOrder
        if discount_percentage is None:
            order = Order(products, self._currency)
        else:
            percentage = parse_decimal(
                discount_percentage.strip().rstrip("%"), "discount percentage"
            )
            order = DiscountedOrder(products, percentage, self._currency)

        return OrderTotalDTO(
            items=[OrderItemDTO(name=p.name, price=str(p.price)) for p in products],
            subtotal=str(Order(products, self._currency).calculate_total()),
            discount_percentage=discount_percentage,
            total=str(order.calculate_total()),
        )
