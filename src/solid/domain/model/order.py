"""Open/Closed: order totals that extend without modification.

``PricedOrder`` is the contract callers depend on. ``Order`` sums its
item prices; ``DiscountedOrder`` adds a percentage discount by
composing an ``Order`` over the same items rather than overriding it,
so the plain total stays untouched for non-discounted orders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from solid.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A line item: a name and a price, fixed at construction."""

    name: str
    price: Money


class PricedOrder(ABC):

    items: list[Product]

    @abstractmethod
    def calculate_total(self) -> Money:
        """Return what the customer pays for this order."""


class Order(PricedOrder):
    """An ordered collection of products.

    *currency* only matters for an empty order; otherwise the first
    item's currency is used and mixing currencies is rejected.
    """

    def __init__(self, items: list[Product], currency: str | None = None) -> None:
        self.items = list(items)
        self.currency = currency

    def calculate_total(self) -> Money:
        if self.currency is not None:
            result = Money.zero(self.currency)
        elif self.items:
            result = Money.zero(self.items[0].price.currency)
        else:
            result = Money.zero()
        for item in self.items:
            result = result + item.price
        return result


class DiscountedOrder(PricedOrder):
    """An order with a percentage taken off the plain total.

    The percentage is not range-checked: 0 reproduces the plain total
    exactly, 100 brings it to zero, anything above goes negative.
    """

    def __init__(
        self,
        items: list[Product],
        discount_percentage: Decimal,
        currency: str | None = None,
    ) -> None:
        self.items = list(items)
        self.discount_percentage = discount_percentage
        self.currency = currency

    def calculate_total(self) -> Money:
        base_total = Order(self.items, self.currency).calculate_total()
        discount = base_total * (self.discount_percentage / Decimal(100))
        return base_total - discount
