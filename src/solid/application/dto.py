"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain types to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransactionSpec:
    """Input: one deposit or withdrawal."""

    kind: str  # "deposit" | "withdraw"
    amount: str


@dataclass(frozen=True)
class AccountDTO:
    """Output: an account after its transactions ran."""

    account_number: str
    balance: str  # formatted, e.g. "$15.00"
    exact_balance: str  # unrounded Decimal, e.g. "15.001"
    report: list[str]


@dataclass(frozen=True)
class ProductSpec:
    """Input: a product name and its price as typed."""

    name: str
    price: str


@dataclass(frozen=True)
class OrderItemDTO:

    name: str
    price: str


@dataclass(frozen=True)
class OrderTotalDTO:
    """Output: a priced order as displayed to the user."""

    items: list[OrderItemDTO]
    subtotal: str
    discount_percentage: str | None
    total: str


@dataclass(frozen=True)
class FlightDTO:

    kind: str
    message: str
