"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TicketSpec:
    """Input: what the customer asked for (ticket type name + quantity)."""

    ticket_type: str
    quantity: int


@dataclass(frozen=True)
class PurchaseReceiptDTO:
    """Output: what was charged and reserved for a successful purchase."""

    account_id: int
    adults: int
    children: int
    infants: int
    seats_reserved: int
    amount_charged: int  # pence
    amount_display: str  # formatted, e.g. "£95.00"


@dataclass(frozen=True)
class PriceLineDTO:
    """Output: a single row of the price list."""

    ticket_type: str
    price: int
    price_display: str
    needs_seat: bool
