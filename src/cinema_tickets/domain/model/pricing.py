"""Prices and purchase limits.

Prices are integers in pence so no fractional rounding ever happens.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from cinema_tickets.domain.model.ticket_request import TicketType, TicketTypeRequest

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_TICKETS_PER_PURCHASE = 25

PRICE_TABLE: Mapping[TicketType, int] = MappingProxyType({
    TicketType.ADULT: 2500,
    TicketType.CHILD: 1500,
    TicketType.INFANT: 0,  # infants sit on an adult's lap
})

CURRENCY_SYMBOL = "£"


def format_pence(amount: int) -> str:
    """Render an amount in pence, e.g. 9500 -> '£95.00'."""
    return f"{CURRENCY_SYMBOL}{amount // 100}.{amount % 100:02d}"


@dataclass(frozen=True)
class TicketCounts:
    """Number of tickets requested per type, summed across requests."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @staticmethod
    def tally(requests: Iterable[TicketTypeRequest]) -> TicketCounts:
        adults = children = infants = 0
        for req in requests:
            if req.ticket_type is TicketType.ADULT:
                adults += req.no_of_tickets
            elif req.ticket_type is TicketType.CHILD:
                children += req.no_of_tickets
            elif req.ticket_type is TicketType.INFANT:
                infants += req.no_of_tickets
        return TicketCounts(adults=adults, children=children, infants=infants)

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def seats(self) -> int:
        """Infants do not take a seat."""
        return self.adults + self.children

    @property
    def amount(self) -> int:
        return (
            self.adults * PRICE_TABLE[TicketType.ADULT]
            + self.children * PRICE_TABLE[TicketType.CHILD]
            + self.infants * PRICE_TABLE[TicketType.INFANT]
        )
