"""Ticket request value object.

A request is immutable and validated on construction, so an invalid
request can never reach the purchase rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cinema_tickets.domain.exceptions import InvalidTicketRequestError


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @staticmethod
    def parse(raw: str) -> TicketType:
        """Case-insensitive lookup by name, e.g. ``"adult"`` -> ADULT."""
        try:
            return TicketType[raw.strip().upper()]
        except (KeyError, AttributeError) as exc:
            raise InvalidTicketRequestError(
                f"Unknown ticket type: {raw!r}"
            ) from exc


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of one type."""

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise InvalidTicketRequestError("Ticket type is required")
        # bool is an int subclass; True is not a quantity
        if isinstance(self.no_of_tickets, bool) or not isinstance(self.no_of_tickets, int):
            raise InvalidTicketRequestError(
                f"Ticket quantity must be an integer, got {type(self.no_of_tickets).__name__}"
            )
        if self.no_of_tickets < 1:
            raise InvalidTicketRequestError("Ticket quantity must be at least 1")

    def __str__(self) -> str:
        return f"{self.ticket_type.value} x{self.no_of_tickets}"
