"""Application service: Show Prices query."""

from __future__ import annotations

from cinema_tickets.application.dto import PriceLineDTO
from cinema_tickets.domain.model.pricing import PRICE_TABLE, format_pence
from cinema_tickets.domain.model.ticket_request import TicketType


class ShowPricesHandler:

    def handle(self) -> list[PriceLineDTO]:
        return [
            PriceLineDTO(
                ticket_type=ticket_type.value,
                price=PRICE_TABLE[ticket_type],
                price_display=format_pence(PRICE_TABLE[ticket_type]),
                needs_seat=ticket_type is not TicketType.INFANT,
            )
            for ticket_type in TicketType
        ]
