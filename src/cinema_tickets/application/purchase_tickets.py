"""Application service: Purchase Tickets use case.

Builds a validated PurchaseOrder, then charges the account and reserves
seats through the two external services. Payment always happens before
seat reservation. Errors raised by either service propagate unchanged;
nothing is rolled back if reservation fails after a successful payment.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from cinema_tickets.application.dto import PurchaseReceiptDTO, TicketSpec
from cinema_tickets.domain.exceptions import DomainException
from cinema_tickets.domain.gateway.payment_service import TicketPaymentService
from cinema_tickets.domain.gateway.seat_reservation_service import (
    SeatReservationService,
)
from cinema_tickets.domain.model.pricing import format_pence
from cinema_tickets.domain.model.purchase_order import PurchaseOrder
from cinema_tickets.domain.model.ticket_request import TicketType, TicketTypeRequest

logger = logging.getLogger(__name__)


class PurchaseTicketsHandler:

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_service: SeatReservationService,
    ) -> None:
        self._payment_service = payment_service
        self._seat_service = seat_service

    def handle(
        self,
        account_id: int | None,
        requests: Iterable[TicketTypeRequest | None] | None,
    ) -> PurchaseReceiptDTO:
        """Validate and pay for a ticket purchase.

        Steps:
        1. Let PurchaseOrder validate account, requests and purchase rules.
        2. Charge the account if there is anything to pay.
        3. Reserve seats if any are needed.
        4. Return a receipt DTO.
        """
        try:
            order = PurchaseOrder.create(account_id, requests)
        except DomainException as exc:
            logger.info(
                "Rejected purchase for account %r: %s (%s)",
                account_id, exc.code.value, exc,
            )
            raise

        if order.amount_to_pay > 0:
            self._payment_service.make_payment(order.account_id, order.amount_to_pay)
        if order.seats_to_reserve > 0:
            self._seat_service.reserve_seat(order.account_id, order.seats_to_reserve)

        logger.info(
            "Purchased %d tickets for account %d: %d seats, %s",
            order.counts.total, order.account_id,
            order.seats_to_reserve, format_pence(order.amount_to_pay),
        )
        return self._to_dto(order)

    def handle_specs(
        self, account_id: int | None, specs: Sequence[TicketSpec]
    ) -> PurchaseReceiptDTO:
        """Same as ``handle`` but from raw type names, e.g. from the CLI."""
        requests = [
            TicketTypeRequest(TicketType.parse(spec.ticket_type), spec.quantity)
            for spec in specs
        ]
        return self.handle(account_id, requests)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: PurchaseOrder) -> PurchaseReceiptDTO:
        return PurchaseReceiptDTO(
            account_id=order.account_id,
            adults=order.counts.adults,
            children=order.counts.children,
            infants=order.counts.infants,
            seats_reserved=order.seats_to_reserve,
            amount_charged=order.amount_to_pay,
            amount_display=format_pence(order.amount_to_pay),
        )
