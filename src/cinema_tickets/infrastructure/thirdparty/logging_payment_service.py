"""Stand-in payment gateway that records charges in the log only."""

from __future__ import annotations

import logging

from cinema_tickets.domain.gateway.payment_service import TicketPaymentService
from cinema_tickets.domain.model.pricing import format_pence

logger = logging.getLogger(__name__)


class LoggingTicketPaymentService(TicketPaymentService):

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info(
            "Charging account %d %s", account_id, format_pence(total_amount_to_pay)
        )
