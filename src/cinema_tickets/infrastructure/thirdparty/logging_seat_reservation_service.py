"""Stand-in seat booking service that records reservations in the log only."""

from __future__ import annotations

import logging

from cinema_tickets.domain.gateway.seat_reservation_service import (
    SeatReservationService,
)

logger = logging.getLogger(__name__)


class LoggingSeatReservationService(SeatReservationService):

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info(
            "Reserving %d seats for account %d", total_seats_to_allocate, account_id
        )
