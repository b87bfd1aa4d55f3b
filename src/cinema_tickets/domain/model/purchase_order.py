"""PurchaseOrder: a validated request to buy tickets for one account.

The order is transient. It lives only for the duration of one purchase
and is never stored. All purchase rules are enforced in ``create()``, in a
fixed order so that the same input always reports the same error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from cinema_tickets.domain.exceptions import (
    InvalidAccountError,
    InvalidTicketRequestError,
    MissingAdultError,
    NoRequestsError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from cinema_tickets.domain.model.pricing import MAX_TICKETS_PER_PURCHASE, TicketCounts
from cinema_tickets.domain.model.ticket_request import TicketTypeRequest


def validate_account_id(account_id: object) -> int:
    if isinstance(account_id, bool) or not isinstance(account_id, int):
        raise InvalidAccountError(f"Invalid account id: {account_id!r}")
    if account_id <= 0:
        raise InvalidAccountError(f"Invalid account id: {account_id}")
    return account_id


@dataclass(frozen=True)
class PurchaseOrder:
    """Use ``PurchaseOrder.create()``; it enforces every purchase rule."""

    account_id: int
    requests: tuple[TicketTypeRequest, ...]
    counts: TicketCounts

    @staticmethod
    def create(
        account_id: int | None,
        requests: Iterable[TicketTypeRequest | None] | None,
    ) -> PurchaseOrder:
        account_id = validate_account_id(account_id)
        requests = tuple(requests) if requests is not None else ()

        if not requests:
            raise NoRequestsError("No ticket requests provided")

        for req in requests:
            if not isinstance(req, TicketTypeRequest):
                raise InvalidTicketRequestError(
                    f"Not a ticket request: {req!r}"
                )

        total = sum(req.no_of_tickets for req in requests)
        if total > MAX_TICKETS_PER_PURCHASE:
            raise TooManyTicketsError(
                f"Cannot purchase more than {MAX_TICKETS_PER_PURCHASE} "
                f"tickets at a time (requested {total})"
            )

        counts = TicketCounts.tally(requests)

        if (counts.children > 0 or counts.infants > 0) and counts.adults == 0:
            raise MissingAdultError(
                "Child and Infant tickets require at least one Adult ticket"
            )

        if counts.infants > counts.adults:
            raise TooManyInfantsError(
                f"Each infant must sit on an adult's lap "
                f"({counts.infants} infants, {counts.adults} adults)"
            )

        return PurchaseOrder(
            account_id=account_id,
            requests=requests,
            counts=counts,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def seats_to_reserve(self) -> int:
        return self.counts.seats

    @property
    def amount_to_pay(self) -> int:
        return self.counts.amount
