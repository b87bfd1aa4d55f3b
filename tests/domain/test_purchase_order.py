"""Unit tests for the PurchaseOrder purchase rules."""

import pytest

from cinema_tickets.domain.exceptions import (
    ErrorCode,
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    MissingAdultError,
    NoRequestsError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from cinema_tickets.domain.model.purchase_order import PurchaseOrder
from cinema_tickets.domain.model.ticket_request import TicketType, TicketTypeRequest

ADULT, CHILD, INFANT = TicketType.ADULT, TicketType.CHILD, TicketType.INFANT


def _req(ticket_type: TicketType, qty: int) -> TicketTypeRequest:
    return TicketTypeRequest(ticket_type, qty)


class TestCreate:

    def test_adults_only(self):
        order = PurchaseOrder.create(1, [_req(ADULT, 3)])
        assert order.account_id == 1
        assert order.amount_to_pay == 7500
        assert order.seats_to_reserve == 3

    def test_mixed_order(self):
        order = PurchaseOrder.create(1, [_req(ADULT, 2), _req(CHILD, 3), _req(INFANT, 2)])
        assert order.amount_to_pay == 9500
        assert order.seats_to_reserve == 5
        assert order.counts.total == 7

    def test_keeps_requests_in_order(self):
        reqs = [_req(CHILD, 1), _req(ADULT, 1)]
        order = PurchaseOrder.create(7, reqs)
        assert order.requests == tuple(reqs)

    def test_exactly_max_tickets_allowed(self):
        order = PurchaseOrder.create(1, [_req(ADULT, 20), _req(CHILD, 3), _req(INFANT, 2)])
        assert order.counts.total == 25

    def test_infants_equal_to_adults_allowed(self):
        order = PurchaseOrder.create(1, [_req(ADULT, 3), _req(INFANT, 3)])
        assert order.seats_to_reserve == 3

    def test_accepts_generator_of_requests(self):
        order = PurchaseOrder.create(1, (_req(ADULT, 3) for _ in range(1)))
        assert order.amount_to_pay == 7500
        assert order.seats_to_reserve == 3
        assert order.requests == (_req(ADULT, 3),)

    def test_empty_generator_rejected(self):
        with pytest.raises(NoRequestsError):
            PurchaseOrder.create(1, (r for r in []))


class TestAccountValidation:

    @pytest.mark.parametrize("account_id", [0, -1, None, "1", 1.0, True])
    def test_invalid_account_rejected(self, account_id):
        with pytest.raises(InvalidAccountError, match="Invalid account id"):
            PurchaseOrder.create(account_id, [_req(ADULT, 1)])

    def test_account_checked_before_requests(self):
        with pytest.raises(InvalidAccountError):
            PurchaseOrder.create(0, [])


class TestRequestValidation:

    @pytest.mark.parametrize("requests", [None, [], ()])
    def test_no_requests_rejected(self, requests):
        with pytest.raises(NoRequestsError, match="No ticket requests"):
            PurchaseOrder.create(1, requests)

    def test_none_entry_rejected(self):
        with pytest.raises(InvalidTicketRequestError, match="Not a ticket request"):
            PurchaseOrder.create(1, [_req(ADULT, 1), None])

    def test_bad_entry_is_not_a_purchase_error(self):
        with pytest.raises(InvalidTicketRequestError) as exc_info:
            PurchaseOrder.create(1, [None])
        assert not isinstance(exc_info.value, InvalidPurchaseError)


class TestPurchaseRules:

    def test_too_many_tickets(self):
        with pytest.raises(TooManyTicketsError, match="more than 25"):
            PurchaseOrder.create(1, [_req(ADULT, 26)])

    def test_too_many_tickets_across_types(self):
        with pytest.raises(TooManyTicketsError):
            PurchaseOrder.create(1, [_req(ADULT, 13), _req(CHILD, 12), _req(INFANT, 1)])

    def test_child_without_adult(self):
        with pytest.raises(MissingAdultError, match="at least one Adult"):
            PurchaseOrder.create(1, [_req(CHILD, 1)])

    def test_infant_without_adult(self):
        with pytest.raises(MissingAdultError):
            PurchaseOrder.create(1, [_req(INFANT, 1)])

    def test_more_infants_than_adults(self):
        with pytest.raises(TooManyInfantsError, match="adult's lap"):
            PurchaseOrder.create(1, [_req(ADULT, 1), _req(INFANT, 2)])

    def test_max_count_reported_before_composition(self):
        with pytest.raises(TooManyTicketsError):
            PurchaseOrder.create(1, [_req(CHILD, 26)])

    def test_missing_adult_reported_before_infant_ratio(self):
        with pytest.raises(MissingAdultError):
            PurchaseOrder.create(1, [_req(INFANT, 2)])

    @pytest.mark.parametrize(
        "requests, code",
        [
            ([_req(ADULT, 26)], ErrorCode.TOO_MANY_TICKETS),
            ([_req(CHILD, 1)], ErrorCode.MISSING_ADULT),
            ([_req(ADULT, 1), _req(INFANT, 2)], ErrorCode.TOO_MANY_INFANTS),
            ([], ErrorCode.NO_REQUESTS),
        ],
    )
    def test_error_codes(self, requests, code):
        with pytest.raises(InvalidPurchaseError) as exc_info:
            PurchaseOrder.create(1, requests)
        assert exc_info.value.code is code
