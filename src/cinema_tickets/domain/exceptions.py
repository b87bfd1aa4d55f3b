"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every error carries an ``ErrorCode`` so callers can branch on a closed set
of failure kinds instead of parsing messages.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    NO_REQUESTS = "NO_REQUESTS"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    MISSING_ADULT = "MISSING_ADULT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"


class DomainException(Exception):
    """Base class for all domain errors."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidTicketRequestError(DomainException):
    """A single ticket request is malformed (bad type or quantity)."""

    code = ErrorCode.INVALID_TICKET_REQUEST


class InvalidPurchaseError(DomainException):
    """A purchase as a whole breaks one of the purchase rules."""


class InvalidAccountError(InvalidPurchaseError):
    code = ErrorCode.INVALID_ACCOUNT


class NoRequestsError(InvalidPurchaseError):
    code = ErrorCode.NO_REQUESTS


class TooManyTicketsError(InvalidPurchaseError):
    code = ErrorCode.TOO_MANY_TICKETS


class MissingAdultError(InvalidPurchaseError):
    code = ErrorCode.MISSING_ADULT


class TooManyInfantsError(InvalidPurchaseError):
    code = ErrorCode.TOO_MANY_INFANTS
