"""Abstract payment gateway used to charge an account."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount in pence.

        Declined payments and transport failures are raised by the
        implementation and are not caught by callers in this package.
        """
