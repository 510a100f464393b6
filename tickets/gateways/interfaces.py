"""Gateway interfaces for the third-party services a purchase depends on.

Gateways must be swappable. Implementations are injected into the service.
"""

from abc import ABC, abstractmethod

from tickets.domain import AccountId


class TicketPaymentGateway(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: AccountId, total_amount: int) -> None:
        """Charge the account the given amount.

        Raises:
            InvalidPurchaseError: If the payment is rejected.
        """
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving cinema seats."""

    @abstractmethod
    def reserve_seat(self, account_id: AccountId, total_seats: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
