"""Ticket service - all purchase logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants before any side effect
- Perform orchestration and error mapping
- Raise domain errors, never HTTP errors
"""

from collections.abc import Sequence

from cinema.logger_config import logger
from tickets.domain import (
    AccountId,
    InvalidInputError,
    InvalidPurchaseError,
    PaymentFailedError,
    RuleViolationError,
    TicketTypeRequest,
)
from tickets.domain.pricing import summarise, validate
from tickets.gateways import SeatReservationGateway, TicketPaymentGateway


class TicketService:
    """Service for purchasing cinema tickets."""

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway

    def purchase_tickets(
        self,
        account_id: int | AccountId,
        ticket_type_requests: Sequence[TicketTypeRequest] | None,
    ) -> None:
        """Pay for the requested tickets and reserve their seats.

        Payment always happens before reservation, and seats are reserved
        only once the payment went through. Infants pay nothing and get no
        seat. Nothing is returned: price and seat count are handed to the
        gateways only.

        Raises:
            InvalidInputError: If the request is empty or the account id is
                not a positive integer.
            TicketLimitExceededError: If more than 20 tickets are requested.
            AdultTicketRequiredError: If no adult ticket is requested.
            PaymentFailedError: If the payment gateway rejects the charge.
        """
        account = self._parse_account_id(account_id)
        if not ticket_type_requests:
            raise InvalidInputError()

        summary = summarise(ticket_type_requests)
        logger.info(f"Total tickets in purchase request: {summary.total_tickets}")
        try:
            validate(summary)
        except RuleViolationError as exc:
            logger.warning(f"Purchase rejected for account {account}: {exc.message}")
            raise

        self._make_payment(account, summary.total_price)
        self._reserve_seats(account, summary.total_seats)

    def _parse_account_id(self, account_id: int | AccountId) -> AccountId:
        try:
            return AccountId.from_value(account_id)
        except ValueError as exc:
            raise InvalidInputError("invalid account id") from exc

    def _make_payment(self, account_id: AccountId, total_amount: int) -> None:
        try:
            self._payment_gateway.make_payment(account_id, total_amount)
        except InvalidPurchaseError as exc:
            logger.error(f"Payment error for account {account_id}: {exc}")
            raise PaymentFailedError(account_id.value, total_amount) from exc
        logger.info(f"Payment successful for account {account_id}, amount {total_amount}")

    def _reserve_seats(self, account_id: AccountId, total_seats: int) -> None:
        self._seat_reservation_gateway.reserve_seat(account_id, total_seats)
        logger.info(f"Seats reserved for account {account_id}: {total_seats}")
