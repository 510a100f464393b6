"""Stand-in gateways that only log what the real services would be asked to do.

The real payment and seat reservation services are third-party systems that
always succeed once called. These implementations are the default wiring
until the real clients are configured in settings.
"""

from cinema.logger_config import logger
from tickets.domain import AccountId
from tickets.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway


class LoggingTicketPaymentGateway(TicketPaymentGateway):
    def make_payment(self, account_id: AccountId, total_amount: int) -> None:
        logger.info(f"Payment requested for account {account_id}, amount {total_amount}")


class LoggingSeatReservationGateway(SeatReservationGateway):
    def reserve_seat(self, account_id: AccountId, total_seats: int) -> None:
        logger.info(f"Reservation requested for account {account_id}, {total_seats} seats")
