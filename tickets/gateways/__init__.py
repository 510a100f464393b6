from tickets.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

__all__ = ["TicketPaymentGateway", "SeatReservationGateway"]
