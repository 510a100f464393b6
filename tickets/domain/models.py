"""Domain models for a ticket purchase.

These are pure domain objects, built once per purchase call and never mutated.
"""

from dataclasses import dataclass
from enum import Enum


class TicketType(Enum):
    """Ticket categories with their fixed unit price."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"

    @property
    def price(self) -> int:
        return _PRICES[self]

    @property
    def needs_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT


_PRICES = {
    TicketType.INFANT: 0,
    TicketType.CHILD: 10,
    TicketType.ADULT: 20,
}


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of one category."""

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        if isinstance(self.no_of_tickets, bool) or not isinstance(self.no_of_tickets, int):
            raise ValueError("Number of tickets must be an integer")
        if self.no_of_tickets < 0:
            raise ValueError("Number of tickets cannot be negative")


@dataclass(frozen=True)
class TicketSummary:
    """Ticket counts of a whole purchase, aggregated per category."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    def counts(self) -> dict[TicketType, int]:
        return {
            TicketType.ADULT: self.adults,
            TicketType.CHILD: self.children,
            TicketType.INFANT: self.infants,
        }

    @property
    def total_tickets(self) -> int:
        return sum(self.counts().values())

    @property
    def total_price(self) -> int:
        return sum(t.price * n for t, n in self.counts().items())

    @property
    def total_seats(self) -> int:
        return sum(n for t, n in self.counts().items() if t.needs_seat)
