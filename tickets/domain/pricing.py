"""Purchase rules and ticket aggregation."""

from collections.abc import Iterable
from typing import Final

from tickets.domain.errors import AdultTicketRequiredError, TicketLimitExceededError
from tickets.domain.models import TicketSummary, TicketType, TicketTypeRequest


class PurchaseLimits:
    """Limits applied to a single purchase."""

    MAX_TICKETS_PER_PURCHASE: Final[int] = 20
    MIN_ADULT_TICKETS: Final[int] = 1


def summarise(ticket_type_requests: Iterable[TicketTypeRequest]) -> TicketSummary:
    """Sum ticket counts per category. Lines of the same category add up."""
    counts = {ticket_type: 0 for ticket_type in TicketType}
    for request in ticket_type_requests:
        counts[request.ticket_type] += request.no_of_tickets
    return TicketSummary(
        adults=counts[TicketType.ADULT],
        children=counts[TicketType.CHILD],
        infants=counts[TicketType.INFANT],
    )


def validate(summary: TicketSummary) -> None:
    """Check the purchase rules, stopping at the first broken one.

    Raises:
        TicketLimitExceededError: If more than 20 tickets are requested.
        AdultTicketRequiredError: If no adult ticket is requested. This also
            covers child or infant tickets bought without an adult.
    """
    if summary.total_tickets > PurchaseLimits.MAX_TICKETS_PER_PURCHASE:
        raise TicketLimitExceededError(summary.total_tickets)
    if summary.adults < PurchaseLimits.MIN_ADULT_TICKETS:
        raise AdultTicketRequiredError()
