from tickets.domain.errors import (
    AdultTicketRequiredError,
    ErrorCode,
    InvalidInputError,
    InvalidPurchaseError,
    PaymentFailedError,
    RuleViolationError,
    TicketLimitExceededError,
)
from tickets.domain.models import TicketSummary, TicketType, TicketTypeRequest
from tickets.domain.value_objects import AccountId

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "TicketSummary",
    "AccountId",
    "ErrorCode",
    "InvalidPurchaseError",
    "InvalidInputError",
    "RuleViolationError",
    "TicketLimitExceededError",
    "AdultTicketRequiredError",
    "PaymentFailedError",
]
