"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    PAYMENT_FAILED = "PAYMENT_FAILED"


@dataclass(frozen=True)
class InvalidPurchaseError(Exception):
    """Base purchase error with code and user-safe message.

    Every rejection of a purchase call is an instance of this class, so
    callers that do not care about the reason can catch it alone.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(InvalidPurchaseError):
    """Raised when the request is missing, empty or malformed."""

    def __init__(self, message: str = "empty or missing request") -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class RuleViolationError(InvalidPurchaseError):
    """Raised when a well-formed request breaks a purchase rule."""


class TicketLimitExceededError(RuleViolationError):
    """Raised when more tickets are requested than one purchase allows."""

    def __init__(self, total_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message="ticket limit exceeded",
        )
        self.total_tickets = total_tickets


class AdultTicketRequiredError(RuleViolationError):
    """Raised when no adult ticket accompanies the request."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_TICKET_REQUIRED,
            message="adult ticket required",
        )


class PaymentFailedError(InvalidPurchaseError):
    """Raised when the payment gateway rejects the charge."""

    def __init__(self, account_id: int, total_amount: int) -> None:
        super().__init__(code=ErrorCode.PAYMENT_FAILED, message="payment failed")
        self.account_id = account_id
        self.total_amount = total_amount
