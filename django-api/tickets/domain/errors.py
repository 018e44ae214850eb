"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a business rule.

    No payment or reservation has happened when this is raised.
    """


class InvalidAccountIdError(InvalidPurchaseError):
    """Raised when the account ID is missing or not positive."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Account ID is not valid.",
        )


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when a purchase asks for more tickets than allowed."""

    def __init__(self, max_tickets: int, requested: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Cannot purchase more than {max_tickets} tickets at a time.",
        )
        self.max_tickets = max_tickets
        self.requested = requested


class AdultTicketRequiredError(InvalidPurchaseError):
    """Raised when child or infant tickets are bought without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_TICKET_REQUIRED,
            message="Child and Infant tickets require at least one Adult ticket.",
        )


class InvalidTicketRequestError(InvalidPurchaseError):
    """Raised when a line item is not a recognised ticket request."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUEST,
            message="Ticket request is not valid.",
        )
