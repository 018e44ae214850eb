from tickets.domain.errors import (
    AdultTicketRequiredError,
    DomainError,
    ErrorCode,
    InvalidAccountIdError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    TicketLimitExceededError,
)
from tickets.domain.models import PurchaseTotals, TicketType, TicketTypeRequest
from tickets.domain.policy import PurchasePolicy
from tickets.domain.value_objects import AccountId, Money, Quantity

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "PurchaseTotals",
    "PurchasePolicy",
    "AccountId",
    "Money",
    "Quantity",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "InvalidAccountIdError",
    "TicketLimitExceededError",
    "AdultTicketRequiredError",
    "InvalidTicketRequestError",
]
