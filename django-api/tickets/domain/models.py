"""Domain models for a single ticket purchase.

These are pure domain objects; nothing here is persisted. A purchase lives
for the duration of one service call.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from tickets.domain.value_objects import Money, Quantity


class TicketType(Enum):
    """Priced ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """One line item of a purchase: a ticket type and how many of it."""

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        Quantity(self.quantity)


@dataclass(frozen=True)
class PurchaseTotals:
    """Aggregate of every line item in one purchase."""

    quantities: Mapping[TicketType, int] = field(default_factory=dict)
    total_amount: Money = field(default_factory=Money.zero)
    total_seats: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "quantities", MappingProxyType(dict(self.quantities)))

    def quantity_of(self, ticket_type: TicketType) -> int:
        return self.quantities.get(ticket_type, 0)

    @property
    def total_tickets(self) -> int:
        return sum(self.quantities.values())
