"""Purchase rules that are configuration rather than code."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from tickets.domain.models import TicketType
from tickets.domain.value_objects import Money

DEFAULT_MAX_TICKETS = 25

DEFAULT_PRICES: Mapping[TicketType, Money] = MappingProxyType(
    {
        TicketType.ADULT: Money(25),
        TicketType.CHILD: Money(15),
        TicketType.INFANT: Money(0),
    }
)

DEFAULT_SEATED_TYPES: frozenset[TicketType] = frozenset(
    {TicketType.ADULT, TicketType.CHILD}
)


@dataclass(frozen=True)
class PurchasePolicy:
    """Ticket limit, unit prices and seating rules for a purchase.

    Every TicketType must have a price, so adding a ticket type without
    pricing it fails when the policy is built rather than silently costing
    nothing.
    """

    max_tickets: int = DEFAULT_MAX_TICKETS
    prices: Mapping[TicketType, Money] = field(default_factory=lambda: DEFAULT_PRICES)
    seated_types: frozenset[TicketType] = DEFAULT_SEATED_TYPES

    def __post_init__(self) -> None:
        if isinstance(self.max_tickets, bool) or not isinstance(self.max_tickets, int):
            raise ValueError("max_tickets must be an integer")
        if self.max_tickets <= 0:
            raise ValueError("max_tickets must be positive")
        missing = [t.name for t in TicketType if t not in self.prices]
        if missing:
            raise ValueError(f"No price configured for: {', '.join(missing)}")
        invalid = [t.name for t in TicketType if not isinstance(self.prices[t], Money)]
        if invalid:
            raise ValueError(f"Prices must be Money values: {', '.join(invalid)}")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))
        object.__setattr__(self, "seated_types", frozenset(self.seated_types))

    @classmethod
    def from_config(
        cls,
        max_tickets: int = DEFAULT_MAX_TICKETS,
        prices: Mapping[str, int] | None = None,
    ) -> Self:
        """Build a policy from plain settings values.

        ``prices`` is keyed by ticket type name; names that are not given
        keep their default price.

        Raises:
            ValueError: If a name is not a ticket type or a price is invalid.
        """
        merged = dict(DEFAULT_PRICES)
        for name, amount in (prices or {}).items():
            if not isinstance(name, str):
                raise ValueError(f"Price keys must be ticket type names, got {name!r}")
            try:
                ticket_type = TicketType[name.upper()]
            except KeyError:
                raise ValueError(f"Unknown ticket type in prices: {name}") from None
            merged[ticket_type] = Money(amount)
        return cls(max_tickets=max_tickets, prices=merged)

    def unit_price(self, ticket_type: TicketType) -> Money:
        return self.prices[ticket_type]

    def occupies_seat(self, ticket_type: TicketType) -> bool:
        return ticket_type in self.seated_types
