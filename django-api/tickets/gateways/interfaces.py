"""Gateway interfaces for the third-party providers a purchase depends on.

Gateways must be swappable; the service only ever sees these interfaces.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account."""
        ...


class SeatReservationService(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account."""
        ...
