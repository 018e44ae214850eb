"""Default gateway implementations.

The real payment and seat booking providers sit outside this service. Until
one is wired in through settings, these adapters accept every call and
record it in the log.
"""

import structlog

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = structlog.get_logger(__name__)


class LoggingTicketPaymentService(TicketPaymentService):
    """Payment gateway that logs the charge instead of sending it."""

    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("payment_requested", account_id=account_id, amount=amount)


class LoggingSeatReservationService(SeatReservationService):
    """Seat booking gateway that logs the reservation instead of sending it."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("seats_reserved", account_id=account_id, seat_count=seat_count)
