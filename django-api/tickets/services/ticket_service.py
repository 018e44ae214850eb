"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Raise domain errors for rejected purchases
"""

import structlog

from tickets.domain.errors import (
    AdultTicketRequiredError,
    InvalidAccountIdError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    TicketLimitExceededError,
)
from tickets.domain.models import PurchaseTotals, TicketType, TicketTypeRequest
from tickets.domain.policy import PurchasePolicy
from tickets.domain.value_objects import AccountId, Money
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = structlog.get_logger(__name__)


class TicketService:
    """Validates ticket purchases and hands valid ones to payment and booking."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        policy: PurchasePolicy | None = None,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service
        self._policy = policy or PurchasePolicy()

    @property
    def policy(self) -> PurchasePolicy:
        return self._policy

    def purchase_tickets(
        self, account_id: int | None, *ticket_type_requests: TicketTypeRequest
    ) -> None:
        """Validate a purchase, then charge the account and reserve its seats.

        Rules are checked in order and the first one broken is reported:
        account ID, unrecognised line items, ticket limit, adult present.
        Payment is taken before seats are reserved. Errors raised by either
        gateway propagate unchanged; a failed reservation does not refund
        the payment.

        Raises:
            InvalidAccountIdError: If account_id is missing or not positive.
            InvalidTicketRequestError: If a line item is not a TicketTypeRequest.
            TicketLimitExceededError: If more tickets are requested than allowed.
            AdultTicketRequiredError: If child or infant tickets have no adult.
        """
        log = logger.bind(account_id=account_id)
        try:
            account = self._validate_account(account_id)
            totals = self.calculate_totals(*ticket_type_requests)
            self._validate_totals(totals)
        except InvalidPurchaseError as exc:
            log.info("purchase_rejected", code=exc.code.value, reason=exc.message)
            raise

        self._payment_service.make_payment(account.value, totals.total_amount.amount)
        self._reservation_service.reserve_seat(account.value, totals.total_seats)
        log.info(
            "purchase_completed",
            total_tickets=totals.total_tickets,
            total_amount=totals.total_amount.amount,
            total_seats=totals.total_seats,
        )

    def calculate_totals(self, *ticket_type_requests: TicketTypeRequest) -> PurchaseTotals:
        """Sum quantities, price and seats across every line item.

        Requests of the same type are added together. No business rule
        other than line item shape is checked here.

        Raises:
            InvalidTicketRequestError: If a line item is not a TicketTypeRequest.
        """
        quantities = dict.fromkeys(TicketType, 0)
        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest) or request.ticket_type not in quantities:
                raise InvalidTicketRequestError()
            quantities[request.ticket_type] += request.quantity

        total_amount = Money.zero()
        total_seats = 0
        for ticket_type, quantity in quantities.items():
            total_amount += self._policy.unit_price(ticket_type).times(quantity)
            if self._policy.occupies_seat(ticket_type):
                total_seats += quantity

        return PurchaseTotals(
            quantities=quantities,
            total_amount=total_amount,
            total_seats=total_seats,
        )

    def _validate_account(self, account_id: int | None) -> AccountId:
        try:
            return AccountId(account_id)
        except ValueError:
            raise InvalidAccountIdError() from None

    def _validate_totals(self, totals: PurchaseTotals) -> None:
        if totals.total_tickets > self._policy.max_tickets:
            raise TicketLimitExceededError(self._policy.max_tickets, totals.total_tickets)

        adults = totals.quantity_of(TicketType.ADULT)
        children = totals.quantity_of(TicketType.CHILD)
        infants = totals.quantity_of(TicketType.INFANT)
        if adults == 0 and (children > 0 or infants > 0):
            raise AdultTicketRequiredError()
