"""Build purchase policy and service wiring from Django settings.

All app settings live under a single ``TICKETS`` dict, e.g.::

    TICKETS = {
        "MAX_TICKETS_PER_PURCHASE": 25,
        "PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
        "PAYMENT_SERVICE": "tickets.gateways.LoggingTicketPaymentService",
        "SEAT_RESERVATION_SERVICE": "tickets.gateways.LoggingSeatReservationService",
    }
"""

from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from tickets.domain.policy import DEFAULT_MAX_TICKETS, PurchasePolicy
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.services.ticket_service import TicketService

DEFAULTS: dict[str, Any] = {
    "MAX_TICKETS_PER_PURCHASE": DEFAULT_MAX_TICKETS,
    "PRICES": {},
    "PAYMENT_SERVICE": "tickets.gateways.LoggingTicketPaymentService",
    "SEAT_RESERVATION_SERVICE": "tickets.gateways.LoggingSeatReservationService",
}


def get_setting(name: str) -> Any:
    user_settings = getattr(settings, "TICKETS", {})
    return user_settings.get(name, DEFAULTS[name])


def get_purchase_policy() -> PurchasePolicy:
    try:
        return PurchasePolicy.from_config(
            max_tickets=get_setting("MAX_TICKETS_PER_PURCHASE"),
            prices=get_setting("PRICES"),
        )
    except ValueError as exc:
        raise ImproperlyConfigured(f"Invalid TICKETS settings: {exc}") from exc


def _load_gateway(name: str, interface: type) -> Any:
    path = get_setting(name)
    try:
        gateway_class = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"TICKETS[{name!r}] could not be imported: {path}") from exc
    if not (isinstance(gateway_class, type) and issubclass(gateway_class, interface)):
        raise ImproperlyConfigured(
            f"TICKETS[{name!r}] must be a {interface.__name__} subclass, got {path}"
        )
    return gateway_class()


def get_ticket_service() -> TicketService:
    """Return a TicketService wired to the configured gateways and policy."""
    return TicketService(
        payment_service=_load_gateway("PAYMENT_SERVICE", TicketPaymentService),
        reservation_service=_load_gateway("SEAT_RESERVATION_SERVICE", SeatReservationService),
        policy=get_purchase_policy(),
    )
