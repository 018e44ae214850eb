"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest
from rest_framework.test import APIClient

from tickets.domain import PurchasePolicy
from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_service() -> Mock:
    return Mock(spec=TicketPaymentService)


@pytest.fixture
def reservation_service() -> Mock:
    return Mock(spec=SeatReservationService)


@pytest.fixture
def ticket_service(payment_service: Mock, reservation_service: Mock) -> TicketService:
    return TicketService(
        payment_service=payment_service,
        reservation_service=reservation_service,
        policy=PurchasePolicy(),
    )
