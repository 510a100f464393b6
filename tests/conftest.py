"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock, create_autospec

import pytest
from rest_framework.test import APIClient

from cinema.logger_config import logger
from tickets.gateways import SeatReservationGateway, TicketPaymentGateway
from tickets.services import TicketService
from tests.fakes import RecordingGateway


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateways() -> Mock:
    """Autospec gateways attached to one parent so call order can be asserted."""
    parent = Mock()
    parent.attach_mock(create_autospec(TicketPaymentGateway, instance=True), "payment")
    parent.attach_mock(
        create_autospec(SeatReservationGateway, instance=True), "reservation"
    )
    return parent


@pytest.fixture
def ticket_service(gateways: Mock) -> TicketService:
    return TicketService(gateways.payment, gateways.reservation)


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]))
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_recorded_calls():
    RecordingGateway.calls.clear()
    yield
    RecordingGateway.calls.clear()
