"""Integration tests for the purchase endpoint.

Run with: pytest tests/test_purchase_api.py -v
"""

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from tests.fakes import RecordingGateway


@pytest.fixture(autouse=True)
def recording_gateways(settings):
    settings.TICKETS_PAYMENT_GATEWAY = "tests.fakes.RecordingTicketPaymentGateway"
    settings.TICKETS_SEAT_RESERVATION_GATEWAY = "tests.fakes.RecordingSeatReservationGateway"


def purchase_url(account_id: int) -> str:
    return reverse("purchase-create", kwargs={"account_id": account_id})


class TestPurchaseCreate:
    """Tests for POST /api/accounts/{account_id}/purchases"""

    def test_valid_purchase_returns_no_content(self, api_client: APIClient):
        """Given adults and a child, pays 50 and reserves 3 seats."""
        response = api_client.post(
            purchase_url(1),
            {"tickets": [{"type": "ADULT", "count": 2}, {"type": "CHILD", "count": 1}]},
            format="json",
        )

        assert response.status_code == 204
        assert RecordingGateway.calls == [
            ("make_payment", 1, 50),
            ("reserve_seat", 1, 3),
        ]

    def test_empty_ticket_list(self, api_client: APIClient):
        """Given an empty ticket list, returns 400 with the invalid input error."""
        response = api_client.post(purchase_url(1), {"tickets": []}, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "code": "INVALID_INPUT",
            "message": "empty or missing request",
        }
        assert RecordingGateway.calls == []

    def test_zero_account_id(self, api_client: APIClient):
        """Given account id 0, returns 400."""
        response = api_client.post(
            purchase_url(0), {"tickets": [{"type": "ADULT", "count": 1}]}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "invalid account id"

    def test_ticket_limit_exceeded(self, api_client: APIClient):
        """Given 21 tickets, returns 422 and calls no gateway."""
        response = api_client.post(
            purchase_url(1), {"tickets": [{"type": "ADULT", "count": 21}]}, format="json"
        )

        assert response.status_code == 422
        assert response.json() == {
            "code": "TICKET_LIMIT_EXCEEDED",
            "message": "ticket limit exceeded",
        }
        assert RecordingGateway.calls == []

    def test_child_without_adult(self, api_client: APIClient):
        """Given only a child ticket, returns 422 and calls no gateway."""
        response = api_client.post(
            purchase_url(1), {"tickets": [{"type": "CHILD", "count": 1}]}, format="json"
        )

        assert response.status_code == 422
        assert response.json()["code"] == "ADULT_TICKET_REQUIRED"
        assert RecordingGateway.calls == []

    def test_payment_declined(self, api_client: APIClient, settings):
        """Given a declined payment, returns 402 and reserves nothing."""
        settings.TICKETS_PAYMENT_GATEWAY = "tests.fakes.DecliningTicketPaymentGateway"

        response = api_client.post(
            purchase_url(1), {"tickets": [{"type": "ADULT", "count": 1}]}, format="json"
        )

        assert response.status_code == 402
        assert response.json() == {"code": "PAYMENT_FAILED", "message": "payment failed"}
        assert RecordingGateway.calls == [("make_payment", 1, 20)]

    @pytest.mark.parametrize("body", [{}, {"tickets": None}])
    def test_missing_or_null_ticket_list(self, api_client: APIClient, body):
        """Given no ticket list, returns the invalid input error body."""
        response = api_client.post(purchase_url(1), body, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "code": "INVALID_INPUT",
            "message": "empty or missing request",
        }
        assert RecordingGateway.calls == []

    @pytest.mark.parametrize(
        "body",
        [
            {"tickets": [{"type": "SENIOR", "count": 1}]},
            {"tickets": [{"type": "ADULT", "count": -1}]},
            {"tickets": [{"type": "ADULT"}]},
        ],
    )
    def test_malformed_body(self, api_client: APIClient, body):
        """Given a malformed body, returns 400 and calls no gateway."""
        response = api_client.post(purchase_url(1), body, format="json")

        assert response.status_code == 400
        assert RecordingGateway.calls == []
