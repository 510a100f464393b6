"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import ErrorCode, InvalidPurchaseError
from tickets.handlers.serializers import PurchaseRequestSerializer
from tickets.services import TicketService

ERROR_STATUS = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_LIMIT_EXCEEDED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.ADULT_TICKET_REQUIRED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.PAYMENT_FAILED: status.HTTP_402_PAYMENT_REQUIRED,
}


def build_ticket_service() -> TicketService:
    """Wire the service with the gateways named in settings."""
    payment_gateway = import_string(settings.TICKETS_PAYMENT_GATEWAY)()
    seat_reservation_gateway = import_string(settings.TICKETS_SEAT_RESERVATION_GATEWAY)()
    return TicketService(payment_gateway, seat_reservation_gateway)


class PurchaseView(APIView):
    """Handler for POST /api/accounts/{account_id}/purchases"""

    def post(self, request: Request, account_id: int) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = build_ticket_service()
        try:
            service.purchase_tickets(account_id, serializer.to_domain())
        except InvalidPurchaseError as exc:
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=ERROR_STATUS[exc.code],
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
