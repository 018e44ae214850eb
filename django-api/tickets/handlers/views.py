"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.conf import get_ticket_service
from tickets.domain import InvalidPurchaseError
from tickets.handlers.serializers import PurchaseSerializer
from tickets.services import TicketService

INVALID_REQUEST = "INVALID_REQUEST"


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def get_service(self) -> TicketService:
        return get_ticket_service()

    def post(self, request: Request) -> Response:
        try:
            data = request.data
        except ParseError:
            return Response(
                {"code": INVALID_REQUEST, "message": "Invalid request body"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = PurchaseSerializer(data=data)
        if not serializer.is_valid():
            return Response(
                {
                    "code": INVALID_REQUEST,
                    "message": "Invalid request body",
                    "errors": serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        account_id, ticket_requests = serializer.to_domain()
        try:
            self.get_service().purchase_tickets(account_id, *ticket_requests)
        except InvalidPurchaseError as exc:
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
