"""Serializers for turning request bodies into domain objects."""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for one TicketTypeRequest line item."""

    ticket_type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    quantity = serializers.IntegerField(min_value=0)


class PurchaseSerializer(serializers.Serializer):
    """Serializer for a purchase request body.

    account_id is only checked for shape here; whether it is a valid
    account is the service's decision.
    """

    account_id = serializers.IntegerField(allow_null=True, default=None)
    tickets = TicketTypeRequestSerializer(many=True, allow_empty=True)

    def to_domain(self) -> tuple[int | None, list[TicketTypeRequest]]:
        requests = [
            TicketTypeRequest(
                ticket_type=TicketType(item["ticket_type"]),
                quantity=item["quantity"],
            )
            for item in self.validated_data["tickets"]
        ]
        return self.validated_data["account_id"], requests
