"""Serializers for turning API requests into domain models."""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """One line of a purchase: a ticket category and how many of it."""

    type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    count = serializers.IntegerField(min_value=0)


class PurchaseRequestSerializer(serializers.Serializer):
    """Body of a purchase request.

    A missing, null or empty ticket list passes here; the service rejects it
    with a domain error so the response carries the same reason as any other
    caller gets.
    """

    tickets = TicketTypeRequestSerializer(
        many=True, allow_empty=True, allow_null=True, required=False
    )

    def to_domain(self) -> list[TicketTypeRequest] | None:
        lines = self.validated_data.get("tickets")
        if lines is None:
            return None
        return [
            TicketTypeRequest(
                ticket_type=TicketType(line["type"]),
                no_of_tickets=line["count"],
            )
            for line in lines
        ]
