from rest_framework.request import Request
from rest_framework.response import Response
import logging

from orders.serializers import OrderSerializer, UpdateOrderStatusSerializer

logger = logging.getLogger(__name__)


class StatusActionsMixin:
    """
    Mixin for order status transition actions

    This mixin provides action methods for OrderViewSet.
    """

    def update_status(self, request: Request, pk=None) -> Response:
        """
        PUT /api/orders/<id>/status

        Body: ``{"status": "confirmed"}``. Any of the six statuses may be set
        from any other; the customer is texted when the status has a message.
        """
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = self.get_lifecycle_service().update_status(
            pk, serializer.validated_data.get("status")
        )
        return Response(OrderSerializer(order).data)
