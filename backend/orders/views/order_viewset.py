from rest_framework import status, viewsets
from rest_framework.request import Request
from rest_framework.response import Response
import logging

from notifications.gateways import get_sms_gateway
from notifications.services import SMSNotifier
from orders.serializers import OrderCreateSerializer, OrderSerializer
from orders.services import OrderLifecycleService
from .status_actions import StatusActionsMixin

logger = logging.getLogger(__name__)


class OrderViewSet(StatusActionsMixin, viewsets.ViewSet):
    """
    Checkout and order history endpoints.

    Endpoints:
    - POST /api/orders - Place an order from the caller's cart
    - GET /api/orders - All orders, newest first
    - GET /api/orders/mine - The caller's orders, newest first
    - PUT /api/orders/<id>/status - Change an order's status
    """

    def get_lifecycle_service(self):
        return OrderLifecycleService(notifier=SMSNotifier(get_sms_gateway()))

    def create(self, request: Request) -> Response:
        """
        POST /api/orders

        Body: ``{items, total, deliveryOption, paymentOption, address?, phoneNumber}``
        """
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order, coins_earned = self.get_lifecycle_service().create_order(
            identity_id=request.user.identity_id,
            items=data.get("items"),
            total=data.get("total"),
            fulfillment_mode=data.get("deliveryOption"),
            payment_mode=data.get("paymentOption"),
            phone=data.get("phoneNumber"),
            address=data.get("address"),
        )

        body = dict(OrderSerializer(order).data)
        body["coinsEarned"] = coins_earned
        return Response(body, status=status.HTTP_201_CREATED)

    def list(self, request: Request) -> Response:
        """GET /api/orders"""
        orders = OrderLifecycleService.list_orders()
        return Response(OrderSerializer(orders, many=True).data)

    def mine(self, request: Request) -> Response:
        """GET /api/orders/mine"""
        orders = OrderLifecycleService.list_for_owner(request.user.identity_id)
        return Response(OrderSerializer(orders, many=True).data)
