"""
Order serializers.

Outbound field names match the mobile client's order shape.
"""
from rest_framework import serializers
from core_backend.base import TimestampedSerializer

from .models import Order


class OrderSerializer(TimestampedSerializer):
    """
    Read representation of an order.
    """

    orderNumber = serializers.CharField(source="reference", read_only=True)
    userId = serializers.CharField(source="owner_identity_id", read_only=True)
    userEmail = serializers.EmailField(source="owner_email", read_only=True)
    items = serializers.JSONField(source="line_items", read_only=True)
    total = serializers.DecimalField(
        source="total_amount", max_digits=12, decimal_places=2,
        coerce_to_string=False, read_only=True,
    )
    deliveryOption = serializers.CharField(source="fulfillment_mode", read_only=True)
    paymentOption = serializers.CharField(source="payment_mode", read_only=True)
    address = serializers.CharField(source="delivery_address", read_only=True)
    phoneNumber = serializers.CharField(source="contact_phone", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "orderNumber",
            "userId",
            "userEmail",
            "items",
            "total",
            "deliveryOption",
            "paymentOption",
            "address",
            "phoneNumber",
            "status",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class OrderCreateSerializer(serializers.Serializer):
    """
    Shape check for ``POST /api/orders``.

    Values are passed through untouched; ``OrderLifecycleService`` owns the
    business validation so the error messages stay the same for every caller.
    """

    items = serializers.JSONField(required=False, allow_null=True)
    total = serializers.JSONField(required=False, allow_null=True)
    deliveryOption = serializers.JSONField(required=False, allow_null=True)
    paymentOption = serializers.JSONField(required=False, allow_null=True)
    address = serializers.JSONField(required=False, allow_null=True)
    phoneNumber = serializers.JSONField(required=False, allow_null=True)


class UpdateOrderStatusSerializer(serializers.Serializer):
    status = serializers.JSONField(required=False, allow_null=True)
