"""
Cart request serializers.
"""
from rest_framework import serializers


class CartUpdateSerializer(serializers.Serializer):
    """
    Shape check for ``PUT /api/users/cart``.

    Field-level rules (array type, required email, numeric barcodes) are
    enforced by ``CartService`` so every caller gets the same errors.
    """

    email = serializers.JSONField(required=False, allow_null=True)
    cartItems = serializers.JSONField(required=False, allow_null=True)

    def validate(self, data):
        if not isinstance(self.initial_data, dict):
            raise serializers.ValidationError("Request body must be an object")
        return data
