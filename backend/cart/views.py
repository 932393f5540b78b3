"""
Cart API views.
"""
from rest_framework import viewsets
from rest_framework.response import Response

from accounts.serializers import serialize_account
from .serializers import CartUpdateSerializer
from .services import CartService


class CartViewSet(viewsets.ViewSet):
    """
    ViewSet for cart operations.

    Endpoints:
    - PUT /api/users/cart - Add products to a cart, or clear it with an empty list
    """

    def update_cart(self, request):
        """
        PUT /api/users/cart

        Body: ``{"email": str, "cartItems": [{"barcode": number}, ...]}``
        """
        serializer = CartUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = CartService.update_cart(
            serializer.validated_data.get("email"),
            serializer.validated_data.get("cartItems"),
        )

        body = {"message": result.message, "updated": result.updated}
        if result.updated:
            body["user"] = serialize_account(result.account)
        return Response(body)
