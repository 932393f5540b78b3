"""
URL configuration for cart app.
"""

from django.urls import path
from .views import CartViewSet

urlpatterns = [
    # PUT /api/users/cart - Update or clear the cart
    path('cart', CartViewSet.as_view({'put': 'update_cart'}), name='cart-update'),
]
