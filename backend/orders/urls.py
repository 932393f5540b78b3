from django.urls import path

from .views import OrderViewSet

# Mounted under "api/", so the final paths are /api/orders...
urlpatterns = [
    path("orders", OrderViewSet.as_view({"get": "list", "post": "create"}), name="order-list"),
    path("orders/mine", OrderViewSet.as_view({"get": "mine"}), name="order-mine"),
    path("orders/<str:pk>/status", OrderViewSet.as_view({"put": "update_status"}), name="order-status"),
]
