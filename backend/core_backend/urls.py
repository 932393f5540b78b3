"""
URL configuration for the storefront backend.

All API routes live under ``/api/`` and are declared without trailing
slashes, which is what the mobile client calls.
"""

from django.contrib import admin
from django.urls import path, include

from .views import health_check

urlpatterns = [
    path("api/health", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/users/", include("accounts.urls")),
    path("api/users/", include("cart.urls")),
    path("api/", include("orders.urls")),
    path("api/", include("notifications.urls")),
]

handler404 = "core_backend.views.not_found"
handler500 = "core_backend.views.server_error"
