"""
Account app URL configuration.
"""
from django.urls import path
from .views import AccountSyncView, CurrentAccountView, AccountProfileView

urlpatterns = [
    path("sync", AccountSyncView.as_view(), name="account-sync"),
    path("me", CurrentAccountView.as_view(), name="account-me"),
    path("profile", AccountProfileView.as_view(), name="account-profile"),
]
