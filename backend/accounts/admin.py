"""
Account admin interface with PII protection.
"""
from django.contrib import admin
from core_backend.utils.pii import PIIProtection

from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("masked_email", "identity_id", "loyalty_balance", "created_at")
    search_fields = ("identity_id", "email")
    readonly_fields = ("id", "identity_id", "loyalty_balance", "created_at", "updated_at")
    ordering = ("-created_at",)

    @admin.display(description="Email")
    def masked_email(self, obj):
        return PIIProtection.mask_email(obj.email)
