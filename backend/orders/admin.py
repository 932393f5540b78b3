from django.contrib import admin
from core_backend.utils.pii import PIIProtection

from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Order model.

    Only ``status`` is editable; the rest is the checkout snapshot.
    """

    list_display = (
        "reference",
        "masked_email",
        "total_amount",
        "fulfillment_mode",
        "payment_mode",
        "status",
        "created_at",
    )
    list_filter = ("status", "fulfillment_mode", "payment_mode")
    search_fields = ("id", "owner_identity_id", "owner_email")
    ordering = ("-created_at",)
    readonly_fields = (
        "id",
        "owner_identity_id",
        "owner_email",
        "line_items",
        "total_amount",
        "fulfillment_mode",
        "payment_mode",
        "delivery_address",
        "contact_phone",
        "created_at",
        "updated_at",
    )

    @admin.display(description="Order #")
    def reference(self, obj):
        return obj.reference

    @admin.display(description="Email")
    def masked_email(self, obj):
        return PIIProtection.mask_email(obj.owner_email)

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        # Route status changes through the lifecycle so the customer is texted
        if change and "status" in form.changed_data:
            from orders.services import OrderLifecycleService

            OrderLifecycleService().update_status(obj.pk, obj.status)
            return
        super().save_model(request, obj, form, change)
