from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid

STORE_PICKUP_ADDRESS = "Store Pickup"


class Order(models.Model):
    """
    A checkout snapshot plus its fulfillment status.

    Everything except ``status`` is fixed when the order is placed. The owner
    is referenced by identity id rather than a foreign key so the order stands
    on its own even if the account changes.
    """

    class OrderStatus(models.TextChoices):
        PENDING = "pending", "Pending"
        CONFIRMED = "confirmed", "Confirmed"
        PREPARING = "preparing", "Preparing"
        READY = "ready", "Ready"
        DELIVERED = "delivered", "Delivered"
        CANCELLED = "cancelled", "Cancelled"

    class FulfillmentMode(models.TextChoices):
        DELIVERY = "delivery", "Delivery"
        TAKEAWAY = "takeaway", "Store Pickup"

    class PaymentMode(models.TextChoices):
        ONLINE = "online", "Online"
        CASH_ON_DELIVERY = "cod", "Cash on Delivery"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner_identity_id = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Identity provider user id of the customer who placed the order",
    )
    owner_email = models.EmailField(
        help_text="Customer email at the time the order was placed",
    )

    line_items = models.JSONField(
        default=list,
        help_text="Items exactly as submitted at checkout",
    )
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )

    fulfillment_mode = models.CharField(
        max_length=20,
        choices=FulfillmentMode.choices,
    )
    payment_mode = models.CharField(
        max_length=20,
        choices=PaymentMode.choices,
    )
    delivery_address = models.TextField(
        help_text=f"Delivery address, or '{STORE_PICKUP_ADDRESS}' for takeaway orders",
    )
    contact_phone = models.CharField(max_length=32)

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders_order"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["owner_identity_id", "-created_at"], name="orders_owner_created_idx"),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]

    def __str__(self):
        return f"Order #{self.reference} ({self.get_status_display()})"

    @property
    def reference(self):
        """Short human-readable order number: last 6 id characters, upper-cased."""
        return str(self.id)[-6:].upper()
