from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP
import logging
import uuid

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from accounts.models import Account
from cart.services import CartService
from core_backend.exceptions import InternalError, NotFoundError, ValidationError
from notifications.services import SMSNotifier
from orders.models import Order, STORE_PICKUP_ADDRESS
from .notification_service import OrderNotificationService

logger = logging.getLogger(__name__)


class OrderLifecycleService:
    """
    Orchestrates checkout and order status changes.

    Checkout persists the order, then flushes the customer's cart and credits
    loyalty coins in one database transaction, then sends the "order placed"
    text. Status changes persist the new status and send the matching text.
    Text messages are best-effort and never affect the outcome.

    Args:
        notifier: ``SMSNotifier`` used for customer messages. Built from
            ``settings.SMS_BACKEND`` when omitted.
    """

    # Any status may follow any other so operators can correct mistakes,
    # including reopening delivered or cancelled orders.
    VALID_STATUSES = tuple(Order.OrderStatus.values)

    VALID_FULFILLMENT_MODES = tuple(Order.FulfillmentMode.values)
    VALID_PAYMENT_MODES = tuple(Order.PaymentMode.values)

    # One loyalty coin per this many currency units spent
    COIN_UNIT = Decimal("100")

    # Largest value Order.total_amount (max_digits=12, decimal_places=2) holds
    MAX_TOTAL = Decimal("9999999999.99")

    def __init__(self, notifier=None):
        self.notifier = notifier if notifier is not None else SMSNotifier()
        self.notifications = OrderNotificationService(self.notifier)

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    @classmethod
    def parse_total(cls, total):
        """
        Accept a positive JSON number as the order total.

        The amount is taken as submitted; it is not recomputed from the items.
        It must still fit the ``total_amount`` column once rounded to cents.

        Returns:
            Decimal: Total exactly as submitted

        Raises:
            ValidationError: Missing, non-numeric, non-positive or oversized total
        """
        error = ValidationError("Total is required and must be a positive number", field="total")

        if isinstance(total, bool) or not isinstance(total, (int, float, Decimal)):
            raise error
        try:
            amount = Decimal(str(total))
        except InvalidOperation:
            raise error
        if not amount.is_finite() or amount <= 0:
            raise error

        stored = cls.stored_total(amount)
        if stored <= 0:
            raise error
        return amount

    @classmethod
    def stored_total(cls, amount):
        """
        Round ``amount`` to cents for the ``total_amount`` column.

        Raises:
            ValidationError: Amount does not fit the column
        """
        too_large = ValidationError(
            "Total exceeds the maximum allowed amount",
            field="total",
            details={"max": str(cls.MAX_TOTAL)},
        )
        if amount > cls.MAX_TOTAL:
            raise too_large
        try:
            stored = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise too_large
        if stored > cls.MAX_TOTAL:
            raise too_large
        return stored

    @classmethod
    def validate_order_input(cls, items, total, fulfillment_mode, payment_mode, phone, address=None):
        """
        Check checkout input in a fixed order, failing on the first problem.

        Returns:
            tuple: (total as submitted, as Decimal; address to store)

        Raises:
            ValidationError: Naming the offending request field
        """
        if not isinstance(items, list) or not items:
            raise ValidationError(
                "Items are required and must be a non-empty array", field="items"
            )

        amount = cls.parse_total(total)

        if fulfillment_mode not in cls.VALID_FULFILLMENT_MODES:
            raise ValidationError(
                "Valid delivery option is required",
                field="deliveryOption",
                details={"allowed": list(cls.VALID_FULFILLMENT_MODES)},
            )

        if payment_mode not in cls.VALID_PAYMENT_MODES:
            raise ValidationError(
                "Valid payment option is required",
                field="paymentOption",
                details={"allowed": list(cls.VALID_PAYMENT_MODES)},
            )

        if not isinstance(phone, str) or not phone.strip():
            raise ValidationError("Phone number is required", field="phoneNumber")

        if fulfillment_mode == Order.FulfillmentMode.DELIVERY:
            if not isinstance(address, str) or not address.strip():
                raise ValidationError(
                    "Address is required for delivery orders", field="address"
                )
            return amount, address.strip()

        return amount, STORE_PICKUP_ADDRESS

    @classmethod
    def calculate_coins(cls, total):
        """Loyalty coins earned for an order: ``floor(total / 100)``."""
        coins = (Decimal(total) / cls.COIN_UNIT).to_integral_value(rounding=ROUND_FLOOR)
        return int(coins)

    # ------------------------------------------------------------------
    # Checkout
    # ------------------------------------------------------------------

    def create_order(self, identity_id, items, total, fulfillment_mode, payment_mode, phone, address=None):
        """
        Place an order for the account owned by ``identity_id``.

        Steps:
        1. Validate input and resolve the account
        2. Persist the order as ``pending``
        3. In one transaction, empty the cart and credit ``floor(total/100)`` coins
        4. Send the "order placed" text, best-effort

        The order is committed before step 3. If the account disappears in
        between, step 3 raises ``InternalError`` and the order is kept.

        Returns:
            tuple: (Order, coins_earned)

        Raises:
            ValidationError: Invalid checkout input
            NotFoundError: No account for ``identity_id``
            InternalError: Account vanished before it could be updated
        """
        amount, stored_address = self.validate_order_input(
            items, total, fulfillment_mode, payment_mode, phone, address
        )

        account = self._resolve_account(identity_id)

        order = Order.objects.create(
            owner_identity_id=identity_id,
            owner_email=account.email,
            line_items=items,
            total_amount=self.stored_total(amount),
            fulfillment_mode=fulfillment_mode,
            payment_mode=payment_mode,
            delivery_address=stored_address,
            contact_phone=phone.strip(),
            status=Order.OrderStatus.PENDING,
        )
        logger.info(f"[OrderLifecycleService.create_order] Order {order.id} saved for identity {identity_id}")

        # Coins come from the submitted total, not the cent-rounded one
        coins_earned = self.calculate_coins(amount)
        self._settle_account(account, coins_earned, order)

        self.notifications.notify_order_placed(order)

        logger.info(
            f"[OrderLifecycleService.create_order] Identity {identity_id} earned {coins_earned} coin(s) for order {order.id}"
        )
        return order, coins_earned

    @staticmethod
    def _resolve_account(identity_id):
        try:
            return Account.objects.get_by_identity(identity_id)
        except Account.DoesNotExist:
            logger.warning(f"[OrderLifecycleService.create_order] No account for identity {identity_id}")
            raise NotFoundError("User not found")

    @staticmethod
    def _settle_account(account, coins_earned, order):
        """
        Flush the cart and credit coins as a single unit of work.
        """
        with transaction.atomic():
            updated = Account.objects.filter(
                pk=account.pk, identity_id=account.identity_id
            ).update(
                loyalty_balance=F("loyalty_balance") + coins_earned,
                updated_at=timezone.now(),
            )
            if updated == 0:
                logger.error(
                    f"[OrderLifecycleService.create_order] Account for identity {account.identity_id} "
                    f"vanished after order {order.id} was saved"
                )
                raise InternalError(
                    "Failed to update user after order creation",
                    details={"orderId": str(order.id)},
                )
            CartService.clear_cart(account.pk)

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    def update_status(self, order_id, new_status):
        """
        Move an order to ``new_status`` and text the customer about it.

        Args:
            order_id: Order id (UUID or its string form)
            new_status: One of ``Order.OrderStatus`` values

        Returns:
            Order: The updated order

        Raises:
            ValidationError: Unknown status; the order is left untouched
            NotFoundError: No order with this id
        """
        if new_status not in self.VALID_STATUSES:
            raise ValidationError(
                "Invalid status",
                field="status",
                details={"allowed": list(self.VALID_STATUSES)},
            )

        with transaction.atomic():
            order = self._get_order_for_update(order_id)
            previous_status = order.status
            order.status = new_status
            order.save(update_fields=["status", "updated_at"])

        logger.info(
            f"[OrderLifecycleService.update_status] Order {order.id}: {previous_status} -> {new_status}"
        )

        self.notifications.notify_status_change(order)
        return order

    @staticmethod
    def _get_order_for_update(order_id):
        try:
            order_uuid = order_id if isinstance(order_id, uuid.UUID) else uuid.UUID(str(order_id))
        except ValueError:
            raise NotFoundError("Order not found")

        order = Order.objects.select_for_update().filter(pk=order_uuid).first()
        if order is None:
            raise NotFoundError("Order not found")
        return order

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    @staticmethod
    def list_orders():
        """All orders, newest first."""
        return Order.objects.order_by("-created_at")

    @staticmethod
    def list_for_owner(identity_id):
        """Orders placed by ``identity_id``, newest first."""
        return Order.objects.filter(owner_identity_id=identity_id).order_by("-created_at")
