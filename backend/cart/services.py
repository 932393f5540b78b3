"""
Cart service layer.

The cart is a de-duplicated, ordered list of product codes owned by an
account. Checkout flushes it through ``CartService.clear_cart`` as part of
the order workflow.
"""
from dataclasses import dataclass
from django.db import IntegrityError, transaction
from django.utils import timezone
import logging

from accounts.models import Account
from core_backend.exceptions import ConflictError, NotFoundError, ValidationError
from .models import CartLine

logger = logging.getLogger(__name__)

CART_CLEARED_MESSAGE = "Cart cleared successfully"
CART_UPDATED_MESSAGE = "Cart updated successfully"
CART_UNCHANGED_MESSAGE = "All provided items are already in the cart or no new items to add."


@dataclass
class CartUpdateResult:
    """Outcome of ``CartService.update_cart``; ``updated`` is False for a no-op."""

    account: Account
    updated: bool
    message: str


class CartService:
    """
    Service class for cart operations.
    All cart business logic lives here, not in views.
    """

    @staticmethod
    def parse_product_code(item):
        """
        Extract the product code from a ``{"barcode": <number>}`` cart item.

        Integral floats are accepted (JSON clients may send ``123.0``);
        booleans, strings and fractional numbers are not.

        Raises:
            ValidationError: If the item has no usable barcode
        """
        barcode = item.get("barcode") if isinstance(item, dict) else None

        if isinstance(barcode, bool):
            barcode = None
        elif isinstance(barcode, float) and barcode.is_integer():
            barcode = int(barcode)

        if not isinstance(barcode, int):
            raise ValidationError(
                "Each cart item must have a valid 'barcode' (number).",
                field="barcode",
            )
        return barcode

    @staticmethod
    def clear_cart(account_id):
        """
        Remove every line from an account's cart in a single statement.

        Returns:
            int: Number of lines removed
        """
        deleted, _ = CartLine.objects.filter(account_id=account_id).delete()
        return deleted

    @staticmethod
    @transaction.atomic
    def update_cart(email, cart_items):
        """
        Add products to the cart of the account registered under ``email``.

        An empty list clears the cart. Otherwise only product codes not
        already in the cart are appended, in the order given; repeated codes
        within the request collapse to one line.

        Args:
            email: Contact email of the account
            cart_items: List of ``{"barcode": <number>}`` dicts

        Returns:
            CartUpdateResult: ``updated`` is False when nothing new was added

        Raises:
            ValidationError: Malformed payload or barcode
            NotFoundError: No account with this email
            ConflictError: A concurrent request inserted the same line
        """
        if not isinstance(cart_items, list):
            raise ValidationError("cartItems must be an array", field="cartItems")
        if not email or not isinstance(email, str):
            raise ValidationError("Email is required", field="email")

        try:
            account = Account.objects.get_by_email(email)
        except Account.DoesNotExist:
            raise NotFoundError("User not found")

        if not cart_items:
            removed = CartService.clear_cart(account.pk)
            CartService._touch(account)
            logger.info(f"[CartService.update_cart] Cleared {removed} line(s) from cart of account {account.pk}")
            return CartUpdateResult(account, True, CART_CLEARED_MESSAGE)

        # Validate the whole payload before writing anything
        requested_codes = [CartService.parse_product_code(item) for item in cart_items]

        existing_codes = set(account.cart_product_codes)
        new_codes = []
        for code in requested_codes:
            if code not in existing_codes:
                existing_codes.add(code)
                new_codes.append(code)

        if not new_codes:
            logger.debug(f"[CartService.update_cart] No new items for account {account.pk}")
            return CartUpdateResult(account, False, CART_UNCHANGED_MESSAGE)

        try:
            with transaction.atomic():
                CartLine.objects.bulk_create(
                    [CartLine(account=account, product_code=code) for code in new_codes]
                )
        except IntegrityError as e:
            logger.warning(f"[CartService.update_cart] Duplicate cart line for account {account.pk}: {e}")
            raise ConflictError("Duplicate item in cart", details={"barcodes": new_codes})

        CartService._touch(account)
        logger.info(f"[CartService.update_cart] Added {len(new_codes)} line(s) to cart of account {account.pk}")
        return CartUpdateResult(account, True, CART_UPDATED_MESSAGE)

    @staticmethod
    def _touch(account):
        now = timezone.now()
        Account.objects.filter(pk=account.pk).update(updated_at=now)
        account.updated_at = now
