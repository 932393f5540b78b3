"""
Storefront account model.

An account is created the first time a user signs in through the identity
provider and is never hard-deleted. Cart lines live in the ``cart`` app and
hang off the account through ``account.cart_lines``.
"""
from django.core.validators import EmailValidator, MinValueValidator
from django.db import models
from core_backend.utils.pii import PIIProtection
import uuid


class AccountManager(models.Manager):
    """Custom manager for Account model"""

    def normalize_email(self, email):
        """Normalize email address"""
        if email:
            email = email.strip().lower()
        return email

    def get_by_email(self, email):
        """Get account by email address"""
        return self.get(email=self.normalize_email(email))

    def get_by_identity(self, identity_id):
        """Get account by the identity provider's user id"""
        return self.get(identity_id=identity_id)


class Account(models.Model):
    """
    A registered storefront user.

    ``identity_id`` is the stable user id issued by the identity provider and
    never changes once the account exists. ``loyalty_balance`` only grows, and
    only when an order is placed (see ``OrderLifecycleService``).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    identity_id = models.CharField(
        max_length=255,
        unique=True,
        editable=False,
        help_text="User id issued by the identity provider",
    )
    email = models.EmailField(
        unique=True,
        validators=[EmailValidator()],
        help_text="Account's contact email address",
    )
    avatar_url = models.URLField(
        max_length=1024,
        blank=True,
        default="",
        help_text="Profile picture URL from the identity provider",
    )
    loyalty_balance = models.PositiveIntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Loyalty coins earned from placed orders",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AccountManager()

    class Meta:
        db_table = "accounts_account"
        verbose_name = "Account"
        verbose_name_plural = "Accounts"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["email"], name="accounts_ac_email_0b5d8e_idx"),
            models.Index(fields=["identity_id"], name="accounts_ac_identit_6c1f2a_idx"),
        ]

    def __str__(self):
        return f"Account ({PIIProtection.mask_email(self.email)})"

    def save(self, *args, **kwargs):
        self.email = Account.objects.normalize_email(self.email)
        super().save(*args, **kwargs)

    @property
    def cart_product_codes(self):
        """Product codes in the cart, in the order they were added."""
        return list(self.cart_lines.order_by("added_at", "id").values_list("product_code", flat=True))
