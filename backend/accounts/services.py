"""
Account services.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator, validate_email
from django.db import IntegrityError, transaction

from core_backend.exceptions import ConflictError, NotFoundError, ValidationError
from core_backend.utils.pii import get_pii_safe_logger

from .models import Account

logger = get_pii_safe_logger(__name__)


class AccountService:
    """
    Service for account sync, lookup and profile maintenance.

    Accounts are keyed by the identity provider's user id. The loyalty
    balance and identity id are never writable from here; only order
    placement credits coins.
    """

    # Request field name -> model field name
    PROFILE_FIELDS = {
        "email": "email",
        "profilePicture": "avatar_url",
    }

    @staticmethod
    @transaction.atomic
    def sync_account(identity):
        """
        Create the account for a freshly signed-in identity, or return the
        existing one.

        Args:
            identity: Resolved ``Identity`` for the request

        Returns:
            tuple: (Account, created)

        Raises:
            ValidationError: If the identity provider supplied no email address
            ConflictError: If the email already belongs to another account
        """
        existing = Account.objects.filter(identity_id=identity.identity_id).first()
        if existing:
            logger.info("Account already exists", extra={"identity_id": identity.identity_id})
            return existing, False

        if not identity.email:
            raise ValidationError(
                "Invalid user data from identity provider",
                field="email",
            )

        try:
            with transaction.atomic():
                account = Account.objects.create(
                    identity_id=identity.identity_id,
                    email=identity.email,
                    avatar_url=identity.picture or "",
                )
        except IntegrityError:
            # Lost a race with a concurrent sync for the same identity
            existing = Account.objects.filter(identity_id=identity.identity_id).first()
            if existing:
                return existing, False
            raise ConflictError(
                "An account with this email already exists",
                field="email",
            )

        logger.info(
            "Account created",
            extra={"identity_id": identity.identity_id, "email": account.email},
        )
        return account, True

    @staticmethod
    def get_by_identity(identity_id):
        """
        Fetch the account owned by ``identity_id``.

        Raises:
            NotFoundError: If no account exists yet for this identity
        """
        try:
            return Account.objects.get_by_identity(identity_id)
        except Account.DoesNotExist:
            logger.info("Account not found", extra={"identity_id": identity_id})
            raise NotFoundError("User not found")

    @staticmethod
    @transaction.atomic
    def update_profile(identity_id, data):
        """
        Update the caller's editable profile fields.

        Only ``email`` and ``profilePicture`` may change. Anything else,
        notably ``coins`` and the identity id, is rejected so the loyalty
        balance stays under the order workflow's control.

        Args:
            identity_id: Identity provider user id of the caller
            data: Request body

        Returns:
            Account: The updated account

        Raises:
            ValidationError: Unknown field or malformed value
            NotFoundError: No account for this identity
            ConflictError: Email already used by another account
        """
        if not isinstance(data, dict) or not data:
            raise ValidationError("Request body must be a non-empty object")

        unknown = sorted(set(data) - set(AccountService.PROFILE_FIELDS))
        if unknown:
            raise ValidationError(
                f"Field '{unknown[0]}' cannot be updated",
                field=unknown[0],
                details={"allowedFields": sorted(AccountService.PROFILE_FIELDS)},
            )

        updates = {}
        if "email" in data:
            email = data["email"]
            try:
                if not isinstance(email, str):
                    raise DjangoValidationError("not a string")
                validate_email(email)
            except DjangoValidationError:
                raise ValidationError("Enter a valid email address", field="email")
            updates["email"] = Account.objects.normalize_email(email)

        if "profilePicture" in data:
            picture = data["profilePicture"]
            if picture in (None, ""):
                picture = ""
            else:
                try:
                    if not isinstance(picture, str):
                        raise DjangoValidationError("not a string")
                    URLValidator()(picture)
                except DjangoValidationError:
                    raise ValidationError("Enter a valid URL", field="profilePicture")
            updates["avatar_url"] = picture

        account = Account.objects.select_for_update().filter(identity_id=identity_id).first()
        if account is None:
            raise NotFoundError("User not found")

        for field, value in updates.items():
            setattr(account, field, value)

        try:
            with transaction.atomic():
                account.save(update_fields=[*updates.keys(), "updated_at"])
        except IntegrityError:
            raise ConflictError(
                "An account with this email already exists",
                field="email",
            )

        logger.info(
            "Account profile updated",
            extra={"identity_id": identity_id, "fields": sorted(updates)},
        )
        return account
