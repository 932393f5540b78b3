"""
Account serializers.

Field names follow the mobile client's ``UserData`` shape.
"""
from rest_framework import serializers
from core_backend.base import TimestampedSerializer

from .models import Account


class AccountSerializer(TimestampedSerializer):
    """
    Read-only representation of an account, its cart and loyalty balance.
    """

    identityId = serializers.CharField(source="identity_id", read_only=True)
    profilePicture = serializers.CharField(source="avatar_url", read_only=True)
    coins = serializers.IntegerField(source="loyalty_balance", read_only=True)
    cartItem = serializers.SerializerMethodField()

    class Meta:
        model = Account
        fields = [
            "id",
            "identityId",
            "email",
            "profilePicture",
            "coins",
            "cartItem",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
        prefetch_related_fields = ["cart_lines"]

    def get_cartItem(self, obj):
        return [{"barcode": line.product_code} for line in obj.cart_lines.all()]


def serialize_account(account):
    """Serialize a single account, fetching its cart lines in one query."""
    account = AccountSerializer.optimize_queryset(
        Account.objects.filter(pk=account.pk)
    ).get()
    return AccountSerializer(account).data
