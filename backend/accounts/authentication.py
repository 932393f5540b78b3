"""
Identity resolution for storefront requests.

The identity provider issues signed bearer tokens to the mobile client. This
module verifies them and exposes the caller as an ``Identity``; it does not
require a local ``Account`` to exist, since ``POST /api/users/sync`` is what
creates one.
"""
from dataclasses import dataclass

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication

from core_backend.exceptions import AuthError


@dataclass(frozen=True)
class Identity:
    """
    The verified caller of a request.

    Carries the profile data the identity provider embeds in its tokens so
    account sync can run without a second round-trip to the provider.
    """

    identity_id: str
    email: str = ""
    picture: str = ""

    # DRF compatibility properties
    is_authenticated = True
    is_anonymous = False

    @property
    def pk(self):
        return self.identity_id

    def __str__(self):
        return self.identity_id


class IdentityJWTAuthentication(JWTAuthentication):
    """
    Bearer-token authentication against the identity provider's signing key.

    Reads ``Authorization: Bearer <token>``, validates it with the
    ``SIMPLE_JWT`` settings and builds an ``Identity`` from the ``sub``,
    ``email`` and ``picture`` claims. Requests without a token fall through
    to the view's permission check, which answers 401.
    """

    email_claims = ("email", "email_address", "primary_email")
    picture_claims = ("picture", "image_url", "imageUrl")

    def get_user(self, validated_token):
        """
        Build the request identity from a validated token.
        """
        id_claim = settings.SIMPLE_JWT.get("USER_ID_CLAIM", "sub")
        identity_id = validated_token.get(id_claim)
        if not identity_id:
            raise AuthError(
                "Unauthorized - you must be logged in",
                details={"reason": f"Token does not contain {id_claim}"},
            )

        return Identity(
            identity_id=str(identity_id),
            email=self._first_claim(validated_token, self.email_claims),
            picture=self._first_claim(validated_token, self.picture_claims),
        )

    @staticmethod
    def _first_claim(validated_token, names):
        for name in names:
            value = validated_token.get(name)
            if value:
                return str(value)
        return ""
