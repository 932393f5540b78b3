"""
Account API Tests

Test Categories:
1. Account Sync (first sign-in, repeat sign-in, bad identity data)
2. Current Account lookup
3. Profile Updates (allowed fields, protected fields, conflicts)
4. Identity Resolution
"""
import pytest

from accounts.authentication import Identity, IdentityJWTAuthentication
from accounts.models import Account
from accounts.services import AccountService
from core_backend.exceptions import AuthError, ConflictError, NotFoundError, ValidationError


# ============================================================================
# ACCOUNT SYNC TESTS
# ============================================================================

@pytest.mark.django_db
class TestAccountSync:

    def test_first_sync_creates_account(self, api_client, identity_token):
        """
        Scenario:
        - Identity has never synced before
        - Expected: 201, account created from the token's profile claims
        """
        token = identity_token(
            'user_new123', email='Meera@Example.com', picture='https://img.example.com/m.png'
        )
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

        response = api_client.post('/api/users/sync', format='json')

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created successfully"
        assert body["user"]["identityId"] == 'user_new123'
        assert body["user"]["email"] == 'meera@example.com'
        assert body["user"]["profilePicture"] == 'https://img.example.com/m.png'
        assert body["user"]["coins"] == 0
        assert body["user"]["cartItem"] == []
        assert Account.objects.filter(identity_id='user_new123').count() == 1

    def test_repeat_sync_returns_existing_account(self, authenticated_client, account):
        response = authenticated_client.post('/api/users/sync', format='json')

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User already exists"
        assert body["user"]["id"] == str(account.id)
        assert Account.objects.count() == 1

    def test_sync_without_email_claim_is_rejected(self, api_client, identity_token):
        token = identity_token('user_noemail')
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

        response = api_client.post('/api/users/sync', format='json')

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid user data from identity provider"
        assert not Account.objects.filter(identity_id='user_noemail').exists()

    def test_sync_with_email_owned_by_other_identity_conflicts(self, account):
        identity = Identity(identity_id='user_other', email=account.email)

        with pytest.raises(ConflictError):
            AccountService.sync_account(identity)

    def test_sync_requires_authentication(self, api_client):
        response = api_client.post('/api/users/sync', format='json')

        assert response.status_code == 401


# ============================================================================
# CURRENT ACCOUNT TESTS
# ============================================================================

@pytest.mark.django_db
class TestCurrentAccount:

    def test_returns_callers_account(self, authenticated_client, account_with_cart):
        response = authenticated_client.get('/api/users/me')

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["email"] == 'asha@example.com'
        assert user["cartItem"] == [{"barcode": 1001}, {"barcode": 1002}, {"barcode": 1003}]

    def test_unsynced_identity_gets_404(self, api_client, identity_token):
        token = identity_token('user_ghost', email='ghost@example.com')
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

        response = api_client.get('/api/users/me')

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


# ============================================================================
# PROFILE UPDATE TESTS
# ============================================================================

@pytest.mark.django_db
class TestProfileUpdate:

    def test_updates_picture_and_email(self, authenticated_client, account):
        response = authenticated_client.put(
            '/api/users/profile',
            {"profilePicture": "https://img.example.com/new.png", "email": "asha.k@example.com"},
            format='json',
        )

        assert response.status_code == 200
        account.refresh_from_db()
        assert account.avatar_url == "https://img.example.com/new.png"
        assert account.email == "asha.k@example.com"

    def test_loyalty_balance_cannot_be_edited(self, authenticated_client, account):
        """
        Scenario:
        - Client tries to set its own coin balance
        - Expected: 400 and the balance is untouched

        Value: Coins may only be earned through placed orders
        """
        response = authenticated_client.put('/api/users/profile', {"coins": 5000}, format='json')

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "coins"
        account.refresh_from_db()
        assert account.loyalty_balance == 0

    def test_identity_id_cannot_be_edited(self, account):
        with pytest.raises(ValidationError):
            AccountService.update_profile(account.identity_id, {"identityId": "user_hijack"})

    def test_invalid_email_rejected(self, authenticated_client):
        response = authenticated_client.put('/api/users/profile', {"email": "not-an-email"}, format='json')

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "email"

    def test_email_taken_by_other_account_conflicts(self, authenticated_client, other_account):
        response = authenticated_client.put(
            '/api/users/profile', {"email": other_account.email}, format='json'
        )

        assert response.status_code == 409

    def test_missing_account_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            AccountService.update_profile('user_ghost', {"email": "ghost@example.com"})


# ============================================================================
# IDENTITY RESOLUTION TESTS
# ============================================================================

class TestIdentityResolution:

    def test_identity_built_from_token_claims(self):
        auth = IdentityJWTAuthentication()
        claims = {"sub": "user_42", "email": "x@example.com", "image_url": "https://img.example.com/x.png"}

        identity = auth.get_user(claims)

        assert identity == Identity("user_42", "x@example.com", "https://img.example.com/x.png")
        assert identity.is_authenticated is True

    def test_token_without_subject_is_rejected(self):
        with pytest.raises(AuthError) as exc_info:
            IdentityJWTAuthentication().get_user({"email": "x@example.com"})

        assert exc_info.value.status_code == 401

    @pytest.mark.django_db
    def test_token_without_subject_returns_401(self, api_client):
        from datetime import timedelta
        from django.utils import timezone
        from rest_framework_simplejwt.state import token_backend

        now = timezone.now()
        token = token_backend.encode({
            "email": "x@example.com",
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=5)).timestamp()),
        })
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = api_client.get("/api/users/me")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized - you must be logged in"
