"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from datetime import timedelta
from django.utils import timezone


# ============================================================================
# AUTO-USE FIXTURES (Run automatically for every test)
# ============================================================================

@pytest.fixture(autouse=True)
def sms_outbox(settings):
    """
    Route every SMS to the in-memory gateway and start each test with an
    empty outbox.

    Usage:
        def test_order_placed_sms(sms_outbox, authenticated_client):
            authenticated_client.post('/api/orders', {...}, format='json')
            assert len(sms_outbox) == 1
    """
    from notifications.gateways import InMemorySMSGateway

    settings.SMS_BACKEND = 'notifications.gateways.InMemorySMSGateway'
    settings.SMS_DEFAULT_COUNTRY_CODE = '+91'
    InMemorySMSGateway.clear()
    yield InMemorySMSGateway.outbox
    InMemorySMSGateway.clear()


# ============================================================================
# IDENTITY TOKEN HELPERS
# ============================================================================

def make_identity_token(identity_id, email='', picture='', lifetime=timedelta(minutes=5)):
    """
    Sign a bearer token the way the identity provider would.
    """
    from rest_framework_simplejwt.state import token_backend

    now = timezone.now()
    payload = {
        'sub': identity_id,
        'iat': int(now.timestamp()),
        'exp': int((now + lifetime).timestamp()),
    }
    if email:
        payload['email'] = email
    if picture:
        payload['picture'] = picture
    return token_backend.encode(payload)


@pytest.fixture
def identity_token():
    """
    Factory for signed identity tokens.

    Usage:
        def test_sync(api_client, identity_token):
            token = identity_token('user_123', email='asha@example.com')
            api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    """
    return make_identity_token


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/health')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, account):
    """
    Provide an API client authenticated as the ``account`` fixture's identity.

    Usage:
        def test_protected_endpoint(authenticated_client):
            response = authenticated_client.get('/api/users/me')
            assert response.status_code == 200
    """
    token = make_identity_token(account.identity_id, email=account.email)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return api_client


# ============================================================================
# IMPORT ALL FIXTURES FROM core_backend/tests/fixtures.py
# ============================================================================
from core_backend.tests.fixtures import *
