"""
Orders API Integration Tests

Test Categories:
1. Checkout Endpoint
2. Order Listings
3. Status Endpoint
"""
import pytest
from datetime import timedelta
from unittest.mock import patch
from django.utils import timezone

from notifications.exceptions import NotificationError
from orders.models import Order


CHECKOUT_BODY = {
    "items": [{"barcode": 123, "qty": 2}],
    "total": 250,
    "deliveryOption": "takeaway",
    "paymentOption": "cod",
    "phoneNumber": "9876543210",
}


# ============================================================================
# CHECKOUT ENDPOINT
# ============================================================================

@pytest.mark.django_db
class TestCheckoutEndpoint:

    def test_create_order_returns_201_with_coins(self, authenticated_client, account_with_cart, sms_outbox):
        response = authenticated_client.post('/api/orders', CHECKOUT_BODY, format='json')

        assert response.status_code == 201
        body = response.json()
        assert body["coinsEarned"] == 2
        assert body["address"] == "Store Pickup"
        assert body["status"] == "pending"
        assert body["total"] == 250
        assert body["items"] == [{"barcode": 123, "qty": 2}]
        assert body["deliveryOption"] == "takeaway"
        assert body["paymentOption"] == "cod"
        assert body["phoneNumber"] == "9876543210"
        assert body["userId"] == account_with_cart.identity_id
        assert body["userEmail"] == account_with_cart.email
        assert body["orderNumber"] == body["id"][-6:].upper()

        account_with_cart.refresh_from_db()
        assert account_with_cart.loyalty_balance == 2
        assert account_with_cart.cart_lines.count() == 0
        assert len(sms_outbox) == 1

    def test_delivery_without_address_is_400(self, authenticated_client, account):
        body = dict(CHECKOUT_BODY, deliveryOption="delivery", address="   ")

        response = authenticated_client.post('/api/orders', body, format='json')

        assert response.status_code == 400
        assert response.json() == {
            "error": "Address is required for delivery orders",
            "details": {"field": "address"},
        }
        assert Order.objects.count() == 0

    def test_string_total_is_400(self, authenticated_client, account):
        body = dict(CHECKOUT_BODY, total="250")

        response = authenticated_client.post('/api/orders', body, format='json')

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "total"

    def test_oversized_total_is_400(self, authenticated_client, account):
        body = dict(CHECKOUT_BODY, total=1e30)

        response = authenticated_client.post('/api/orders', body, format='json')

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "total"
        assert Order.objects.count() == 0

    def test_missing_items_is_400(self, authenticated_client, account):
        body = {k: v for k, v in CHECKOUT_BODY.items() if k != "items"}

        response = authenticated_client.post('/api/orders', body, format='json')

        assert response.status_code == 400
        assert response.json()["error"] == "Items are required and must be a non-empty array"

    def test_unsynced_caller_is_404(self, api_client, identity_token):
        token = identity_token('user_ghost', email='ghost@example.com')
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

        response = api_client.post('/api/orders', CHECKOUT_BODY, format='json')

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_sms_failure_still_returns_201(self, authenticated_client, account):
        """
        Scenario:
        - SMS provider rejects the order placed message
        - Expected: order still created and reported as 201
        """
        with patch(
            'notifications.gateways.InMemorySMSGateway.send',
            side_effect=NotificationError("provider down"),
        ):
            response = authenticated_client.post('/api/orders', CHECKOUT_BODY, format='json')

        assert response.status_code == 201
        assert response.json()["coinsEarned"] == 2

    def test_requires_authentication(self, api_client):
        response = api_client.post('/api/orders', CHECKOUT_BODY, format='json')

        assert response.status_code == 401


# ============================================================================
# ORDER LISTINGS
# ============================================================================

@pytest.mark.django_db
class TestOrderListings:

    def test_list_all_orders_newest_first(self, authenticated_client, order_factory):
        older = order_factory()
        newer = order_factory(owner_identity_id='user_9xyzUVW', owner_email='ravi@example.com')
        Order.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(hours=2))

        response = authenticated_client.get('/api/orders')

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [str(newer.id), str(older.id)]

    def test_mine_only_returns_callers_orders(self, authenticated_client, account, order_factory):
        first = order_factory()
        second = order_factory()
        order_factory(owner_identity_id='user_9xyzUVW', owner_email='ravi@example.com')
        Order.objects.filter(pk=first.pk).update(created_at=timezone.now() - timedelta(hours=1))

        response = authenticated_client.get('/api/orders/mine')

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [str(second.id), str(first.id)]

    def test_mine_is_empty_for_new_customer(self, authenticated_client):
        response = authenticated_client.get('/api/orders/mine')

        assert response.status_code == 200
        assert response.json() == []


# ============================================================================
# STATUS ENDPOINT
# ============================================================================

@pytest.mark.django_db
class TestStatusEndpoint:

    def test_update_status(self, authenticated_client, order_factory, sms_outbox):
        order = order_factory(fulfillment_mode='delivery', delivery_address='12 MG Road')

        response = authenticated_client.put(
            f'/api/orders/{order.id}/status', {"status": "ready"}, format='json'
        )

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
        assert "out for delivery" in sms_outbox[0]["body"]

    def test_invalid_status_is_400(self, authenticated_client, order_factory):
        order = order_factory()

        response = authenticated_client.put(
            f'/api/orders/{order.id}/status', {"status": "shipped"}, format='json'
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid status"
        assert body["details"]["field"] == "status"
        assert "delivered" in body["details"]["allowed"]
        order.refresh_from_db()
        assert order.status == "pending"

    def test_missing_status_is_400(self, authenticated_client, order_factory):
        order = order_factory()

        response = authenticated_client.put(f'/api/orders/{order.id}/status', {}, format='json')

        assert response.status_code == 400

    def test_unknown_order_is_404(self, authenticated_client):
        response = authenticated_client.put(
            '/api/orders/2f1c9a7e-0000-4000-8000-000000000000/status',
            {"status": "confirmed"},
            format='json',
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}
