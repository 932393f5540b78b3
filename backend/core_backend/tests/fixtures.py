"""
Shared model fixtures for storefront tests.
"""
import pytest
from decimal import Decimal


@pytest.fixture
def account(db):
    """An account with an empty cart and no coins."""
    from accounts.models import Account

    return Account.objects.create(
        identity_id='user_2abcDEF',
        email='asha@example.com',
        avatar_url='https://img.example.com/asha.png',
    )


@pytest.fixture
def other_account(db):
    from accounts.models import Account

    return Account.objects.create(
        identity_id='user_9xyzUVW',
        email='ravi@example.com',
    )


@pytest.fixture
def account_with_cart(account):
    """The ``account`` fixture with three products in its cart."""
    from cart.models import CartLine

    for code in (1001, 1002, 1003):
        CartLine.objects.create(account=account, product_code=code)
    return account


@pytest.fixture
def order_factory(db):
    """
    Factory for persisted orders.

    Usage:
        def test_status(order_factory):
            order = order_factory(fulfillment_mode='delivery')
    """
    from orders.models import Order

    def create_order(**overrides):
        data = {
            'owner_identity_id': 'user_2abcDEF',
            'owner_email': 'asha@example.com',
            'line_items': [{'barcode': 123, 'qty': 2}],
            'total_amount': Decimal('250.00'),
            'fulfillment_mode': Order.FulfillmentMode.TAKEAWAY,
            'payment_mode': Order.PaymentMode.CASH_ON_DELIVERY,
            'delivery_address': 'Store Pickup',
            'contact_phone': '9876543210',
        }
        data.update(overrides)
        return Order.objects.create(**data)

    return create_order
