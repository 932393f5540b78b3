"""
Orders services package.

- OrderLifecycleService: order creation, status transitions and listings
- OrderNotificationService: customer text messages for order events
"""

from .order_service import OrderLifecycleService
from .notification_service import OrderNotificationService

__all__ = [
    'OrderLifecycleService',
    'OrderNotificationService',
]
