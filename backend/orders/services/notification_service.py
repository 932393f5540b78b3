"""
Customer text notifications for order events.
"""
import logging

from notifications import templates

logger = logging.getLogger(__name__)


class OrderNotificationService:
    """
    Builds order messages and hands them to an ``SMSNotifier``.

    Every method is best-effort: a failed send is logged by the notifier and
    reported here as ``None``; it never raises into the order workflow.
    """

    def __init__(self, notifier):
        self.notifier = notifier

    def notify_order_placed(self, order):
        """
        Send the "order placed" message for a newly created order.

        Returns:
            str or None: Provider message id if the message was sent
        """
        message = templates.order_placed(order.reference, order.total_amount)
        sid = self.notifier.send_best_effort(order.contact_phone, message)
        if sid is None:
            logger.warning(f"[OrderNotificationService] Order #{order.reference} placed but SMS was not sent")
        return sid

    def notify_status_change(self, order):
        """
        Send the message for the order's current status, if it has one.

        Returns:
            str or None: Provider message id, or None if there was nothing to
            send or the send failed
        """
        message = templates.message_for_status(
            order.status, order.reference, order.fulfillment_mode
        )
        if message is None:
            logger.debug(f"[OrderNotificationService] No message for status '{order.status}' on order #{order.reference}")
            return None

        sid = self.notifier.send_best_effort(order.contact_phone, message)
        if sid is None:
            logger.warning(
                f"[OrderNotificationService] Order #{order.reference} moved to '{order.status}' but SMS was not sent"
            )
        return sid
