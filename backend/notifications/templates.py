"""
SMS message templates for the order lifecycle.

Every function is pure: the same reference and context always produce the
same text.
"""
from decimal import Decimal

STORE_NAME = "Balaji Bachat Bazar"
STORE_SHORT_NAME = "B3 Store"
STORE_HOURS = "9 AM - 9 PM"


def format_amount(total):
    """Render a rupee amount without a trailing ``.00`` for whole numbers."""
    amount = Decimal(str(total))
    if amount == amount.to_integral_value():
        return str(amount.to_integral_value())
    return f"{amount.normalize():f}"


def order_placed(order_reference, total):
    return (
        f"🎉 Thank you for shopping with {STORE_NAME}!\n\n"
        f"📋 Order #{order_reference}\n"
        f"💰 Total: ₹{format_amount(total)}\n"
        f"📱 Track your order in the app\n\n"
        f"We're preparing your order with care!"
    )


def order_confirmed(order_reference):
    return (
        f"✅ Great news! Your order #{order_reference} has been confirmed.\n\n"
        f"👨‍🍳 Our team is now preparing your items.\n"
        f"⏰ Estimated time: 15-20 minutes\n\n"
        f"Thank you for choosing {STORE_SHORT_NAME}!"
    )


def order_preparing(order_reference):
    return (
        f"👨‍🍳 Your order #{order_reference} is being prepared with love!\n\n"
        f"🕐 Almost ready - just a few more minutes\n"
        f"📱 You'll be notified when it's ready"
    )


def order_ready(order_reference, fulfillment_mode):
    """Delivery orders are out for delivery; everything else awaits pickup."""
    if fulfillment_mode == "delivery":
        return (
            f"🚚 Your order #{order_reference} is ready and out for delivery!\n\n"
            f"📍 Our delivery partner is on the way\n"
            f"⏰ Expected delivery: 10-15 minutes\n\n"
            f"Please keep your phone handy!"
        )
    return (
        f"✅ Your order #{order_reference} is ready for pickup!\n\n"
        f"📍 Please visit our store to collect your order\n"
        f"🕐 Store hours: {STORE_HOURS}\n\n"
        f"Thank you for choosing {STORE_SHORT_NAME}!"
    )


def order_delivered(order_reference):
    return (
        f"🎉 Your order #{order_reference} has been delivered!\n\n"
        f"😊 Hope you enjoy your purchase\n"
        f"⭐ Rate your experience in the app\n\n"
        f"Thank you for shopping with {STORE_SHORT_NAME}!"
    )


def order_cancelled(order_reference):
    return (
        f"❌ We're sorry! Your order #{order_reference} has been cancelled.\n\n"
        f"💰 Refund will be processed within 3-5 business days\n"
        f"📞 Contact us for any queries\n\n"
        f"We apologize for the inconvenience."
    )


STATUS_TEMPLATES = {
    "confirmed": lambda reference, mode: order_confirmed(reference),
    "preparing": lambda reference, mode: order_preparing(reference),
    "ready": order_ready,
    "delivered": lambda reference, mode: order_delivered(reference),
    "cancelled": lambda reference, mode: order_cancelled(reference),
}


def message_for_status(status, order_reference, fulfillment_mode):
    """
    Text to send when an order moves to ``status``.

    Returns:
        str or None: None when the status has no customer-facing message
        (``pending``)
    """
    template = STATUS_TEMPLATES.get(status)
    if template is None:
        return None
    return template(order_reference, fulfillment_mode)
