from django.conf import settings

from core_backend.utils.pii import get_pii_safe_logger
from .exceptions import NotificationError, SMSNotConfiguredError
from .gateways import get_sms_gateway

logger = get_pii_safe_logger(__name__)


class SMSNotifier:
    """
    Sends text messages to customer phone numbers through an ``SMSGateway``.

    Numbers without a leading ``+`` are treated as domestic and prefixed with
    the configured country code before they reach the gateway.
    """

    def __init__(self, gateway=None, country_code=None):
        self.gateway = gateway if gateway is not None else get_sms_gateway()
        self.country_code = country_code or settings.SMS_DEFAULT_COUNTRY_CODE

    def normalize_phone(self, phone):
        """
        Args:
            phone: Number as entered by the customer

        Returns:
            str: Number in international ``+<country><number>`` form

        Raises:
            NotificationError: If the number is empty
        """
        phone = (phone or "").strip()
        if not phone:
            raise NotificationError("Phone number is required", code="invalid_phone")
        if phone.startswith("+"):
            return phone
        return f"{self.country_code}{phone}"

    def send(self, phone, body):
        """
        Send ``body`` to ``phone``.

        Returns:
            str: Provider message id

        Raises:
            NotificationError: Delivery was not accepted
        """
        to = self.normalize_phone(phone)
        sid = self.gateway.send(to, body)
        logger.info("SMS sent", extra={"phone": to, "sid": sid})
        return sid

    def send_best_effort(self, phone, body):
        """
        Send ``body`` to ``phone`` without ever raising.

        Returns:
            str or None: Provider message id, or None if nothing was sent
        """
        try:
            return self.send(phone, body)
        except SMSNotConfiguredError:
            logger.warning("SMS not sent - SMS service not configured", extra={"phone": phone})
        except NotificationError as e:
            logger.error(
                f"SMS sending failed: {e.message}",
                extra={"phone": phone, "error_code": e.code},
            )
        except Exception:
            logger.exception("Unexpected error while sending SMS", extra={"phone": phone})
        return None
