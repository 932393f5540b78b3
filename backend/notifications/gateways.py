"""
Outbound SMS gateways.

A gateway accepts an already-normalized destination number and a message
body and returns the provider's message id. ``get_sms_gateway`` builds the
one named by ``settings.SMS_BACKEND``.
"""
from abc import ABC, abstractmethod
import logging
import uuid

from django.conf import settings
from django.utils.module_loading import import_string
from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from core_backend.utils.pii import PIIProtection
from .exceptions import NotificationError, SMSNotConfiguredError

logger = logging.getLogger(__name__)


class SMSGateway(ABC):
    """Port for sending a single text message."""

    @abstractmethod
    def send(self, to: str, body: str) -> str:
        """
        Deliver ``body`` to ``to``.

        Returns:
            str: Provider message id

        Raises:
            NotificationError: If the message was not accepted
        """


class TwilioSMSGateway(SMSGateway):
    """
    Sends messages through the Twilio REST API.

    Credentials default to the ``TWILIO_*`` settings. The REST client is
    created on first send so building a gateway never touches the network.
    """

    def __init__(self, account_sid=None, auth_token=None, from_number=None, client=None):
        self.account_sid = account_sid or settings.TWILIO_ACCOUNT_SID
        self.auth_token = auth_token or settings.TWILIO_AUTH_TOKEN
        self.from_number = from_number or settings.TWILIO_PHONE_NUMBER
        self._client = client

    @property
    def is_configured(self):
        return bool(self.account_sid and self.auth_token and self.from_number)

    @property
    def client(self):
        if self._client is None:
            self._client = Client(self.account_sid, self.auth_token)
        return self._client

    def send(self, to, body):
        if not self.is_configured:
            raise SMSNotConfiguredError()

        try:
            message = self.client.messages.create(
                body=body,
                from_=self.from_number,
                to=to,
            )
        except TwilioException as e:
            code = getattr(e, "code", None)
            logger.error(f"Twilio rejected SMS to {PIIProtection.mask_phone(to)} (code={code}): {e}")
            raise NotificationError(str(e) or "Failed to send SMS", code=code) from e
        except OSError as e:
            logger.error(f"Twilio unreachable while sending SMS to {PIIProtection.mask_phone(to)}: {e}")
            raise NotificationError("Failed to send SMS", code="transport") from e

        return message.sid


class UnconfiguredSMSGateway(SMSGateway):
    """
    Stand-in used when no SMS provider is configured. Every send is refused
    with ``SMSNotConfiguredError`` so callers can skip or report it.
    """

    def send(self, to, body):
        raise SMSNotConfiguredError()


class InMemorySMSGateway(SMSGateway):
    """
    Keeps sent messages in ``InMemorySMSGateway.outbox`` instead of delivering
    them. Used by the test suite and for local development.

    The outbox is a class attribute, so every instance in the process appends
    to the same list. Call ``clear()`` between tests.
    """

    outbox = []

    def send(self, to, body):
        sid = f"SM{uuid.uuid4().hex}"
        InMemorySMSGateway.outbox.append({"sid": sid, "to": to, "body": body})
        return sid

    @classmethod
    def clear(cls):
        cls.outbox.clear()


def get_sms_gateway(backend=None):
    """Instantiate the gateway class at ``backend`` or ``settings.SMS_BACKEND``."""
    gateway_class = import_string(backend or settings.SMS_BACKEND)
    return gateway_class()
