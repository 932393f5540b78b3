"""
Notification delivery errors.

These never escape a best-effort send; only the ad hoc SMS endpoint reports
them to the client.
"""


class NotificationError(Exception):
    """An outbound message could not be delivered."""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.message = message
        self.code = code


class SMSNotConfiguredError(NotificationError):
    """The SMS provider credentials or sender number are missing."""

    def __init__(self, message="SMS service not configured"):
        super().__init__(message, code="not_configured")
