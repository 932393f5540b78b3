"""
PII masking for log output.

Phone numbers and email addresses flow through the order and notification
paths; log lines carry masked versions only.
"""
import logging
import re
from typing import Dict, Any, Optional


class PIIProtection:
    """Utilities for protecting personally identifiable information."""

    PII_FIELDS = {
        'email', 'phone', 'phone_number', 'to', 'address', 'delivery_address',
        'contact_phone', 'owner_email',
    }

    @staticmethod
    def mask_email(email: Optional[str]) -> str:
        """
        Mask email address for safe display.
        Example: ravi.kumar@example.com -> ra********@example.com
        """
        if not email or '@' not in email:
            return email or ''

        local, domain = email.split('@', 1)
        if len(local) <= 2:
            masked_local = local[:1] + '*'
        else:
            masked_local = local[:2] + '*' * (len(local) - 2)
        return f"{masked_local}@{domain}"

    @staticmethod
    def mask_phone(phone: Optional[str]) -> str:
        """
        Mask every digit except the last four.
        Example: +919876543210 -> +********3210
        """
        if not phone:
            return phone or ''

        digit_count = len(re.sub(r'\D', '', phone))
        if digit_count < 4:
            return '*' * len(phone)

        keep_from = digit_count - 4
        seen = 0
        masked = []
        for char in phone:
            if char.isdigit():
                masked.append('*' if seen < keep_from else char)
                seen += 1
            else:
                masked.append(char)
        return ''.join(masked)

    @staticmethod
    def mask_field_by_type(field_name: str, value: Optional[str]) -> str:
        if not value:
            return value or ''

        field_lower = field_name.lower()
        if 'email' in field_lower:
            return PIIProtection.mask_email(value)
        if 'phone' in field_lower or field_lower == 'to':
            return PIIProtection.mask_phone(value)
        if len(value) <= 3:
            return '*' * len(value)
        return value[:3] + '*' * (len(value) - 3)

    @staticmethod
    def scrub_pii_from_dict(data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Mask PII fields in a dictionary, recursing into nested dicts and lists.
        """
        if not isinstance(data, dict):
            return data

        scrubbed = {}
        for key, value in data.items():
            if key.lower() in PIIProtection.PII_FIELDS and isinstance(value, str):
                scrubbed[key] = PIIProtection.mask_field_by_type(key, value)
            elif isinstance(value, dict):
                scrubbed[key] = PIIProtection.scrub_pii_from_dict(value)
            elif isinstance(value, list):
                scrubbed[key] = [
                    PIIProtection.scrub_pii_from_dict(item) if isinstance(item, dict) else item
                    for item in value
                ]
            else:
                scrubbed[key] = value
        return scrubbed


class PIISafeLogger:
    """
    Logger wrapper that masks PII passed through ``extra``.
    Use this instead of regular Python logging for any logs that might contain PII.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    def _safe_log(self, level: int, message: str, *args, **kwargs):
        extra = kwargs.get('extra')
        if extra:
            kwargs['extra'] = PIIProtection.scrub_pii_from_dict(extra)
        self.logger.log(level, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._safe_log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._safe_log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._safe_log(logging.ERROR, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._safe_log(logging.DEBUG, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        kwargs.setdefault('exc_info', True)
        self._safe_log(logging.ERROR, message, *args, **kwargs)


def get_pii_safe_logger(name: str) -> PIISafeLogger:
    """
    Get a PII-safe logger instance.

    Usage:
        from core_backend.utils.pii import get_pii_safe_logger
        logger = get_pii_safe_logger(__name__)
        logger.info("SMS sent", extra={"phone": "+919876543210"})  # phone is masked
    """
    return PIISafeLogger(name)
