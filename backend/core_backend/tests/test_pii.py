"""
PII Masking Tests

Phone numbers and emails pass through notification logging; these tests make
sure only masked values reach the log records.
"""
import logging

import pytest

from core_backend.utils.pii import PIIProtection, get_pii_safe_logger


class TestMasking:

    @pytest.mark.parametrize("phone, expected", [
        ("+919876543210", "+********3210"),
        ("9876543210", "******3210"),
        ("123", "***"),
        ("", ""),
    ])
    def test_mask_phone(self, phone, expected):
        assert PIIProtection.mask_phone(phone) == expected

    @pytest.mark.parametrize("email, expected", [
        ("asha@example.com", "as**@example.com"),
        ("a@example.com", "a*@example.com"),
        ("not-an-email", "not-an-email"),
    ])
    def test_mask_email(self, email, expected):
        assert PIIProtection.mask_email(email) == expected

    def test_scrub_nested_dict(self):
        scrubbed = PIIProtection.scrub_pii_from_dict({
            "sid": "SM123",
            "order": {"contact_phone": "9876543210", "owner_email": "asha@example.com"},
        })

        assert scrubbed == {
            "sid": "SM123",
            "order": {"contact_phone": "******3210", "owner_email": "as**@example.com"},
        }


class TestPIISafeLogger:

    def test_extra_is_masked_on_the_record(self, caplog):
        logger = get_pii_safe_logger("notifications.services")

        with caplog.at_level(logging.INFO, logger="notifications.services"):
            logger.info("SMS sent", extra={"phone": "+919876543210", "sid": "SM123"})

        record = caplog.records[-1]
        assert record.getMessage() == "SMS sent"
        assert record.phone == "+********3210"
        assert record.sid == "SM123"
