"""
Unit tests for log redaction
"""

import logging

from assets_manager.utils.structured_logging import SecureLoggingFilter, mask_email, redact_sensitive


def test_mask_email():
    assert mask_email("signed in as asha@example.com") == "signed in as a***@example.com"


def test_redact_sensitive_keys():
    event = redact_sensitive(
        None,
        "info",
        {"event": "User signed in", "password": "Str0ng!Passw0rd", "token": "abc", "email": "asha@example.com"},
    )
    assert event["password"] == "{{REDACTED}}"
    assert event["token"] == "{{REDACTED}}"
    assert event["email"] == "a***@example.com"
    assert event["event"] == "User signed in"


def test_stdlib_filter_masks_arguments():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "login %s", ("asha@example.com",), None)
    assert SecureLoggingFilter().filter(record)
    assert record.getMessage() == "login a***@example.com"
