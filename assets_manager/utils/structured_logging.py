"""
Structured logging setup with redaction of credentials and personal data.
"""

import logging
import re
from typing import Any, Dict, Optional

import structlog

SENSITIVE_KEYS = {
    "password",
    "password_hash",
    "token",
    "access_token",
    "authorization",
    "secret_key",
}

EMAIL_PATTERN = re.compile(r"([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*(@[A-Za-z0-9.-]+\.[A-Za-z]{2,})")


def mask_email(text: str) -> str:
    """Keep the first character and the domain of every email address."""
    return EMAIL_PATTERN.sub(r"\1***\2", text)


def _clean_value(key: str, value: Any) -> Any:
    if key.lower() in SENSITIVE_KEYS:
        return "{{REDACTED}}"
    if isinstance(value, str):
        return mask_email(value)
    if isinstance(value, dict):
        return {k: _clean_value(k, v) for k, v in value.items()}
    return value


def redact_sensitive(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """structlog processor that scrubs sensitive keys and masks emails."""
    return {key: _clean_value(key, value) for key, value in event_dict.items()}


class SecureLoggingFilter(logging.Filter):
    """Logging filter that masks email addresses in plain stdlib records"""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = mask_email(record.msg)
        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                mask_email(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        return True


class StructuredLogger:
    """Structured logging setup with PII protection"""

    def __init__(self, service_name: str = "assets_manager", level: str = "INFO", json_output: bool = False):
        self.service_name = service_name
        self.level = level
        self.json_output = json_output
        self._setup_logging()

    def _setup_logging(self) -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if self.json_output
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                redact_sensitive,
                renderer,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(level=getattr(logging, self.level, logging.INFO), format="%(message)s")
        logging.getLogger().setLevel(getattr(logging, self.level, logging.INFO))

        pii_filter = SecureLoggingFilter()
        for handler in logging.root.handlers:
            handler.addFilter(pii_filter)

        # HTTP libraries are noisy at DEBUG
        for noisy in ("urllib3", "requests", "httpx", "streamlit"):
            logging.getLogger(noisy).setLevel(logging.WARNING)

    def get_logger(self, name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
        """Get a structured logger instance"""
        return structlog.get_logger(name or self.service_name)


_structured_logger: Optional[StructuredLogger] = None


def configure_logging(level: str = "INFO", json_output: bool = False) -> StructuredLogger:
    """(Re)configure application logging, e.g. from Settings.app at startup."""
    global _structured_logger
    _structured_logger = StructuredLogger(level=level, json_output=json_output)
    return _structured_logger


def get_structured_logger() -> StructuredLogger:
    """Get the global structured logger, configuring defaults on first use."""
    global _structured_logger
    if _structured_logger is None:
        _structured_logger = StructuredLogger()
    return _structured_logger


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Shortcut used by modules: ``logger = get_logger(__name__)``."""
    return get_structured_logger().get_logger(name)
