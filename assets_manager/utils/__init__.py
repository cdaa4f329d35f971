"""
Shared utilities: structured logging, text and validation helpers.
"""

from .structured_logging import configure_logging, get_logger, get_structured_logger
from .text_utils import sanitize_text
from .validation_utils import PasswordStrength, ValidationUtils

__all__ = [
    "configure_logging",
    "get_logger",
    "get_structured_logger",
    "sanitize_text",
    "PasswordStrength",
    "ValidationUtils",
]
