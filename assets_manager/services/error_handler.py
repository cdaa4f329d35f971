"""
Error handling service: turns exceptions into user-facing notifications.
"""

import uuid
from dataclasses import dataclass, field as dataclass_field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..exceptions import (
    AssetsManagerError,
    AuthError,
    ConflictError,
    NotFoundError,
    TransientError,
    ValidationError,
)
from ..utils.structured_logging import get_logger

logger = get_logger(__name__)


class NotificationLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    """A message for the page to show.

    ``field`` is set when the message belongs inline next to a form field;
    ``requires_sign_in`` asks the page to send the user to the sign-in view.
    """

    message: str
    level: NotificationLevel = NotificationLevel.INFO
    field: Optional[str] = None
    error_id: Optional[str] = None
    error_type: Optional[str] = None
    requires_sign_in: bool = False
    dismissible: bool = True
    timestamp: datetime = dataclass_field(default_factory=datetime.now)

    @property
    def is_inline(self) -> bool:
        return self.field is not None

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(message=message, level=NotificationLevel.SUCCESS)


class ErrorHandler:
    """Centralized error handling service."""

    def __init__(self):
        self.logger = logger

    def handle_exception(
        self,
        exception: Exception,
        context: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Notification:
        """Log an exception and build the notification shown for it."""
        error_id = self._generate_error_id()
        log = self.logger.warning if isinstance(exception, AssetsManagerError) else self.logger.error
        log(
            "Exception occurred",
            error_id=error_id,
            error_type=type(exception).__name__,
            context=context or "unknown context",
            user_id=user_id,
            operation="handle_exception",
        )

        if isinstance(exception, ValidationError):
            return Notification(
                message=exception.message,
                level=NotificationLevel.WARNING,
                field=exception.field,
                error_id=error_id,
                error_type="ValidationError",
            )
        if isinstance(exception, ConflictError):
            return Notification(
                message=exception.message,
                level=NotificationLevel.WARNING,
                field=exception.field,
                error_id=error_id,
                error_type="ConflictError",
            )
        if isinstance(exception, AuthError):
            return Notification(
                message=exception.message or "Please sign in again.",
                level=NotificationLevel.WARNING,
                error_id=error_id,
                error_type="AuthError",
                requires_sign_in=True,
            )
        return Notification(
            message=self._get_user_friendly_message(exception),
            level=NotificationLevel.ERROR,
            error_id=error_id,
            error_type=type(exception).__name__,
        )

    def handle_validation_errors(self, errors: Dict[str, str], context: Optional[str] = None) -> Dict[str, Notification]:
        """Inline notifications for a set of form field errors."""
        error_id = self._generate_error_id()
        self.logger.warning(
            "Validation error",
            error_id=error_id,
            fields=sorted(errors),
            context=context or "unknown context",
            operation="handle_validation_errors",
        )
        return {
            name: Notification(
                message=message,
                level=NotificationLevel.WARNING,
                field=name,
                error_id=error_id,
                error_type="ValidationError",
            )
            for name, message in errors.items()
        }

    def _generate_error_id(self) -> str:
        """Generate unique error ID for tracking."""
        return str(uuid.uuid4())[:8]

    def _get_user_friendly_message(self, exception: Exception) -> str:
        """Convert exception to user-friendly message."""
        if isinstance(exception, NotFoundError):
            return "That item could not be found. It may have been deleted."
        if isinstance(exception, TransientError):
            return "The server could not be reached. Please try again."
        messages: Dict[str, Any] = {
            "ValueError": "Invalid input provided. Please check your data and try again.",
            "KeyError": "Required information is missing. Please ensure all fields are filled.",
            "ConnectionError": "Connection error. Please check your internet connection.",
            "TimeoutError": "The request timed out. Please try again.",
        }
        return messages.get(type(exception).__name__, "An unexpected error occurred. Please try again.")
