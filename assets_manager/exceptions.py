"""
Error taxonomy shared by the store services, the HTTP API, the store client
and the view controllers.
"""

from datetime import datetime
from typing import Any, Dict, Optional


class AssetsManagerError(Exception):
    """Base exception for AssetsManager errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.field = field
        self.details = details or {}
        self.error_code = self.__class__.__name__
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation used in error responses."""
        return {"error": self.message, "type": self.error_code, "field": self.field}


class ValidationError(AssetsManagerError, ValueError):
    """Missing or malformed required field.

    Also a ``ValueError`` so that raising it inside a pydantic validator
    surfaces as an ordinary field error.
    """

    status_code = 400


class AuthError(AssetsManagerError):
    """Missing, invalid or expired credential"""

    status_code = 401


class NotFoundError(AssetsManagerError):
    """Operation on an id the caller does not own"""

    status_code = 404


class ConflictError(AssetsManagerError):
    """Uniqueness violation, e.g. a username that is already taken"""

    status_code = 409


class TransientError(AssetsManagerError):
    """Network or server failure; never retried automatically"""

    status_code = 503


def error_for_status(status_code: int, message: str, field: Optional[str] = None) -> AssetsManagerError:
    """Map an HTTP status code back onto the taxonomy."""
    if status_code in (400, 422):
        return ValidationError(message, field=field)
    if status_code in (401, 403):
        return AuthError(message, field=field)
    if status_code == 404:
        return NotFoundError(message, field=field)
    if status_code == 409:
        return ConflictError(message, field=field)
    return TransientError(message, field=field, details={"status_code": status_code})
