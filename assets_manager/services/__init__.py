"""
Services package initialization.

This module provides access to the service classes behind the store API
and the error handler used by the view controllers.
"""

from .auth_service import AuthService
from .entry_service import EntryService
from .error_handler import ErrorHandler, Notification, NotificationLevel
from .profile_service import ProfileService

__all__ = [
    "AuthService",
    "EntryService",
    "ErrorHandler",
    "Notification",
    "NotificationLevel",
    "ProfileService",
]
