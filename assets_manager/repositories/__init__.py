"""
Repository layer over the sqlite backing store.
"""

from .base import BaseRepository, DatabaseConnection
from .entry_repository import EntryRepository
from .user_repository import ProfileRepository, SessionRepository, UserRepository

__all__ = [
    "BaseRepository",
    "DatabaseConnection",
    "EntryRepository",
    "ProfileRepository",
    "SessionRepository",
    "UserRepository",
]
