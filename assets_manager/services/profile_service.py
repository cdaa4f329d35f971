"""
Profile management and account deletion.
"""

import sqlite3
from typing import Optional

from ..exceptions import ConflictError, NotFoundError, ValidationError
from ..models.base import utc_now
from ..models.user import ProfileUpdate, UserProfile
from ..repositories.entry_repository import EntryRepository
from ..repositories.user_repository import ProfileRepository, SessionRepository, UserRepository
from ..utils.structured_logging import get_logger

logger = get_logger(__name__)


class ProfileService:
    """Service for profile reads, updates and account removal."""

    def __init__(
        self,
        users: UserRepository,
        profiles: ProfileRepository,
        entries: EntryRepository,
        sessions: SessionRepository,
    ):
        self.users = users
        self.profiles = profiles
        self.entries = entries
        self.sessions = sessions

    def find_profile(self, user_id: str) -> Optional[UserProfile]:
        return self.profiles.find_by_user_id(user_id)

    def get_profile(self, user_id: str) -> UserProfile:
        profile = self.find_profile(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def update_profile(self, user_id: str, update: ProfileUpdate) -> UserProfile:
        """Update name and/or username.

        A username held by another account raises ``ConflictError`` and
        leaves the profile untouched.
        """
        changes = update.changes()
        if not changes:
            raise ValidationError("Nothing to update")

        profile = self.get_profile(user_id)
        username = changes.get("username")
        if username:
            holder = self.profiles.find_by_username(username)
            if holder and holder.user_id != user_id:
                logger.warning("Username conflict", user_id=user_id, operation="update_profile")
                raise ConflictError("Username already taken", field="username")

        updated = profile.model_copy(update={**changes, "updated_at": utc_now()})
        try:
            self.profiles.save(updated)
        except sqlite3.IntegrityError as e:
            logger.warning("Username conflict", user_id=user_id, operation="update_profile")
            raise ConflictError("Username already taken", field="username") from e
        logger.info("Profile updated", user_id=user_id, fields=sorted(changes), operation="update_profile")
        return updated

    def delete_account(self, user_id: str) -> None:
        """Remove profile, entries, sessions and the account itself."""
        self.profiles.delete_for_user(user_id)
        removed = self.entries.delete_for_user(user_id)
        self.sessions.delete_for_user(user_id)
        self.users.delete(user_id)
        logger.info("Account deleted", user_id=user_id, entries_removed=removed, operation="delete_account")
