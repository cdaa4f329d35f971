"""
User account, profile and session repositories.
"""

from datetime import datetime
from typing import Optional

from ..models.user import UserAccount, UserProfile
from .base import BaseRepository


class UserRepository(BaseRepository[UserAccount]):
    """Repository for UserAccount entities."""

    def _get_table_name(self) -> str:
        return "users"

    def _row_to_model(self, row: dict) -> UserAccount:
        """Convert database row to UserAccount model."""
        return UserAccount(
            id=str(row["id"]),
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def _model_to_dict(self, model: UserAccount) -> dict:
        """Convert UserAccount model to dictionary."""
        return {
            "id": model.id,
            "email": model.email,
            "password_hash": model.password_hash,
            "created_at": model.created_at.isoformat(),
        }

    def add(self, account: UserAccount) -> UserAccount:
        self._insert(account)
        return account

    def find_by_email(self, email: str) -> Optional[UserAccount]:
        """Find user by email address (case-insensitive)."""
        rows = self.execute_query(
            f"SELECT * FROM {self._table_name} WHERE email = ? COLLATE NOCASE",
            (email.lower().strip(),),
        )
        return self._row_to_model(rows[0]) if rows else None


class ProfileRepository(BaseRepository[UserProfile]):
    """Repository for UserProfile entities, keyed by user id."""

    def _get_table_name(self) -> str:
        return "profiles"

    def _row_to_model(self, row: dict) -> UserProfile:
        return UserProfile(
            user_id=str(row["user_id"]),
            name=row["name"],
            username=row["username"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def _model_to_dict(self, model: UserProfile) -> dict:
        return {
            "user_id": model.user_id,
            "name": model.name,
            "username": model.username,
            "created_at": model.created_at.isoformat(),
            "updated_at": model.updated_at.isoformat(),
        }

    def add(self, profile: UserProfile) -> UserProfile:
        self._insert(profile)
        return profile

    def save(self, profile: UserProfile) -> bool:
        return self._update(profile, key="user_id")

    def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        rows = self.execute_query(
            f"SELECT * FROM {self._table_name} WHERE user_id = ?", (user_id,)
        )
        return self._row_to_model(rows[0]) if rows else None

    def find_by_username(self, username: str) -> Optional[UserProfile]:
        """Find a profile by username (case-insensitive)."""
        rows = self.execute_query(
            f"SELECT * FROM {self._table_name} WHERE username = ? COLLATE NOCASE",
            (username.strip(),),
        )
        return self._row_to_model(rows[0]) if rows else None

    def delete_for_user(self, user_id: str) -> bool:
        with self.db.get_connection() as conn:
            cursor = conn.execute(f"DELETE FROM {self._table_name} WHERE user_id = ?", (user_id,))
            return cursor.rowcount > 0


class SessionRepository:
    """Server-side session records so sign-out can revoke a token."""

    def __init__(self, db_connection):
        self.db = db_connection

    def add(self, session_id: str, user_id: str, created_at: datetime, expires_at: datetime) -> None:
        with self.db.get_connection() as conn:
            conn.execute(
                "INSERT INTO sessions (id, user_id, created_at, expires_at) VALUES (?, ?, ?, ?)",
                (session_id, user_id, created_at.isoformat(), expires_at.isoformat()),
            )

    def find(self, session_id: str) -> Optional[dict]:
        with self.db.get_connection() as conn:
            row = conn.execute("SELECT * FROM sessions WHERE id = ?", (session_id,)).fetchone()
        if not row:
            return None
        return {
            "id": row["id"],
            "user_id": row["user_id"],
            "created_at": datetime.fromisoformat(row["created_at"]),
            "expires_at": datetime.fromisoformat(row["expires_at"]),
        }

    def delete(self, session_id: str) -> bool:
        with self.db.get_connection() as conn:
            cursor = conn.execute("DELETE FROM sessions WHERE id = ?", (session_id,))
            return cursor.rowcount > 0

    def delete_for_user(self, user_id: str) -> int:
        with self.db.get_connection() as conn:
            cursor = conn.execute("DELETE FROM sessions WHERE user_id = ?", (user_id,))
            return cursor.rowcount
