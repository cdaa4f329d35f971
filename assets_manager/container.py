"""
Dependency Injection Container

This module provides a centralized container for managing dependencies
and service instantiation for the store API.
"""

from typing import Any, Dict, Optional

from .config.settings import Settings
from .repositories.base import DatabaseConnection
from .repositories.entry_repository import EntryRepository
from .repositories.user_repository import ProfileRepository, SessionRepository, UserRepository
from .services.auth_service import AuthService
from .services.entry_service import EntryService
from .services.profile_service import ProfileService


class Container:
    """Dependency injection container for managing application services."""

    def __init__(self):
        self._singletons: Dict[str, Any] = {}
        self._settings: Optional[Settings] = None
        self._db_connection: Optional[DatabaseConnection] = None

    def configure(self, settings: Optional[Settings] = None) -> None:
        """Configure the container with settings."""
        self._settings = settings or Settings()
        database = self._settings.database
        self._db_connection = DatabaseConnection(
            database.absolute_path,
            timeout=database.connection_timeout,
            foreign_keys=database.enable_foreign_keys,
        )
        self._db_connection.initialize_schema()

        self._register_repositories()
        self._register_services()

    def get_settings(self) -> Settings:
        """Get application settings."""
        if not self._settings:
            self._settings = Settings()
        return self._settings

    def get_db_connection(self) -> DatabaseConnection:
        """Get database connection."""
        if not self._db_connection:
            self.configure(self._settings)
        return self._db_connection

    def _register_repositories(self) -> None:
        """Register repository instances."""
        db = self.get_db_connection()

        self._singletons["user_repository"] = UserRepository(db)
        self._singletons["profile_repository"] = ProfileRepository(db)
        self._singletons["session_repository"] = SessionRepository(db)
        self._singletons["entry_repository"] = EntryRepository(db)

    def _register_services(self) -> None:
        """Register service instances."""
        settings = self.get_settings()
        users = self._singletons["user_repository"]
        profiles = self._singletons["profile_repository"]
        sessions = self._singletons["session_repository"]
        entries = self._singletons["entry_repository"]

        self._singletons["auth_service"] = AuthService(users, profiles, sessions, settings)
        self._singletons["entry_service"] = EntryService(entries)
        self._singletons["profile_service"] = ProfileService(users, profiles, entries, sessions)

    def get_auth_service(self) -> AuthService:
        """Get auth service instance."""
        return self._singletons["auth_service"]

    def get_entry_service(self) -> EntryService:
        """Get entry service instance."""
        return self._singletons["entry_service"]

    def get_profile_service(self) -> ProfileService:
        """Get profile service instance."""
        return self._singletons["profile_service"]

    def get_entry_repository(self) -> EntryRepository:
        return self._singletons["entry_repository"]

    def get_profile_repository(self) -> ProfileRepository:
        return self._singletons["profile_repository"]

    def cleanup(self) -> None:
        """Cleanup container resources."""
        if self._db_connection:
            self._db_connection.close_all_connections()
        self._singletons.clear()

