"""
Base repository classes and database connection management.
"""

import sqlite3
import threading
import uuid
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from ..utils.structured_logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    email TEXT NOT NULL UNIQUE COLLATE NOCASE,
    password_hash BLOB NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS profiles (
    user_id TEXT PRIMARY KEY REFERENCES users(id) ON DELETE CASCADE,
    name TEXT NOT NULL,
    username TEXT NOT NULL UNIQUE COLLATE NOCASE,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS sessions (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    created_at TEXT NOT NULL,
    expires_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS financial_entries (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    category TEXT NOT NULL,
    description TEXT,
    amount REAL NOT NULL DEFAULT 0,
    cash REAL NOT NULL DEFAULT 0,
    investment REAL NOT NULL DEFAULT 0,
    current_value REAL NOT NULL DEFAULT 0,
    month TEXT NOT NULL,
    year INTEGER NOT NULL,
    date_added TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_financial_entries_user ON financial_entries(user_id);
CREATE INDEX IF NOT EXISTS idx_sessions_user ON sessions(user_id);
"""


class DatabaseConnection:
    """Thread-safe sqlite connection manager, one connection per thread.

    ``":memory:"`` is opened as a named shared-cache database so every
    thread sees the same schema; an anchor connection keeps it alive.
    """

    def __init__(self, db_path: str = "assets_manager.db", timeout: float = 30.0, foreign_keys: bool = True):
        self.db_path = db_path
        self.timeout = timeout
        self.foreign_keys = foreign_keys
        self._lock = threading.Lock()
        self._connections: Dict[int, sqlite3.Connection] = {}
        self._uri = db_path == ":memory:"
        if self._uri:
            self.db_path = f"file:assets_manager_{uuid.uuid4().hex}?mode=memory&cache=shared"
        self._anchor = self._connect() if self._uri else None

    @staticmethod
    def _dict_factory(cursor, row):
        """Convert row to dictionary"""
        return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, check_same_thread=False, timeout=self.timeout, uri=self._uri)
        conn.row_factory = self._dict_factory
        if self.foreign_keys:
            conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get a database connection for the current thread.

        Commits when the block exits cleanly and rolls back on error.
        """
        thread_id = threading.get_ident()
        with self._lock:
            conn = self._connections.get(thread_id)
            if conn is None:
                conn = self._connections[thread_id] = self._connect()

        try:
            yield conn
        except Exception as e:
            conn.rollback()
            logger.error("Database error", error_type=type(e).__name__, operation="get_connection")
            raise
        else:
            conn.commit()

    def initialize_schema(self) -> None:
        """Create tables and indexes if they do not exist yet."""
        with self.get_connection() as conn:
            conn.executescript(SCHEMA)
        logger.info("Database schema ready", db_path=self.db_path, operation="initialize_schema")

    def close_all_connections(self) -> None:
        """Close all database connections."""
        with self._lock:
            for conn in self._connections.values():
                conn.close()
            self._connections.clear()
            if self._anchor is not None:
                self._anchor.close()
                self._anchor = None


class BaseRepository(ABC, Generic[T]):
    """Base repository class with common CRUD operations."""

    def __init__(self, db_connection: DatabaseConnection):
        self.db = db_connection
        self._table_name = self._get_table_name()

    @abstractmethod
    def _get_table_name(self) -> str:
        """Return the table name for this repository."""

    @abstractmethod
    def _row_to_model(self, row: Dict[str, Any]) -> T:
        """Convert database row to model instance."""

    @abstractmethod
    def _model_to_dict(self, model: T) -> Dict[str, Any]:
        """Convert model instance to dictionary for database storage."""

    def _insert(self, model: T) -> None:
        data = self._model_to_dict(model)
        columns = ", ".join(data.keys())
        placeholders = ", ".join("?" for _ in data)
        with self.db.get_connection() as conn:
            conn.execute(
                f"INSERT INTO {self._table_name} ({columns}) VALUES ({placeholders})",
                list(data.values()),
            )

    def _update(self, model: T, key: str = "id") -> bool:
        data = self._model_to_dict(model)
        set_clause = ", ".join(f"{k} = ?" for k in data if k != key)
        values = [v for k, v in data.items() if k != key]
        values.append(data[key])
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE {self._table_name} SET {set_clause} WHERE {key} = ?",
                values,
            )
            return cursor.rowcount > 0

    def find_by_id(self, id: str) -> Optional[T]:
        """Find entity by ID."""
        rows = self.execute_query(f"SELECT * FROM {self._table_name} WHERE id = ?", (id,))
        return self._row_to_model(rows[0]) if rows else None

    def delete(self, id: str) -> bool:
        """Delete entity by ID."""
        with self.db.get_connection() as conn:
            cursor = conn.execute(f"DELETE FROM {self._table_name} WHERE id = ?", (id,))
            return cursor.rowcount > 0

    def execute_query(self, query: str, params: tuple = ()) -> List[Dict[str, Any]]:
        """Execute custom query and return rows."""
        with self.db.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return cursor.fetchall()
