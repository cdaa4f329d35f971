"""
Unit tests for the sqlite connection manager
"""

import threading

from assets_manager.repositories.base import DatabaseConnection


class TestDatabaseConnection:
    """Test per-thread connections"""

    def test_file_database_commits_across_threads(self, tmp_path):
        db = DatabaseConnection(str(tmp_path / "shared.db"))
        db.initialize_schema()
        with db.get_connection() as conn:
            conn.execute("INSERT INTO users (id, email, password_hash, created_at) VALUES ('u1', 'a@b.co', 'x', 'now')")

        seen = []
        worker = threading.Thread(target=lambda: seen.extend(self._user_ids(db)))
        worker.start()
        worker.join()
        assert seen == ["u1"]
        db.close_all_connections()

    def test_memory_database_is_shared_between_threads(self):
        db = DatabaseConnection(":memory:")
        db.initialize_schema()
        with db.get_connection() as conn:
            conn.execute("INSERT INTO users (id, email, password_hash, created_at) VALUES ('u1', 'a@b.co', 'x', 'now')")

        seen = []
        worker = threading.Thread(target=lambda: seen.extend(self._user_ids(db)))
        worker.start()
        worker.join()
        assert seen == ["u1"]
        db.close_all_connections()

    def test_memory_databases_are_isolated(self):
        first = DatabaseConnection(":memory:")
        second = DatabaseConnection(":memory:")
        first.initialize_schema()
        second.initialize_schema()
        with first.get_connection() as conn:
            conn.execute("INSERT INTO users (id, email, password_hash, created_at) VALUES ('u1', 'a@b.co', 'x', 'now')")
        assert self._user_ids(second) == []
        first.close_all_connections()
        second.close_all_connections()

    @staticmethod
    def _user_ids(db):
        with db.get_connection() as conn:
            return [row["id"] for row in conn.execute("SELECT id FROM users").fetchall()]
