"""
Financial entry repository. Every query is scoped by the owning user id.
"""

from datetime import datetime
from typing import Dict, List, Optional

from ..models.entry import FinancialEntry
from .base import BaseRepository


class EntryRepository(BaseRepository[FinancialEntry]):
    """Repository for FinancialEntry entities."""

    def _get_table_name(self) -> str:
        return "financial_entries"

    def _row_to_model(self, row: dict) -> FinancialEntry:
        return FinancialEntry(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            category=row["category"],
            description=row.get("description"),
            amount=row.get("amount") or 0.0,
            cash=row.get("cash") or 0.0,
            investment=row.get("investment") or 0.0,
            current_value=row.get("current_value") or 0.0,
            month=row["month"],
            year=row["year"],
            date_added=datetime.fromisoformat(row["date_added"]),
        )

    def _model_to_dict(self, model: FinancialEntry) -> dict:
        return {
            "id": model.id,
            "user_id": model.user_id,
            "category": model.category.value,
            "description": model.description,
            "amount": float(model.amount),
            "cash": float(model.cash),
            "investment": float(model.investment),
            "current_value": float(model.current_value),
            "month": model.month.value,
            "year": model.year,
            "date_added": model.date_added.isoformat(),
        }

    def add(self, entry: FinancialEntry) -> FinancialEntry:
        self._insert(entry)
        return entry

    def replace(self, entry: FinancialEntry) -> bool:
        """Overwrite an existing entry; ownership is checked in the WHERE clause."""
        data = self._model_to_dict(entry)
        columns = [k for k in data if k not in ("id", "user_id")]
        set_clause = ", ".join(f"{k} = ?" for k in columns)
        values = [data[k] for k in columns] + [entry.id, entry.user_id]
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE {self._table_name} SET {set_clause} WHERE id = ? AND user_id = ?",
                values,
            )
            return cursor.rowcount > 0

    def find_for_user(self, user_id: str) -> List[FinancialEntry]:
        rows = self.execute_query(
            f"SELECT * FROM {self._table_name} WHERE user_id = ? ORDER BY date_added DESC",
            (user_id,),
        )
        return [self._row_to_model(row) for row in rows]

    def find_owned(self, entry_id: str, user_id: str) -> Optional[FinancialEntry]:
        rows = self.execute_query(
            f"SELECT * FROM {self._table_name} WHERE id = ? AND user_id = ?",
            (entry_id, user_id),
        )
        return self._row_to_model(rows[0]) if rows else None

    def delete_owned(self, entry_id: str, user_id: str) -> bool:
        with self.db.get_connection() as conn:
            cursor = conn.execute(
                f"DELETE FROM {self._table_name} WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            )
            return cursor.rowcount > 0

    def delete_for_user(self, user_id: str) -> int:
        """Remove every entry of a user; returns the number of rows deleted."""
        with self.db.get_connection() as conn:
            cursor = conn.execute(f"DELETE FROM {self._table_name} WHERE user_id = ?", (user_id,))
            return cursor.rowcount

    def titles_for_user(self, user_id: str) -> List[str]:
        rows = self.execute_query(
            f"SELECT DISTINCT description FROM {self._table_name} "
            "WHERE user_id = ? AND description IS NOT NULL AND TRIM(description) != '' "
            "ORDER BY description",
            (user_id,),
        )
        return [row["description"] for row in rows]

    def amount_by_category(self, user_id: str) -> Dict[str, float]:
        rows = self.execute_query(
            f"SELECT category, SUM(amount) AS total FROM {self._table_name} "
            "WHERE user_id = ? GROUP BY category ORDER BY category",
            (user_id,),
        )
        return {row["category"]: float(row["total"] or 0.0) for row in rows}
