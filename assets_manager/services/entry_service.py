"""
Financial entry service: CRUD, store statistics and titles.
"""

import uuid
from typing import List

from ..exceptions import NotFoundError
from ..models.analytics import StoreStats
from ..models.base import utc_now
from ..models.entry import EntryCreate, EntryUpdate, FinancialEntry
from ..repositories.entry_repository import EntryRepository
from ..utils.structured_logging import get_logger

logger = get_logger(__name__)


class EntryService:
    """Entry operations scoped to the calling user."""

    def __init__(self, entries: EntryRepository):
        self.entries = entries

    def list_entries(self, user_id: str) -> List[FinancialEntry]:
        return self.entries.find_for_user(user_id)

    def get_entry(self, user_id: str, entry_id: str) -> FinancialEntry:
        entry = self.entries.find_owned(entry_id, user_id)
        if entry is None:
            raise NotFoundError("Financial particular not found", field="id")
        return entry

    def create_entry(self, user_id: str, payload: EntryCreate) -> FinancialEntry:
        entry = FinancialEntry(
            id=str(uuid.uuid4()),
            user_id=user_id,
            date_added=utc_now(),
            **payload.to_record(),
        )
        self.entries.add(entry)
        logger.info(
            "Financial particular created",
            user_id=user_id,
            entry_id=entry.id,
            category=entry.category.value,
            operation="create_entry",
        )
        return entry

    def update_entry(self, user_id: str, entry_id: str, payload: EntryUpdate) -> FinancialEntry:
        """Apply a partial update; entries owned by someone else look missing."""
        existing = self.get_entry(user_id, entry_id)
        updated = payload.apply_to(existing)
        if not self.entries.replace(updated):
            raise NotFoundError("Financial particular not found", field="id")
        logger.info(
            "Financial particular updated",
            user_id=user_id,
            entry_id=entry_id,
            fields=sorted(payload.changes()),
            operation="update_entry",
        )
        return updated

    def delete_entry(self, user_id: str, entry_id: str) -> bool:
        """Idempotent delete; returns whether a row was removed."""
        deleted = self.entries.delete_owned(entry_id, user_id)
        logger.info(
            "Financial particular deleted",
            user_id=user_id,
            entry_id=entry_id,
            deleted=deleted,
            operation="delete_entry",
        )
        return deleted

    def clear_all(self, user_id: str) -> int:
        removed = self.entries.delete_for_user(user_id)
        logger.info("Financial data cleared", user_id=user_id, removed=removed, operation="clear_all")
        return removed

    def stats(self, user_id: str) -> StoreStats:
        entries = self.entries.find_for_user(user_id)
        total = sum(e.amount for e in entries)
        return StoreStats(
            total_amount=total,
            total_entries=len(entries),
            average_amount=total / len(entries) if entries else 0.0,
            category_breakdown=self.entries.amount_by_category(user_id),
        )

    def titles(self, user_id: str) -> List[str]:
        return self.entries.titles_for_user(user_id)
