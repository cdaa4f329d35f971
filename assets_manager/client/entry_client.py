"""
Entry store client: particulars CRUD, statistics, titles and the combined
dashboard fetch.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from ..models.analytics import StoreStats
from ..models.entry import EntryCreate, EntryUpdate, FinancialEntry
from .store_client import StoreClient, validate_payload


@dataclass
class DashboardData:
    """Result of the concurrent stats + list fetch."""

    stats: StoreStats
    entries: List[FinancialEntry]


class EntryStoreClient(StoreClient):
    """Client for ``/financial`` endpoints."""

    def list(self) -> List[FinancialEntry]:
        """All entries of the caller; order is not meaningful."""
        return [FinancialEntry.model_validate(item) for item in self._data("GET", "/financial/all") or []]

    def get(self, entry_id: str) -> FinancialEntry:
        return FinancialEntry.model_validate(self._data("GET", f"/financial/{entry_id}"))

    def create(self, entry: Union[EntryCreate, Dict[str, Any]]) -> FinancialEntry:
        """Create an entry; category and a positive amount are checked before sending."""
        payload = validate_payload(EntryCreate, entry)
        body = payload.model_dump(mode="json", exclude_none=True, exclude={"month_number"})
        return FinancialEntry.model_validate(self._data("POST", "/financial", json=body))

    def update(self, entry_id: str, partial: Union[EntryUpdate, Dict[str, Any]]) -> FinancialEntry:
        payload = validate_payload(EntryUpdate, partial)
        body = payload.model_dump(mode="json", exclude_unset=True)
        return FinancialEntry.model_validate(self._data("PUT", f"/financial/{entry_id}", json=body))

    def delete(self, entry_id: str) -> bool:
        """Idempotent; returns whether the store removed a row."""
        data = self._data("DELETE", f"/financial/{entry_id}") or {}
        return bool(data.get("deleted"))

    def clear_all(self) -> int:
        data = self._data("DELETE", "/financial/clear-all") or {}
        return int(data.get("deleted", 0))

    def stats(self) -> StoreStats:
        return StoreStats.model_validate(self._data("GET", "/financial/stats") or {})

    def titles(self) -> List[str]:
        return list(self._data("GET", "/financial/titles") or [])

    def fetch_dashboard_data(self) -> DashboardData:
        """Fetch stats and the entry list concurrently.

        Returns only after both calls resolve; if either raises, the whole
        call raises.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            stats_future = executor.submit(self.stats)
            entries_future = executor.submit(self.list)
            stats = stats_future.result()
            entries = entries_future.result()
        return DashboardData(stats=stats, entries=entries)
