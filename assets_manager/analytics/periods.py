"""
Period selection over a flat list of entries.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models.entry import FinancialEntry
from ..models.period import PeriodKey


@dataclass(frozen=True)
class PeriodSelection:
    """Latest, immediately preceding and first-ever periods present in the data."""

    latest: Optional[PeriodKey] = None
    previous: Optional[PeriodKey] = None
    first: Optional[PeriodKey] = None

    @property
    def is_empty(self) -> bool:
        return self.latest is None


def distinct_periods(entries: Iterable[FinancialEntry]) -> List[PeriodKey]:
    """Distinct ``(month, year)`` keys in chronological order, never insertion order."""
    return sorted({entry.period for entry in entries})


def select_periods(entries: Iterable[FinancialEntry]) -> PeriodSelection:
    periods = distinct_periods(entries)
    if not periods:
        return PeriodSelection()
    return PeriodSelection(
        latest=periods[-1],
        previous=periods[-2] if len(periods) > 1 else None,
        first=periods[0],
    )


def entries_in_period(entries: Iterable[FinancialEntry], period: PeriodKey) -> List[FinancialEntry]:
    return [entry for entry in entries if entry.period == period]
