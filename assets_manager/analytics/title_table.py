"""
Latest-month particulars table: rows, gain/loss and the sorting contract.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from ..models.analytics import TitleRow
from ..models.entry import FinancialEntry
from ..models.period import PeriodKey
from .periods import entries_in_period, select_periods


class SortColumn(str, Enum):
    TITLE = "title"
    CATEGORY = "category"
    CASH = "cash"
    INVESTMENT = "investment"
    CURRENT_VALUE = "current_value"
    GAIN_LOSS = "gain_loss"


@dataclass(frozen=True)
class TableSort:
    """Active sort column and direction.

    Selecting the active column flips the direction; selecting another
    column starts ascending.
    """

    column: SortColumn = SortColumn.TITLE
    ascending: bool = True

    def toggle(self, column: SortColumn) -> "TableSort":
        column = SortColumn(column)
        if column == self.column:
            return TableSort(column, not self.ascending)
        return TableSort(column, True)


def gain_loss(entry: FinancialEntry) -> float:
    """Current value minus investment for invested holdings, the cash itself otherwise."""
    if entry.cash == 0:
        return entry.current_value - entry.investment
    return entry.cash


def _tie_breaker(row: TitleRow) -> Tuple[str, str, str]:
    return (row.title.lower(), row.category.value, row.id)


def _sort_key(column: SortColumn, row: TitleRow) -> Tuple[Any, ...]:
    if column == SortColumn.TITLE:
        primary: Any = row.title.lower()
    elif column == SortColumn.CATEGORY:
        primary = row.category.value
    else:
        primary = getattr(row, column.value)
    return (primary,) + _tie_breaker(row)


def sort_rows(rows: Iterable[TitleRow], sort: Optional[TableSort] = None) -> List[TitleRow]:
    """Sort rows; the descending order is the exact reverse of the ascending one."""
    sort = sort or TableSort()
    return sorted(rows, key=lambda row: _sort_key(sort.column, row), reverse=not sort.ascending)


def build_title_rows(entries: Iterable[FinancialEntry], period: Optional[PeriodKey] = None) -> List[TitleRow]:
    """One row per entry of the given month (the latest month by default)."""
    entries = list(entries)
    period = period or select_periods(entries).latest
    if period is None:
        return []
    rows = [
        TitleRow(
            id=entry.id,
            title=entry.title,
            category=entry.category,
            cash=entry.cash,
            investment=entry.investment,
            current_value=entry.current_value,
            gain_loss=gain_loss(entry),
        )
        for entry in entries_in_period(entries, period)
    ]
    return sort_rows(rows)
