"""
Comparison of two periods, per category and overall.
"""

from typing import List, Optional, Sequence

from ..models.analytics import ComparisonResult, ComparisonRow
from ..models.category import Category
from ..models.entry import FinancialEntry
from ..models.period import PeriodKey
from .aggregation import category_sums, growth_percentage
from .periods import distinct_periods, entries_in_period


def available_periods(entries: Sequence[FinancialEntry]) -> List[PeriodKey]:
    """Periods that can be compared, newest first."""
    return list(reversed(distinct_periods(entries)))


def compare_periods(
    entries: Sequence[FinancialEntry], base: PeriodKey, target: PeriodKey
) -> ComparisonResult:
    """Compare ``target`` against ``base``.

    The best performer is the category with the highest growth among those
    present in both periods; ``None`` when no category qualifies.
    """
    base_sums = category_sums(entries_in_period(entries, base))
    target_sums = category_sums(entries_in_period(entries, target))

    rows = []
    for category in Category:
        if category not in base_sums and category not in target_sums:
            continue
        base_total = _total(base_sums.get(category))
        target_total = _total(target_sums.get(category))
        rows.append(
            ComparisonRow(
                category=category,
                base_total=base_total,
                target_total=target_total,
                growth=growth_percentage(target_total, base_total),
            )
        )

    base_total = sum(row.base_total for row in rows)
    target_total = sum(row.target_total for row in rows)
    candidates = [
        row for row in rows if row.category in base_sums and row.category in target_sums and row.base_total > 0
    ]
    best = max(candidates, key=lambda row: row.growth) if candidates else None

    return ComparisonResult(
        base=base,
        target=target,
        rows=rows,
        base_total=base_total,
        target_total=target_total,
        overall_growth=growth_percentage(target_total, base_total),
        best_performer=best,
    )


def _total(sums: Optional[dict]) -> float:
    if not sums:
        return 0.0
    return sums["cash"] + sums["investment"]
