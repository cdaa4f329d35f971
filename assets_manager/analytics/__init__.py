"""
Aggregation engine: pure functions over a user's list of entries.
"""

from .aggregation import (
    build_dashboard_summary,
    category_breakdown,
    category_performance,
    growth_percentage,
    growth_series,
    period_totals,
    totals_by_period,
    trend,
)
from .comparison import available_periods, compare_periods
from .periods import PeriodSelection, distinct_periods, select_periods
from .title_table import SortColumn, TableSort, build_title_rows, gain_loss, sort_rows

__all__ = [
    "build_dashboard_summary",
    "category_breakdown",
    "category_performance",
    "growth_percentage",
    "growth_series",
    "period_totals",
    "totals_by_period",
    "trend",
    "available_periods",
    "compare_periods",
    "PeriodSelection",
    "distinct_periods",
    "select_periods",
    "SortColumn",
    "TableSort",
    "build_title_rows",
    "gain_loss",
    "sort_rows",
]
