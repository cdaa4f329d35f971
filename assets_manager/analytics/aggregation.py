"""
Aggregation of dated entries into period totals, breakdowns and growth series.

Liquid totals sum ``cash`` and invested totals sum ``investment``; entry
normalization guarantees each entry contributes to exactly one of them.
"""

import math
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..models.analytics import (
    CategoryBreakdownItem,
    CategoryPerformance,
    DashboardSummary,
    GrowthPoint,
    PeriodTotals,
    TrendPoint,
)
from ..models.category import Category, Month
from ..models.entry import FinancialEntry
from ..models.period import PeriodKey
from .periods import entries_in_period, select_periods
from .title_table import build_title_rows

FRAME_COLUMNS = [
    "id",
    "title",
    "category",
    "is_liquid",
    "cash",
    "investment",
    "current_value",
    "amount",
    "month_number",
    "year",
]


def growth_percentage(current: float, previous: Optional[float]) -> float:
    """Percentage change from ``previous`` to ``current``.

    Returns 0 whenever ``previous`` is missing or not positive, so the
    result is never NaN or infinite.
    """
    if previous is None or previous <= 0:
        return 0.0
    value = ((current - previous) / previous) * 100
    return value if math.isfinite(value) else 0.0


def entries_frame(entries: Sequence[FinancialEntry]) -> pd.DataFrame:
    """One row per entry with the numeric columns used for grouping."""
    if not entries:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    return pd.DataFrame(
        [
            {
                "id": entry.id,
                "title": entry.title,
                "category": entry.category.value,
                "is_liquid": entry.is_liquid,
                "cash": float(entry.cash),
                "investment": float(entry.investment),
                "current_value": float(entry.current_value),
                "amount": float(entry.amount),
                "month_number": entry.month.number,
                "year": entry.year,
            }
            for entry in entries
        ],
        columns=FRAME_COLUMNS,
    )


def totals_by_period(entries: Sequence[FinancialEntry]) -> List[PeriodTotals]:
    """Summed totals for every period present, chronologically."""
    df = entries_frame(entries)
    if df.empty:
        return []
    grouped = (
        df.groupby(["year", "month_number"], sort=True)
        .agg(
            liquid=("cash", "sum"),
            invested=("investment", "sum"),
            current_value=("current_value", "sum"),
            entry_count=("id", "count"),
        )
        .reset_index()
    )
    return [
        PeriodTotals(
            period=PeriodKey(Month.from_number(int(row.month_number)), int(row.year)),
            liquid=float(row.liquid),
            invested=float(row.invested),
            current_value=float(row.current_value),
            entry_count=int(row.entry_count),
        )
        for row in grouped.itertuples(index=False)
    ]


def period_totals(entries: Sequence[FinancialEntry], period: PeriodKey) -> PeriodTotals:
    totals = totals_by_period(entries_in_period(entries, period))
    return totals[0] if totals else PeriodTotals(period=period)


def category_sums(entries: Sequence[FinancialEntry]) -> Dict[Category, Dict[str, float]]:
    df = entries_frame(entries)
    if df.empty:
        return {}
    sums = df.groupby("category")[["cash", "investment", "current_value"]].sum()
    return {
        Category(name): {column: float(value) for column, value in row.items()}
        for name, row in sums.iterrows()
    }


def category_breakdown(
    entries: Sequence[FinancialEntry], period: Optional[PeriodKey] = None
) -> List[CategoryBreakdownItem]:
    """Each category's share of a month's total (defaults to the latest month)."""
    period = period or select_periods(entries).latest
    if period is None:
        return []
    sums = category_sums(entries_in_period(entries, period))
    amounts = {category: s["cash"] + s["investment"] for category, s in sums.items()}
    total = sum(amounts.values())
    items = [
        CategoryBreakdownItem(
            category=category,
            amount=amount,
            share=(amount / total * 100) if total > 0 else 0.0,
        )
        for category, amount in amounts.items()
        if amount > 0
    ]
    return sorted(items, key=lambda item: (-item.amount, item.category.value))


def category_performance(
    entries: Sequence[FinancialEntry], period: Optional[PeriodKey] = None
) -> List[CategoryPerformance]:
    """Per-category holdings for a month with return on the invested amount."""
    period = period or select_periods(entries).latest
    if period is None:
        return []
    sums = category_sums(entries_in_period(entries, period))
    order = list(Category)
    return [
        CategoryPerformance(
            category=category,
            liquid=s["cash"],
            invested=s["investment"],
            current_value=s["current_value"],
            return_percentage=0.0
            if category.is_liquid
            else growth_percentage(s["current_value"], s["investment"]),
        )
        for category, s in sorted(sums.items(), key=lambda item: order.index(item[0]))
    ]


def trend(entries: Sequence[FinancialEntry]) -> List[TrendPoint]:
    """Liquid vs invested totals, one point per period present."""
    return [
        TrendPoint(period=t.period, liquid=t.liquid, invested=t.invested)
        for t in totals_by_period(entries)
    ]


def growth_series(points: Sequence[TrendPoint]) -> List[GrowthPoint]:
    """Month-over-month growth of total assets; the first point is 0."""
    if not points:
        return []
    totals = np.array([p.total for p in points], dtype=float)
    growth = np.zeros_like(totals)
    previous = totals[:-1]
    np.divide(
        (totals[1:] - previous) * 100,
        previous,
        out=growth[1:],
        where=previous > 0,
    )
    return [
        GrowthPoint(period=p.period, total=float(total), growth=float(g))
        for p, total, g in zip(points, totals, growth)
    ]


def build_dashboard_summary(entries: Sequence[FinancialEntry]) -> DashboardSummary:
    """Compute every dashboard figure from one list of entries."""
    entries = list(entries)
    if not entries:
        return DashboardSummary()

    by_period = {t.period: t for t in totals_by_period(entries)}
    selection = select_periods(entries)
    latest = by_period[selection.latest]
    previous = by_period.get(selection.previous) if selection.previous else None
    first = by_period[selection.first]
    points = trend(entries)

    return DashboardSummary(
        has_data=True,
        entry_count=len(entries),
        latest=latest,
        previous=previous,
        first=first,
        monthly_growth=growth_percentage(latest.total, previous.total if previous else None),
        liquid_growth=growth_percentage(latest.liquid, previous.liquid if previous else None),
        invested_growth=growth_percentage(latest.invested, previous.invested if previous else None),
        total_growth_amount=latest.total - first.total,
        total_growth_percentage=growth_percentage(latest.total, first.total),
        distribution=category_breakdown(entries, latest.period),
        performance=category_performance(entries, latest.period),
        trend=points,
        growth_series=growth_series(points),
        title_rows=build_title_rows(entries, latest.period),
    )
