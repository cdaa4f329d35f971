"""
Unit tests for the aggregation engine
"""

import math

import pytest

from assets_manager.analytics.aggregation import (
    build_dashboard_summary,
    category_breakdown,
    category_performance,
    growth_percentage,
    growth_series,
    period_totals,
    totals_by_period,
    trend,
)
from assets_manager.analytics.periods import select_periods
from assets_manager.models.analytics import TrendPoint
from assets_manager.models.category import Category, Month
from assets_manager.models.period import PeriodKey


class TestGrowthPercentage:
    def test_growth(self):
        assert growth_percentage(1200, 1000) == pytest.approx(20.0)
        assert growth_percentage(800, 1000) == pytest.approx(-20.0)

    @pytest.mark.parametrize("previous", [0, 0.0, -10, None])
    def test_non_positive_previous_is_zero(self, previous):
        assert growth_percentage(500, previous) == 0.0


class TestPeriodSelection:
    """Latest/previous/first come from chronology, not insertion order"""

    def test_insertion_order_is_ignored(self, make_entry):
        entries = [
            make_entry(month="March", year=2024, cash=300),
            make_entry(month="January", year=2025, cash=100),
            make_entry(month="December", year=2024, cash=200),
        ]
        selection = select_periods(entries)
        assert selection.latest == PeriodKey(Month.JANUARY, 2025)
        assert selection.previous == PeriodKey(Month.DECEMBER, 2024)
        assert selection.first == PeriodKey(Month.MARCH, 2024)

    def test_empty(self):
        assert select_periods([]).is_empty


class TestPeriodTotals:
    def test_liquid_and_invested_buckets(self, make_entry):
        entries = [
            make_entry(category="Bank Account", cash=1000),
            make_entry(category="Cash in Hand", cash=250),
            make_entry(category="Mutual Fund", investment=4000, current_value=4400),
            make_entry(category="Gold", investment=1000),
        ]
        totals = period_totals(entries, PeriodKey(Month.JANUARY, 2024))
        assert totals.liquid == 1250
        assert totals.invested == 5000
        assert totals.current_value == 1250 + 4400 + 1000
        assert totals.total == 6250
        assert totals.entry_count == 4

    def test_missing_period_is_zero(self, make_entry):
        totals = period_totals([make_entry(cash=10)], PeriodKey(Month.MAY, 2030))
        assert totals.total == 0
        assert totals.entry_count == 0

    def test_totals_by_period_is_chronological(self, make_entry):
        entries = [
            make_entry(month="February", cash=200),
            make_entry(month="January", cash=100),
            make_entry(month="January", category="Stocks", investment=50),
        ]
        totals = totals_by_period(entries)
        assert [t.period.month for t in totals] == [Month.JANUARY, Month.FEBRUARY]
        assert totals[0].total == 150


class TestDashboardSummary:
    def test_monthly_growth(self, make_entry):
        entries = [
            make_entry(month="February", cash=1200),
            make_entry(month="January", cash=1000),
        ]
        summary = build_dashboard_summary(entries)
        assert summary.has_data
        assert summary.latest.period == PeriodKey(Month.FEBRUARY, 2024)
        assert summary.previous.period == PeriodKey(Month.JANUARY, 2024)
        assert summary.monthly_growth == pytest.approx(20.0)
        assert summary.liquid_growth == pytest.approx(20.0)
        assert summary.invested_growth == 0.0
        assert summary.total_growth_amount == pytest.approx(200.0)

    def test_single_period_has_zero_growth(self, make_entry):
        summary = build_dashboard_summary([make_entry(cash=500)])
        assert summary.previous is None
        assert summary.monthly_growth == 0.0
        assert summary.total_growth_percentage == 0.0

    def test_zero_previous_month(self, make_entry):
        entries = [
            make_entry(month="January", category="Stocks", investment=100),
            make_entry(month="February", cash=500),
        ]
        summary = build_dashboard_summary(entries)
        assert summary.liquid_growth == 0.0
        assert not math.isnan(summary.monthly_growth)

    def test_empty_entries(self):
        summary = build_dashboard_summary([])
        assert not summary.has_data
        assert summary.latest is None
        assert summary.title_rows == []

    def test_title_rows_only_cover_latest_month(self, make_entry):
        entries = [
            make_entry(month="January", cash=100, description="Old"),
            make_entry(month="February", cash=200, description="New"),
        ]
        summary = build_dashboard_summary(entries)
        assert [row.title for row in summary.title_rows] == ["New"]


class TestBreakdownAndPerformance:
    def test_breakdown_shares(self, make_entry):
        entries = [
            make_entry(category="Bank Account", cash=750),
            make_entry(category="Stocks", investment=250, current_value=400),
        ]
        items = category_breakdown(entries)
        assert [item.category for item in items] == [Category.BANK_ACCOUNT, Category.STOCKS]
        assert items[0].share == pytest.approx(75.0)
        assert items[1].share == pytest.approx(25.0)

    def test_performance_return(self, make_entry):
        entries = [
            make_entry(category="Stocks", investment=1000, current_value=1250),
            make_entry(category="Bank Account", cash=300),
        ]
        rows = {row.category: row for row in category_performance(entries)}
        assert rows[Category.STOCKS].return_percentage == pytest.approx(25.0)
        assert rows[Category.STOCKS].gain == pytest.approx(250.0)
        assert rows[Category.BANK_ACCOUNT].return_percentage == 0.0


class TestTrend:
    def test_growth_series(self, make_entry):
        entries = [
            make_entry(month="January", cash=1000),
            make_entry(month="February", cash=1500),
            make_entry(month="March", cash=0.0, category="Stocks", investment=1500),
        ]
        points = trend(entries)
        assert [p.total for p in points] == [1000, 1500, 1500]
        series = growth_series(points)
        assert [round(g.growth, 2) for g in series] == [0.0, 50.0, 0.0]

    def test_growth_after_zero_total_is_zero(self):
        points = [
            TrendPoint(PeriodKey(Month.JANUARY, 2024), 0.0, 0.0),
            TrendPoint(PeriodKey(Month.FEBRUARY, 2024), 100.0, 0.0),
        ]
        assert [g.growth for g in growth_series(points)] == [0.0, 0.0]
