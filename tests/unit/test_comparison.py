"""
Unit tests for period comparison
"""

import pytest

from assets_manager.analytics.comparison import available_periods, compare_periods
from assets_manager.models.category import Category, Month
from assets_manager.models.period import PeriodKey

JAN = PeriodKey(Month.JANUARY, 2024)
FEB = PeriodKey(Month.FEBRUARY, 2024)


@pytest.fixture
def entries(make_entry):
    return [
        make_entry(month="January", category="Bank Account", cash=1000),
        make_entry(month="January", category="Stocks", investment=1000, current_value=1100),
        make_entry(month="January", category="Gold", investment=500),
        make_entry(month="February", category="Bank Account", cash=1100),
        make_entry(month="February", category="Stocks", investment=1500, current_value=1400),
        make_entry(month="February", category="Crypto Currency", investment=200),
    ]


class TestComparison:
    def test_available_periods_newest_first(self, entries):
        assert available_periods(entries) == [FEB, JAN]

    def test_rows_and_totals(self, entries):
        result = compare_periods(entries, JAN, FEB)
        rows = {row.category: row for row in result.rows}
        assert rows[Category.BANK_ACCOUNT].growth == pytest.approx(10.0)
        assert rows[Category.STOCKS].growth == pytest.approx(50.0)
        assert rows[Category.GOLD].target_total == 0
        assert rows[Category.CRYPTO_CURRENCY].base_total == 0
        assert rows[Category.CRYPTO_CURRENCY].growth == 0.0
        assert result.base_total == 2500
        assert result.target_total == 2800
        assert result.overall_growth == pytest.approx(12.0)

    def test_best_performer_requires_both_periods(self, entries):
        result = compare_periods(entries, JAN, FEB)
        assert result.best_performer.category == Category.STOCKS

    def test_no_common_category(self, make_entry):
        entries = [
            make_entry(month="January", category="Gold", investment=100),
            make_entry(month="February", category="Bonds", investment=100),
        ]
        assert compare_periods(entries, JAN, FEB).best_performer is None
