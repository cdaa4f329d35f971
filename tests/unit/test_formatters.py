"""
Unit tests for display formatting and table frames
"""

import math

import pytest

from assets_manager.analytics.aggregation import category_breakdown, trend
from assets_manager.analytics.title_table import build_title_rows
from assets_manager.models.category import Month
from assets_manager.models.period import PeriodKey
from assets_manager.ui.charts import assets_vs_investments_chart, distribution_pie_chart
from assets_manager.ui.formatters import format_currency, format_percentage, short_period_label
from assets_manager.ui.tables import TITLE_COLUMNS, title_table_frame


class TestFormatters:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "₹0.00"),
            (999, "₹999.00"),
            (1000, "₹1,000.00"),
            (125000, "₹1,25,000.00"),
            (12345678.5, "₹1,23,45,678.50"),
            (-1500, "-₹1,500.00"),
            (None, "₹0.00"),
            (math.nan, "₹0.00"),
        ],
    )
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(20, "+20.00%"), (-3.5, "-3.50%"), (0, "0.00%"), (0.001, "0.00%"), (math.inf, "0.00%")],
    )
    def test_format_percentage(self, value, expected):
        assert format_percentage(value) == expected

    def test_short_period_label(self):
        assert short_period_label("January-2026") == "Jan-2026"
        assert short_period_label(PeriodKey(Month.MAY, 2024)) == "May-2024"
        assert short_period_label("whenever") == "whenever"


class TestTablesAndCharts:
    def test_title_table_frame(self, make_entry):
        rows = build_title_rows([make_entry(category="Stocks", investment=1000, current_value=900, entry_id="x")])
        df = title_table_frame(rows)
        assert list(df.columns) == TITLE_COLUMNS
        assert df.loc["x", "Gain/Loss"] == "-₹100.00"
        assert df.loc["x", "Status"] == "Loss"

    def test_empty_title_table(self):
        assert title_table_frame([]).empty

    def test_chart_builders(self, make_entry):
        entries = [make_entry(cash=100), make_entry(category="Gold", investment=50)]
        fig = assets_vs_investments_chart(trend(entries))
        assert len(fig.data) == 2
        pie = distribution_pie_chart(category_breakdown(entries))
        assert len(pie.data) == 1
