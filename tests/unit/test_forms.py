"""
Unit tests for the Add Particulars form layer
"""

import pytest

from assets_manager.models.category import Category, Month
from assets_manager.ui.forms import ParticularForm, build_amount_changes, build_entry, parse_amount


class TestParseAmount:
    @pytest.mark.parametrize(
        "raw,expected",
        [("1,25,000", 125000.0), ("₹500", 500.0), (" 12.5 ", 12.5), ("", None), ("abc", None), (None, None)],
    )
    def test_parse_amount(self, raw, expected):
        assert parse_amount(raw) == expected


class TestBuildEntry:
    def test_liquid_category_ignores_invested_cash(self):
        result = build_entry(
            ParticularForm(
                title="Salary account",
                category="Bank Account",
                actual_cash="1000",
                invested_cash="500",
                month="March",
                year="2024",
            )
        )
        assert result.is_valid
        assert result.payload.category == Category.BANK_ACCOUNT
        assert result.payload.cash == 1000
        assert result.payload.investment == 0
        assert result.payload.amount == 1000
        assert result.payload.month == Month.MARCH

    def test_invested_category(self):
        result = build_entry(
            ParticularForm(title="Index fund", category="Mutual Fund", invested_cash="5,000", current_value="5600")
        )
        assert result.is_valid
        assert result.payload.investment == 5000
        assert result.payload.current_value == 5600
        assert result.payload.cash == 0

    def test_current_value_defaults_to_invested(self):
        result = build_entry(ParticularForm(title="Coins", category="Gold", invested_cash="800"))
        assert result.payload.current_value == 800

    def test_missing_fields_reported_per_field(self):
        result = build_entry(ParticularForm())
        assert not result.is_valid
        assert set(result.errors) == {"title", "category"}

    def test_liquid_amount_required(self):
        result = build_entry(ParticularForm(title="Wallet", category="Cash in Hand", actual_cash="0"))
        assert result.errors == {"actual_cash": "Actual cash must be greater than zero"}

    def test_negative_invested_cash(self):
        result = build_entry(ParticularForm(title="Shares", category="Stocks", invested_cash="-5"))
        assert "invested_cash" in result.errors

    def test_bad_month_and_year(self):
        result = build_entry(
            ParticularForm(title="Shares", category="Stocks", invested_cash="5", month="Smarch", year="twenty")
        )
        assert set(result.errors) == {"month", "year"}

    def test_year_out_of_range_maps_to_form_field(self):
        result = build_entry(ParticularForm(title="Shares", category="Stocks", invested_cash="5", year="1800"))
        assert "year" in result.errors


class TestBuildAmountChanges:
    def test_liquid_edit_sets_cash(self):
        changes, errors = build_amount_changes(Category.BANK_ACCOUNT, "₹2,500")
        assert errors == {}
        assert changes == {"cash": 2500.0}

    def test_invested_edit_with_current_value(self):
        changes, errors = build_amount_changes(Category.STOCKS, "1000", "1,250")
        assert errors == {}
        assert changes == {"investment": 1000.0, "current_value": 1250.0}

    def test_blank_current_value_is_left_alone(self):
        changes, _ = build_amount_changes(Category.GOLD, "800", "  ")
        assert "current_value" not in changes

    def test_errors_use_form_field_names(self):
        _, errors = build_amount_changes(Category.STOCKS, "abc", "-5")
        assert set(errors) == {"invested_cash", "current_value"}
        _, errors = build_amount_changes(Category.CASH_IN_HAND, "")
        assert set(errors) == {"actual_cash"}
