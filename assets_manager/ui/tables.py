"""
Table frames for the particulars and performance tables.
"""

from typing import Callable, Dict, Sequence

import pandas as pd

from ..models.analytics import CategoryPerformance, ComparisonRow, TitleRow
from .formatters import format_currency, format_percentage

TITLE_COLUMNS = ["Title", "Category", "Cash", "Investment", "Current Value", "Gain/Loss", "Status"]


def _prepare_dataframe(df: pd.DataFrame, formatters: Dict[str, Callable]) -> pd.DataFrame:
    """Apply column formatters to a copy of the frame."""
    if df.empty:
        return df
    display_df = df.copy()
    for column, formatter in formatters.items():
        if column in display_df.columns:
            display_df[column] = display_df[column].apply(formatter)
    return display_df


def title_table_frame(rows: Sequence[TitleRow], formatted: bool = True) -> pd.DataFrame:
    """Rows in the given order, indexed by entry id."""
    df = pd.DataFrame(
        [
            {
                "id": row.id,
                "Title": row.title,
                "Category": row.category.value,
                "Cash": row.cash,
                "Investment": row.investment,
                "Current Value": row.current_value,
                "Gain/Loss": row.gain_loss,
                "Status": "Profit" if row.is_profit else "Loss",
            }
            for row in rows
        ],
        columns=["id"] + TITLE_COLUMNS,
    ).set_index("id")
    if not formatted:
        return df
    money = {name: format_currency for name in ("Cash", "Investment", "Current Value", "Gain/Loss")}
    return _prepare_dataframe(df, money)


def performance_frame(rows: Sequence[CategoryPerformance]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "Category": row.category.value,
                "Liquid": row.liquid,
                "Invested": row.invested,
                "Current Value": row.current_value,
                "Return": row.return_percentage,
            }
            for row in rows
        ],
        columns=["Category", "Liquid", "Invested", "Current Value", "Return"],
    )
    formatters = {name: format_currency for name in ("Liquid", "Invested", "Current Value")}
    formatters["Return"] = format_percentage
    return _prepare_dataframe(df, formatters)


def comparison_frame(rows: Sequence[ComparisonRow], base_label: str, target_label: str) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "Category": row.category.value,
                base_label: row.base_total,
                target_label: row.target_total,
                "Change": row.change,
                "Growth": row.growth,
            }
            for row in rows
        ],
        columns=["Category", base_label, target_label, "Change", "Growth"],
    )
    formatters = {name: format_currency for name in (base_label, target_label, "Change")}
    formatters["Growth"] = format_percentage
    return _prepare_dataframe(df, formatters)
