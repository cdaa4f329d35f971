"""
Chart builders for data visualization.

Builders return plotly figures so pages decide where to render them.
"""

from typing import Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from ..models.analytics import CategoryBreakdownItem, ComparisonResult, GrowthPoint, TrendPoint
from ..models.category import Category
from .formatters import short_period_label

LIQUID_COLOR = "#4e79a7"
INVESTED_COLOR = "#f28e2b"


def assets_vs_investments_chart(points: Sequence[TrendPoint], height: int = 400) -> go.Figure:
    """Grouped bars of liquid assets vs investments per period."""
    labels = [short_period_label(p.period) for p in points]
    fig = go.Figure()
    fig.add_trace(go.Bar(x=labels, y=[p.liquid for p in points], name="Assets", marker_color=LIQUID_COLOR))
    fig.add_trace(go.Bar(x=labels, y=[p.invested for p in points], name="Investments", marker_color=INVESTED_COLOR))
    fig.update_layout(
        title="Assets vs Investments",
        barmode="group",
        height=height,
        xaxis_title="Period",
        yaxis_title="Amount (₹)",
    )
    return fig


def growth_line_chart(points: Sequence[GrowthPoint], height: int = 400) -> go.Figure:
    """Month-over-month growth of total assets."""
    df = pd.DataFrame(
        {
            "Period": [short_period_label(p.period) for p in points],
            "Growth": [p.growth for p in points],
        }
    )
    fig = px.line(df, x="Period", y="Growth", title="Monthly Growth", markers=True, height=height)
    fig.update_layout(yaxis_title="Growth (%)", showlegend=False)
    return fig


def distribution_pie_chart(items: Sequence[CategoryBreakdownItem], height: int = 400) -> go.Figure:
    """Share of each category in the month's total."""
    df = pd.DataFrame(
        {
            "Category": [item.category.value for item in items],
            "Amount": [item.amount for item in items],
        }
    )
    fig = px.pie(
        df,
        values="Amount",
        names="Category",
        title="Asset Distribution",
        height=height,
        color="Category",
        color_discrete_map={c.value: Category.get_color(c) for c in Category},
    )
    fig.update_traces(textposition="inside", textinfo="percent+label")
    return fig


def comparison_bar_chart(result: ComparisonResult, height: int = 400) -> go.Figure:
    """Per-category totals of two periods side by side."""
    categories = [row.category.value for row in result.rows]
    fig = go.Figure()
    fig.add_trace(
        go.Bar(x=categories, y=[row.base_total for row in result.rows], name=short_period_label(result.base))
    )
    fig.add_trace(
        go.Bar(x=categories, y=[row.target_total for row in result.rows], name=short_period_label(result.target))
    )
    fig.update_layout(title="Period Comparison", barmode="group", height=height, yaxis_title="Amount (₹)")
    return fig


def render_chart(fig: Optional[go.Figure], empty_message: str = "No data available for chart") -> None:
    """Display a figure, or an info box when there is nothing to plot."""
    if fig is None or not fig.data:
        st.info(empty_message)
        return
    st.plotly_chart(fig, use_container_width=True)
