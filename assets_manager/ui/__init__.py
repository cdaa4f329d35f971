"""
Presentation adapters and view controllers for the Streamlit pages.
"""

from .controllers import (
    ActionResult,
    AuthController,
    ComparisonController,
    DashboardController,
    ParticularsController,
    SettingsController,
    StatisticsController,
    ViewContext,
    ViewState,
)
from .forms import FormResult, ParticularForm, build_entry, parse_amount
from .formatters import CURRENCY_SYMBOL, format_currency, format_percentage, short_period_label

__all__ = [
    "ActionResult",
    "AuthController",
    "ComparisonController",
    "DashboardController",
    "ParticularsController",
    "SettingsController",
    "StatisticsController",
    "ViewContext",
    "ViewState",
    "FormResult",
    "ParticularForm",
    "build_entry",
    "parse_amount",
    "CURRENCY_SYMBOL",
    "format_currency",
    "format_percentage",
    "short_period_label",
]
