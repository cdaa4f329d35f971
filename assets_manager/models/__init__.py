"""
Domain Models

This module contains the core domain entities and value objects
for the AssetsManager application.
"""

# Base models
from .base import BaseModel, FieldConfig, ResponseModel, MAX_AMOUNT

# Core domain models
from .category import Category, Month
from .period import PeriodKey
from .entry import EntryCreate, EntryUpdate, FinancialEntry, normalize_amounts
from .user import AuthSession, ProfileUpdate, SignInRequest, SignUpRequest, UserAccount, UserProfile
from .analytics import (
    CategoryBreakdownItem,
    CategoryPerformance,
    ComparisonResult,
    ComparisonRow,
    DashboardSummary,
    GrowthPoint,
    PeriodTotals,
    StoreStats,
    TitleRow,
    TrendPoint,
)

__all__ = [
    # Base models
    "BaseModel",
    "FieldConfig",
    "ResponseModel",
    "MAX_AMOUNT",

    # Entry models
    "Category",
    "Month",
    "PeriodKey",
    "FinancialEntry",
    "EntryCreate",
    "EntryUpdate",
    "normalize_amounts",

    # User models
    "UserAccount",
    "UserProfile",
    "SignUpRequest",
    "SignInRequest",
    "ProfileUpdate",
    "AuthSession",

    # Analytics models
    "PeriodTotals",
    "CategoryBreakdownItem",
    "CategoryPerformance",
    "TrendPoint",
    "GrowthPoint",
    "TitleRow",
    "DashboardSummary",
    "ComparisonRow",
    "ComparisonResult",
    "StoreStats",
]
