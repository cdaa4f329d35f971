"""
Analytics result models produced by the aggregation engine.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .base import BaseModel
from .category import Category
from .period import PeriodKey


@dataclass(frozen=True)
class PeriodTotals:
    """Summed amounts of one ``(month, year)`` bucket."""

    period: PeriodKey
    liquid: float = 0.0
    invested: float = 0.0
    current_value: float = 0.0
    entry_count: int = 0

    @property
    def total(self) -> float:
        """Total assets: liquid cash plus invested amount."""
        return self.liquid + self.invested

    @property
    def label(self) -> str:
        return self.period.label


@dataclass(frozen=True)
class CategoryBreakdownItem:
    """A category's slice of a month's total."""

    category: Category
    amount: float
    share: float


@dataclass(frozen=True)
class CategoryPerformance:
    """Per-category holdings in one month and the return on investment."""

    category: Category
    liquid: float
    invested: float
    current_value: float
    return_percentage: float

    @property
    def gain(self) -> float:
        return self.current_value - self.invested if not self.category.is_liquid else 0.0


@dataclass(frozen=True)
class TrendPoint:
    period: PeriodKey
    liquid: float
    invested: float

    @property
    def total(self) -> float:
        return self.liquid + self.invested


@dataclass(frozen=True)
class GrowthPoint:
    period: PeriodKey
    total: float
    growth: float


@dataclass(frozen=True)
class TitleRow:
    """One latest-month entry as shown in the particulars table."""

    id: str
    title: str
    category: Category
    cash: float
    investment: float
    current_value: float
    gain_loss: float

    @property
    def is_profit(self) -> bool:
        return self.gain_loss >= 0


@dataclass
class DashboardSummary:
    """Everything the dashboard renders, computed from one list of entries."""

    has_data: bool = False
    entry_count: int = 0
    latest: Optional[PeriodTotals] = None
    previous: Optional[PeriodTotals] = None
    first: Optional[PeriodTotals] = None
    monthly_growth: float = 0.0
    liquid_growth: float = 0.0
    invested_growth: float = 0.0
    total_growth_amount: float = 0.0
    total_growth_percentage: float = 0.0
    distribution: List[CategoryBreakdownItem] = field(default_factory=list)
    performance: List[CategoryPerformance] = field(default_factory=list)
    trend: List[TrendPoint] = field(default_factory=list)
    growth_series: List[GrowthPoint] = field(default_factory=list)
    title_rows: List[TitleRow] = field(default_factory=list)


@dataclass(frozen=True)
class ComparisonRow:
    category: Category
    base_total: float
    target_total: float
    growth: float

    @property
    def change(self) -> float:
        return self.target_total - self.base_total


@dataclass
class ComparisonResult:
    """Comparison of a target period against a base period."""

    base: PeriodKey
    target: PeriodKey
    rows: List[ComparisonRow] = field(default_factory=list)
    base_total: float = 0.0
    target_total: float = 0.0
    overall_growth: float = 0.0
    best_performer: Optional[ComparisonRow] = None


class StoreStats(BaseModel):
    """Store-side statistics returned by ``/financial/stats``."""

    total_amount: float = 0.0
    total_entries: int = 0
    average_amount: float = 0.0
    category_breakdown: Dict[str, float] = {}
