"""
Month/year period keys with canonical chronological ordering.
"""

from dataclasses import dataclass
from functools import total_ordering

from .category import Month


@total_ordering
@dataclass(frozen=True)
class PeriodKey:
    """A ``(month, year)`` bucket ordered by year, then canonical month number."""

    month: Month
    year: int

    @property
    def ordinal(self) -> int:
        return self.year * 12 + self.month.number

    @property
    def label(self) -> str:
        """Long label, e.g. ``January-2026``."""
        return f"{self.month.value}-{self.year}"

    @property
    def short_label(self) -> str:
        """Short label, e.g. ``Jan-2026``."""
        return f"{self.month.short_name}-{self.year}"

    @classmethod
    def parse(cls, label: str) -> "PeriodKey":
        """Parse ``January-2026`` / ``Jan-2026`` style labels."""
        month_part, sep, year_part = (label or "").strip().rpartition("-")
        if not sep or not year_part.isdigit():
            raise ValueError(f"Invalid period label: {label!r}")
        return cls(Month.parse(month_part), int(year_part))

    def __lt__(self, other: "PeriodKey") -> bool:
        if not isinstance(other, PeriodKey):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __str__(self) -> str:
        return self.label
