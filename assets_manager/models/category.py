"""
Category and month enumerations.
"""

from enum import Enum


class Category(str, Enum):
    """Closed set of particular categories.

    Liquid categories are cash-like: only the cash balance matters. All other
    categories are investments with an invested amount and a separately
    tracked current value.
    """

    BANK_ACCOUNT = "Bank Account"
    CASH_IN_HAND = "Cash in Hand"
    RECURRING_DEPOSIT = "Recurring Deposit"
    PROVIDENT_FUND = "Provident Fund"
    FIXED_DEPOSIT = "Fixed Deposit"
    MUTUAL_FUND = "Mutual Fund"
    STOCKS = "Stocks"
    REAL_ESTATE = "Real Estate"
    GOLD = "Gold"
    CRYPTO_CURRENCY = "Crypto Currency"
    BONDS = "Bonds"
    OTHER = "Other"

    @property
    def is_liquid(self) -> bool:
        return self in _LIQUID_CATEGORIES

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Resolve a category from its display name, case-insensitively."""
        cleaned = (value or "").strip()
        for category in cls:
            if category.value.lower() == cleaned.lower() or category.name.lower() == cleaned.lower():
                return category
        raise ValueError(f"Unknown category: {value!r}")

    @classmethod
    def get_color(cls, category: "Category") -> str:
        """Get a consistent color for each category."""
        colors = {
            cls.BANK_ACCOUNT: "#4e79a7",
            cls.CASH_IN_HAND: "#59a14f",
            cls.RECURRING_DEPOSIT: "#76b7b2",
            cls.PROVIDENT_FUND: "#edc948",
            cls.FIXED_DEPOSIT: "#f28e2b",
            cls.MUTUAL_FUND: "#e15759",
            cls.STOCKS: "#b07aa1",
            cls.REAL_ESTATE: "#9c755f",
            cls.GOLD: "#d4a017",
            cls.CRYPTO_CURRENCY: "#ff9da7",
            cls.BONDS: "#86bcb6",
            cls.OTHER: "#bab0ac",
        }
        return colors.get(category, "#999999")


_LIQUID_CATEGORIES = frozenset(
    {
        Category.BANK_ACCOUNT,
        Category.CASH_IN_HAND,
        Category.RECURRING_DEPOSIT,
        Category.PROVIDENT_FUND,
    }
)


class Month(str, Enum):
    """Canonical month names; ``number`` gives January=1 ... December=12."""

    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    @property
    def number(self) -> int:
        return _MONTH_ORDER.index(self) + 1

    @property
    def short_name(self) -> str:
        return self.value[:3]

    @classmethod
    def from_number(cls, number: int) -> "Month":
        if not 1 <= number <= 12:
            raise ValueError("Month number must be between 1 and 12")
        return _MONTH_ORDER[number - 1]

    @classmethod
    def parse(cls, value: str) -> "Month":
        """Accept full or three-letter month names in any case."""
        cleaned = (value or "").strip().lower()
        for month in cls:
            if cleaned in (month.value.lower(), month.short_name.lower()):
                return month
        raise ValueError(f"Unknown month: {value!r}")


_MONTH_ORDER = list(Month)
