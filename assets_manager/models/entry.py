"""
Financial entry ("particular") domain models with Pydantic v2.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, Optional, Tuple

from pydantic import BeforeValidator, Field, field_validator, model_validator

from ..utils.text_utils import sanitize_text
from .base import BaseModel, MAX_AMOUNT, utc_now
from .category import Category, Month
from .period import PeriodKey

MIN_YEAR = 1900
MAX_YEAR = 2100


def _parse_category(value: Any) -> Any:
    if isinstance(value, Category):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Category is required")
    if len(value.strip()) > 50:
        raise ValueError("Category must be at most 50 characters")
    return Category.parse(sanitize_text(value))


def _parse_month(value: Any) -> Any:
    if isinstance(value, Month):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Month.from_number(value)
    return Month.parse(str(value))


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; true/false must not pass as amounts
    if isinstance(value, bool):
        raise ValueError("Amount must be numeric")
    return value


# Type aliases
CategoryField = Annotated[Category, BeforeValidator(_parse_category)]
MonthField = Annotated[Month, BeforeValidator(_parse_month)]
Money = Annotated[float, BeforeValidator(_reject_bool), Field(ge=0, lt=MAX_AMOUNT)]
PositiveMoney = Annotated[float, BeforeValidator(_reject_bool), Field(gt=0, lt=MAX_AMOUNT)]
Year = Annotated[int, Field(ge=MIN_YEAR, le=MAX_YEAR)]
MonthNumber = Annotated[int, Field(ge=1, le=12)]


def normalize_amounts(
    category: Category,
    cash: float,
    investment: float,
    current_value: Optional[float],
) -> Tuple[float, float, float]:
    """Apply the liquid/invested invariants to a set of amounts.

    Liquid categories keep only cash, and their current value mirrors it.
    Invested categories drop cash; a missing current value defaults to the
    invested amount.
    """
    if category.is_liquid:
        return float(cash), 0.0, float(cash)
    value = investment if current_value is None else current_value
    return 0.0, float(investment), float(value)


class FinancialEntry(BaseModel):
    """A persisted financial particular."""

    model_config = BaseModel.model_config.copy()
    model_config.update(
        json_schema_extra={
            "example": {
                "id": "4f7c2a5e-8d1b-4a8e-9a51-0c6b2e9d1f00",
                "user_id": "0b7d6f7e-2c1a-4a52-8d1c-3f5b9a2e7c11",
                "category": "Mutual Fund",
                "description": "Index Fund SIP",
                "amount": 50000.0,
                "cash": 0.0,
                "investment": 50000.0,
                "current_value": 56250.0,
                "month": "March",
                "year": 2024,
                "date_added": "2024-03-05T10:30:00Z",
            }
        }
    )

    id: str
    user_id: str
    category: CategoryField
    description: Optional[str] = None
    amount: float = Field(default=0.0, ge=0)
    cash: Money = 0.0
    investment: Money = 0.0
    current_value: Money = 0.0
    month: MonthField
    year: Year
    date_added: datetime = Field(default_factory=utc_now)

    @property
    def period(self) -> PeriodKey:
        return PeriodKey(self.month, self.year)

    @property
    def is_liquid(self) -> bool:
        return self.category.is_liquid

    @property
    def title(self) -> str:
        """Display title; falls back to the category name."""
        return self.description or self.category.value


class EntryCreate(BaseModel):
    """Payload for creating an entry.

    ``month``/``year`` default to the current month when omitted;
    ``month_number`` may be sent instead of a month name.
    """

    category: CategoryField
    description: Optional[str] = Field(default=None, max_length=200)
    amount: PositiveMoney
    cash: Money = 0.0
    investment: Money = 0.0
    current_value: Optional[Money] = None
    month: Optional[MonthField] = None
    month_number: Optional[MonthNumber] = None
    year: Optional[Year] = None

    @field_validator("description")
    @classmethod
    def clean_description(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_text(v) or None

    @model_validator(mode="after")
    def apply_invariants(self) -> "EntryCreate":
        now = utc_now()
        if self.month is None:
            self.month = Month.from_number(self.month_number or now.month)
        if self.year is None:
            self.year = now.year
        # an amount-only payload lands in the bucket its category uses
        if self.category.is_liquid and "cash" not in self.model_fields_set:
            self.cash = self.amount
        elif not self.category.is_liquid and "investment" not in self.model_fields_set:
            self.investment = self.amount
        self.cash, self.investment, self.current_value = normalize_amounts(
            self.category, self.cash, self.investment, self.current_value
        )
        return self

    @property
    def period(self) -> PeriodKey:
        return PeriodKey(self.month, self.year)

    def to_record(self) -> Dict[str, Any]:
        """Fields persisted by the store (no id/user/timestamp)."""
        return self.model_dump(exclude={"month_number"})


class EntryUpdate(BaseModel):
    """Partial update; only explicitly supplied fields are applied."""

    category: Optional[CategoryField] = None
    description: Optional[str] = Field(default=None, max_length=200)
    amount: Optional[PositiveMoney] = None
    cash: Optional[Money] = None
    investment: Optional[Money] = None
    current_value: Optional[Money] = None
    month: Optional[MonthField] = None
    month_number: Optional[MonthNumber] = None
    year: Optional[Year] = None

    @field_validator("description")
    @classmethod
    def clean_description(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_text(v) or None

    def changes(self) -> Dict[str, Any]:
        """Explicitly supplied fields, with ``month_number`` folded into ``month``.

        ``description`` may be cleared with an explicit null; every other
        null is treated as "not supplied".
        """
        data = {
            key: getattr(self, key)
            for key in self.model_fields_set
            if getattr(self, key) is not None or key == "description"
        }
        month_number = data.pop("month_number", None)
        if month_number is not None and "month" not in data:
            data["month"] = Month.from_number(month_number)
        return data

    def apply_to(self, entry: FinancialEntry) -> FinancialEntry:
        """Merge into an existing entry and re-apply the category invariants."""
        changes = self.changes()
        merged = entry.model_copy(update=changes)

        cash, investment = merged.cash, merged.investment
        current_value: Optional[float] = merged.current_value
        if entry.is_liquid and not merged.is_liquid:
            # switching buckets carries the held amount over unless replaced
            if "investment" not in changes:
                investment = entry.cash
            if "current_value" not in changes:
                current_value = None
        elif not entry.is_liquid and merged.is_liquid and "cash" not in changes:
            cash = entry.investment
        cash, investment, current_value = normalize_amounts(merged.category, cash, investment, current_value)

        amount = merged.amount
        if "amount" not in changes and {"cash", "investment", "category"} & changes.keys():
            amount = (cash + investment) or merged.amount

        return merged.model_copy(
            update={
                "cash": cash,
                "investment": investment,
                "current_value": current_value,
                "amount": amount,
            }
        )
