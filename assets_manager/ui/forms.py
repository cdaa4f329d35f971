"""
Form input layer: raw form strings to a validated ``EntryCreate`` or to
the changes for an edit.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from ..models.base import MAX_AMOUNT
from ..models.category import Category, Month
from ..models.entry import EntryCreate
from ..utils.text_utils import sanitize_text
from .formatters import CURRENCY_SYMBOL

# EntryCreate field -> form field carrying it
_FIELD_FOR = {
    "description": "title",
    "category": "category",
    "cash": "actual_cash",
    "investment": "invested_cash",
    "current_value": "current_value",
    "month": "month",
    "year": "year",
}


@dataclass
class ParticularForm:
    """Raw values as typed into the Add Particulars form."""

    title: str = ""
    category: str = ""
    actual_cash: str = ""
    invested_cash: str = ""
    current_value: str = ""
    month: str = ""
    year: str = ""


@dataclass
class FormResult:
    payload: Optional[EntryCreate] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.payload is not None and not self.errors


def parse_amount(raw: Optional[str]) -> Optional[float]:
    """Parse a typed amount ("1,25,000", "₹500"); ``None`` if blank or invalid."""
    if raw is None:
        return None
    cleaned = str(raw).replace(CURRENCY_SYMBOL, "").replace(",", "").strip()
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def _amount_error(raw: str, label: str) -> Optional[str]:
    value = parse_amount(raw)
    if value is None:
        return f"Valid {label} amount is required"
    if value < 0:
        return f"{label.capitalize()} amount cannot be negative"
    if value >= MAX_AMOUNT:
        return f"{label.capitalize()} amount is too large"
    return None


def _parse_holding(
    category: Category,
    actual_cash: str,
    invested_cash: str,
    current_value: str,
    errors: Dict[str, str],
) -> Tuple[float, float, Optional[float]]:
    """Amounts for the bucket the category uses; problems go into ``errors``."""
    cash = investment = 0.0
    value: Optional[float] = None
    if category.is_liquid:
        error = _amount_error(actual_cash, "actual cash")
        if error:
            errors["actual_cash"] = error
        else:
            cash = parse_amount(actual_cash)
            if cash == 0:
                errors["actual_cash"] = "Actual cash must be greater than zero"
        return cash, investment, value

    error = _amount_error(invested_cash, "invested cash")
    if error:
        errors["invested_cash"] = error
    else:
        investment = parse_amount(invested_cash)
        if investment == 0:
            errors["invested_cash"] = "Invested cash must be greater than zero"
    if (current_value or "").strip():
        error = _amount_error(current_value, "current value")
        if error:
            errors["current_value"] = error
        else:
            value = parse_amount(current_value)
    return cash, investment, value


def build_entry(form: ParticularForm) -> FormResult:
    """Validate a form and build the entry to submit.

    Liquid categories submit only the actual cash (invested cash is dropped);
    invested categories submit only the invested amount and optional current
    value. ``amount`` is whichever of the two applies.
    """
    errors: Dict[str, str] = {}

    title = sanitize_text(form.title or "")
    if not title:
        errors["title"] = "Title is required"

    category: Optional[Category] = None
    if not (form.category or "").strip():
        errors["category"] = "Category is required"
    else:
        try:
            category = Category.parse(form.category)
        except ValueError:
            errors["category"] = "Unknown category"

    cash = investment = 0.0
    current_value: Optional[float] = None
    if category is not None:
        cash, investment, current_value = _parse_holding(
            category, form.actual_cash, form.invested_cash, form.current_value, errors
        )

    month: Optional[Month] = None
    if (form.month or "").strip():
        try:
            month = Month.parse(form.month)
        except ValueError:
            errors["month"] = "Unknown month"

    year: Optional[int] = None
    if (form.year or "").strip():
        try:
            year = int(form.year.strip())
        except ValueError:
            errors["year"] = "Year must be a whole number"

    if errors:
        return FormResult(errors=errors)

    try:
        payload = EntryCreate(
            category=category,
            description=title,
            amount=cash if category.is_liquid else investment,
            cash=cash,
            investment=investment,
            current_value=current_value,
            month=month,
            year=year,
        )
    except PydanticValidationError as e:
        for error in e.errors():
            name = str(error["loc"][0]) if error.get("loc") else "form"
            message = str(error.get("msg", "Invalid value")).replace("Value error, ", "", 1)
            errors.setdefault(_FIELD_FOR.get(name, name), message)
        return FormResult(errors=errors)
    return FormResult(payload=payload)


def build_amount_changes(
    category: Category, amount: str, current_value: str = ""
) -> Tuple[Dict[str, Any], Dict[str, str]]:
    """Changes for editing an existing particular's holding, and field errors.

    A blank current value leaves the stored one as it is.
    """
    errors: Dict[str, str] = {}
    if category.is_liquid:
        cash, _, _ = _parse_holding(category, amount, "", "", errors)
        return ({} if errors else {"cash": cash}), errors

    _, investment, value = _parse_holding(category, "", amount, current_value, errors)
    if errors:
        return {}, errors
    changes: Dict[str, Any] = {"investment": investment}
    if value is not None:
        changes["current_value"] = value
    return changes, errors
