"""
Display formatting for amounts, percentages and period labels.
"""

import math
from typing import Optional, Union

from ..models.period import PeriodKey

CURRENCY_SYMBOL = "₹"


def _indian_grouping(integer_digits: str) -> str:
    """Group digits as 12,34,567: the last three, then pairs."""
    if len(integer_digits) <= 3:
        return integer_digits
    head, tail = integer_digits[:-3], integer_digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: Optional[float], symbol: str = CURRENCY_SYMBOL) -> str:
    """Format as rupees with Indian digit grouping, e.g. ``₹12,50,000.00``."""
    if amount is None or not math.isfinite(amount):
        amount = 0.0
    rounded = round(float(amount), 2)
    sign = "-" if rounded < 0 else ""
    integer_part, _, fraction = f"{abs(rounded):.2f}".partition(".")
    return f"{sign}{symbol}{_indian_grouping(integer_part)}.{fraction}"


def format_percentage(value: Optional[float]) -> str:
    """Signed percentage with two decimals: ``+20.00%``, ``-3.50%``, ``0.00%``."""
    if value is None or not math.isfinite(value):
        value = 0.0
    rounded = round(float(value), 2)
    if rounded == 0:
        return "0.00%"
    return f"{rounded:+.2f}%"


def short_period_label(label: Union[str, PeriodKey]) -> str:
    """``January-2026`` to ``Jan-2026``; unparseable labels are returned unchanged."""
    if isinstance(label, PeriodKey):
        return label.short_label
    try:
        return PeriodKey.parse(label).short_label
    except ValueError:
        return label
