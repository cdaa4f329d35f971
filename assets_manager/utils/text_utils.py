"""
Text helpers for free-text fields.
"""

import re
from typing import Optional

UNSAFE_CHARACTERS = re.compile(r"[<>\"']")


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """Strip ``<>"'`` and surrounding whitespace from user supplied text."""
    if value is None:
        return None
    return UNSAFE_CHARACTERS.sub("", value).strip()

