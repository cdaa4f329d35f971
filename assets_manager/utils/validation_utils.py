"""
Validation utility functions for account and profile fields.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from ..exceptions import ValidationError

MIN_PASSWORD_LENGTH = 12
PASSWORD_HELP = (
    f"At least {MIN_PASSWORD_LENGTH} characters with uppercase, lowercase, number and special character"
)
SPECIAL_CHARACTERS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
NAME_PATTERN = re.compile(r"^[A-Za-z ]+$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


@dataclass
class PasswordStrength:
    """Password meter result: one point per satisfied check."""

    score: int
    label: str
    missing: List[str] = field(default_factory=list)

    @property
    def is_acceptable(self) -> bool:
        return not self.missing


class ValidationUtils:
    """Utility functions for data validation."""

    @staticmethod
    def validate_email_address(email: str) -> tuple[bool, Optional[str]]:
        """Validate email address format."""
        try:
            validate_email((email or "").strip(), check_deliverability=False)
            return True, None
        except EmailNotValidError as e:
            return False, str(e)

    @staticmethod
    def password_strength(password: str) -> PasswordStrength:
        """Score a password from 0 to 5 and label it Weak/Fair/Good/Strong."""
        password = password or ""
        checks = {
            f"at least {MIN_PASSWORD_LENGTH} characters": len(password) >= MIN_PASSWORD_LENGTH,
            "a lowercase letter": bool(re.search(r"[a-z]", password)),
            "an uppercase letter": bool(re.search(r"[A-Z]", password)),
            "a number": bool(re.search(r"\d", password)),
            "a special character": bool(SPECIAL_CHARACTERS.search(password)),
        }
        score = sum(checks.values())
        if not password:
            label = ""
        elif score <= 2:
            label = "Weak"
        elif score == 3:
            label = "Fair"
        elif score == 4:
            label = "Good"
        else:
            label = "Strong"
        return PasswordStrength(
            score=score,
            label=label,
            missing=[name for name, passed in checks.items() if not passed],
        )

    @staticmethod
    def validate_password_strength(password: str) -> tuple[bool, List[str]]:
        """Validate password strength and return issues."""
        strength = ValidationUtils.password_strength(password)
        return strength.is_acceptable, [f"Password must contain {m}" for m in strength.missing]

    @staticmethod
    def validate_name(name: str) -> tuple[bool, Optional[str]]:
        cleaned = (name or "").strip()
        if not 2 <= len(cleaned) <= 50:
            return False, "Name must be between 2 and 50 characters"
        if not NAME_PATTERN.match(cleaned):
            return False, "Name may only contain letters and spaces"
        return True, None

    @staticmethod
    def validate_username(username: str) -> tuple[bool, Optional[str]]:
        cleaned = (username or "").strip()
        if not 3 <= len(cleaned) <= 30:
            return False, "Username must be between 3 and 30 characters"
        if not USERNAME_PATTERN.match(cleaned):
            return False, "Username may only contain letters, numbers and underscores"
        if cleaned.startswith("_") or cleaned.endswith("_") or "__" in cleaned:
            return False, "Username cannot start or end with an underscore or contain '__'"
        return True, None


def require_email(email: str) -> str:
    email = (email or "").strip()
    valid, message = ValidationUtils.validate_email_address(email)
    if not valid:
        raise ValidationError(message or "Invalid email address", field="email")
    return email.lower()


def require_strong_password(password: str) -> str:
    valid, issues = ValidationUtils.validate_password_strength(password)
    if not valid:
        raise ValidationError(issues[0], field="password")
    return password


def require_name(name: str) -> str:
    valid, message = ValidationUtils.validate_name(name)
    if not valid:
        raise ValidationError(message, field="name")
    return " ".join(name.split())


def require_username(username: str) -> str:
    valid, message = ValidationUtils.validate_username(username)
    if not valid:
        raise ValidationError(message, field="username")
    return username.strip()
