"""
User account, profile and session models.
"""

from datetime import datetime
from typing import Any, ClassVar, Dict, Optional

import bcrypt
from pydantic import Field, field_validator

from ..utils.text_utils import sanitize_text
from ..utils.validation_utils import (
    require_email,
    require_name,
    require_strong_password,
    require_username,
)
from .base import BaseModel, FieldConfig, utc_now


class UserAccount(BaseModel):
    """Credential record for a signed-up user.

    Attributes:
        id: Unique identifier (uuid string)
        email: Login email, stored lower-cased and unique
        password_hash: bcrypt hash, never serialized
        created_at: Timestamp when the account was created
    """

    model_config = BaseModel.model_config.copy()
    model_config.update(
        json_schema_extra={
            "example": {
                "id": "0b7d6f7e-2c1a-4a52-8d1c-3f5b9a2e7c11",
                "email": "asha@example.com",
                "created_at": "2024-01-01T00:00:00Z",
            }
        }
    )

    id: Optional[str] = None
    email: str = FieldConfig.email()
    password_hash: Optional[bytes] = Field(default=None, exclude=True)
    created_at: datetime = Field(default_factory=utc_now)

    _bcrypt_rounds: ClassVar[int] = 12

    @classmethod
    def create(cls, email: str, password: str, rounds: Optional[int] = None) -> "UserAccount":
        """Create a new account with a hashed password."""
        salt = bcrypt.gensalt(rounds=rounds or cls._bcrypt_rounds)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return cls(email=email.lower().strip(), password_hash=password_hash)

    def verify_password(self, password: str) -> bool:
        """Verify the provided password against the stored hash."""
        if not self.password_hash:
            return False
        hash_bytes = (
            self.password_hash.encode("utf-8")
            if isinstance(self.password_hash, str)
            else self.password_hash
        )
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hash_bytes)
        except (ValueError, TypeError):
            return False

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialize without the password hash."""
        return self.model_dump(mode="json", exclude={"password_hash"})


class UserProfile(BaseModel):
    """Public profile linked 1:1 to an account."""

    user_id: str
    name: str
    username: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class SignUpRequest(BaseModel):
    """Sign-up payload; every field is checked at the boundary."""

    model_config = BaseModel.model_config.copy()
    model_config.update(
        json_schema_extra={
            "example": {
                "email": "asha@example.com",
                "password": "Str0ng!Passw0rd",
                "name": "Asha Rao",
                "username": "asha_rao",
            }
        }
    )

    email: str
    password: str
    name: str
    username: str

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return require_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return require_strong_password(v)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return require_name(sanitize_text(v))

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        return require_username(sanitize_text(v))


class SignInRequest(BaseModel):
    """Credentials; strength rules are not re-checked on sign in."""

    email: str
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class ProfileUpdate(BaseModel):
    """Partial profile update: name and/or username."""

    name: Optional[str] = None
    username: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else require_name(sanitize_text(v))

    @field_validator("username")
    @classmethod
    def check_username(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else require_username(sanitize_text(v))

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class AuthSession(BaseModel):
    """Bearer session handed out on sign in."""

    access_token: str
    token_type: str = "bearer"
    user_id: str
    expires_at: datetime
