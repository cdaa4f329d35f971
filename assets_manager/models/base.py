"""
Base models and utilities for Pydantic v2.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(PydanticBaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class ResponseModel(BaseModel):
    """Envelope for API responses."""
    data: Optional[Any] = None
    message: Optional[str] = None

    @classmethod
    def success_response(cls, data: Any = None, message: str = "Operation successful") -> "ResponseModel":
        """Create a success response."""
        return cls(data=data, message=message)


# Common amount bounds shared by entries and the form layer
MAX_AMOUNT = 1_000_000_000


class FieldConfig:
    """Common field configurations for models."""

    @staticmethod
    def email(**kwargs) -> Any:
        """Email field configuration."""
        return Field(
            ...,
            pattern=r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$",
            max_length=254,
            description="A valid email address",
            json_schema_extra={"example": "user@example.com"},
            **kwargs
        )
