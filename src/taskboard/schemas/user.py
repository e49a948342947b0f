"""User schemas for API request/response."""

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Emails are case-sensitive keys; only the shape is checked, nothing is normalized.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _validate_email(v: str) -> str:
    v = v.strip()
    if not EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email address")
    return v


def _validate_display_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Display name cannot be empty or whitespace only")
    return v


class UserCreate(BaseModel):
    """Schema for creating (or restoring) a user."""

    email: str = Field(min_length=3, max_length=255)
    display_name: str = Field(min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)

    @field_validator("display_name")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        return _validate_display_name(v)


class UserUpdate(BaseModel):
    """Schema for updating a user."""

    email: str | None = Field(default=None, min_length=3, max_length=255)
    display_name: str | None = Field(default=None, min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return _validate_email(v) if v is not None else v

    @field_validator("display_name")
    @classmethod
    def validate_display_name(cls, v: str | None) -> str | None:
        return _validate_display_name(v) if v is not None else v

    def changes(self) -> dict[str, Any]:
        """Fields explicitly provided; both columns are required, so nulls are dropped."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class UserRead(BaseModel):
    """Schema for reading a user."""

    id: int
    email: str
    display_name: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    model_config = {"from_attributes": True}
