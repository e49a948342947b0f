"""Project schemas for API request/response."""

import re
from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


def _validate_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Project name cannot be empty or whitespace only")
    return v


def _validate_color(v: str) -> str:
    if not COLOR_PATTERN.fullmatch(v):
        raise ValueError("Color must be a hex string like '#808080'")
    return v


def _normalize_description(v: str | None) -> str | None:
    if v is not None:
        v = v.strip()
        if not v:
            return None
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project. The owner is the acting user."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None)
    color: str | None = Field(default=None, description="Hex color, defaults to mid-gray")
    parent_project_id: int | None = Field(default=None, ge=1)
    depth: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _normalize_description(v)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        return _validate_color(v) if v is not None else v


class ProjectUpdate(BaseModel):
    """Schema for updating a project.

    Only fields present in the request are written. An explicit
    ``parent_project_id: null`` moves the project to the root.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description", "parent_project_id"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None)
    color: str | None = Field(default=None)
    parent_project_id: int | None = Field(default=None, ge=1)
    depth: int | None = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return _validate_name(v) if v is not None else v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _normalize_description(v)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        return _validate_color(v) if v is not None else v

    def changes(self) -> dict[str, Any]:
        """Fields explicitly provided, with nulls kept only for nullable columns."""
        return {
            k: v
            for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None or k in self.nullable_fields
        }


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    user_id: int
    parent_project_id: int | None
    name: str
    description: str | None
    color: str
    path: str | None
    depth: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    model_config = {"from_attributes": True}
