"""Task schemas for API request/response and list filtering."""

from datetime import UTC, datetime
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

from src.taskboard.models.enums import TaskStatus


def _validate_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Task title cannot be empty or whitespace only")
    return v


def _to_naive_utc(v: datetime | None) -> datetime | None:
    """Timestamps are stored as naive UTC; convert aware values on the way in."""
    if v is not None and v.tzinfo is not None:
        return v.astimezone(UTC).replace(tzinfo=None)
    return v


class TaskCreate(BaseModel):
    """Schema for creating a task. The owner is the acting user."""

    project_id: int = Field(ge=1)
    parent_task_id: int | None = Field(default=None, ge=1)
    title: str = Field(min_length=1, max_length=500)
    description: str | None = None
    priority: int = 0
    due_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _validate_title(v)

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: datetime | None) -> datetime | None:
        return _to_naive_utc(v)


class TaskUpdate(BaseModel):
    """Schema for updating a task.

    ``status`` may be rewritten freely here; only the dedicated completion
    action refuses to complete a task twice.
    """

    model_config = {"use_enum_values": True}

    nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"parent_task_id", "description", "due_date"}
    )

    parent_task_id: int | None = Field(default=None, ge=1)
    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus | None = None
    priority: int | None = None
    due_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return _validate_title(v) if v is not None else v

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: datetime | None) -> datetime | None:
        return _to_naive_utc(v)

    def changes(self) -> dict[str, Any]:
        """Fields explicitly provided, with nulls kept only for nullable columns."""
        return {
            k: v
            for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None or k in self.nullable_fields
        }


class TaskFilters(BaseModel):
    """Filters and page window for listing a user's tasks.

    Every present filter narrows the result (logical AND). ``search`` matches
    title or description, case-insensitively. Without ``limit`` the whole
    filtered set is returned.
    """

    model_config = {"use_enum_values": True}

    project_id: int | None = Field(default=None, ge=1)
    status: TaskStatus | None = None
    due_before: datetime | None = Field(default=None, description="Inclusive upper bound")
    search: str | None = Field(default=None, max_length=200)
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    include_deleted: bool = False

    @field_validator("search")
    @classmethod
    def validate_search(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v

    @field_validator("due_before")
    @classmethod
    def validate_due_before(cls, v: datetime | None) -> datetime | None:
        return _to_naive_utc(v)

    def without_window(self) -> "TaskFilters":
        """Same predicate with page/limit removed (for counting)."""
        return self.model_copy(update={"page": None, "limit": None})


class TaskRead(BaseModel):
    """Schema for reading a task."""

    id: int
    user_id: int
    project_id: int
    parent_task_id: int | None
    title: str
    description: str | None
    status: TaskStatus
    priority: int
    due_date: datetime | None
    completed_at: datetime | None
    path: str | None
    depth: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    model_config = {"from_attributes": True}
