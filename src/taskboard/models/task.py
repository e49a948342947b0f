"""Task model - hierarchical within a project."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.taskboard.models.base import utc_now
from src.taskboard.models.enums import TaskStatus


class Task(SQLModel, table=True):
    """Task entity.

    completed_at is set iff status is completed.
    """

    __tablename__ = "tasks"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    parent_task_id: int | None = Field(default=None, foreign_key="tasks.id", index=True)
    title: str = Field(max_length=500)
    description: str | None = Field(default=None)
    status: str = Field(default=TaskStatus.PENDING.value, max_length=50)
    priority: int = Field(default=0)
    due_date: datetime | None = Field(default=None)
    completed_at: datetime | None = Field(default=None)
    path: str | None = Field(default=None)
    depth: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: datetime | None = Field(default=None)

    @property
    def status_enum(self) -> TaskStatus:
        """Get status as TaskStatus enum."""
        return TaskStatus(self.status)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED.value

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
