"""Project model - hierarchical, owned by a user."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.taskboard.models.base import utc_now

DEFAULT_PROJECT_COLOR = "#808080"


class Project(SQLModel, table=True):
    """Project entity.

    Note: depth and path are stored as given; nothing recomputes them when
    the hierarchy changes.
    """

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    parent_project_id: int | None = Field(default=None, foreign_key="projects.id", index=True)
    name: str = Field(max_length=255)
    description: str | None = Field(default=None)
    color: str = Field(default=DEFAULT_PROJECT_COLOR, max_length=7)
    path: str | None = Field(default=None)
    depth: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: datetime | None = Field(default=None)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
