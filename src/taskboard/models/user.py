"""User model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.taskboard.models.base import utc_now


class User(SQLModel, table=True):
    """Account that owns projects and tasks.

    The unique index on email covers soft-deleted rows too, so a deleted
    account is restored rather than duplicated when the email signs up again.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    display_name: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: datetime | None = Field(default=None)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
