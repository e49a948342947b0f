"""Repository for User entity."""

from datetime import datetime
from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import select

from src.taskboard.models import User
from src.taskboard.repositories.base import BaseRepository

_UPSERT_INSERTS: dict[str, Any] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_by_email(self, email: str, include_deleted: bool = False) -> User | None:
        """Get user by email address (exact, case-sensitive match)."""
        query = select(User).where(User.email == email)
        if not include_deleted:
            query = query.where(User.deleted_at.is_(None))  # type: ignore[union-attr]
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def upsert_restoring(self, email: str, display_name: str, now: datetime) -> User | None:
        """Insert a user, or restore the soft-deleted row holding ``email``.

        Runs as one INSERT ... ON CONFLICT (email) DO UPDATE statement whose
        update only fires when the existing row is soft-deleted, so there is
        no window between the lookup and the write.

        Returns:
            The inserted or restored user, or None if ``email`` belongs to a
            live user.

        Raises:
            ValueError: If the session is bound to a dialect without
                INSERT ... ON CONFLICT support
        """
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise ValueError(f"User upsert is not supported on the {dialect} dialect")

        stmt = insert(User).values(
            email=email,
            display_name=display_name,
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["email"],
            set_={
                "display_name": stmt.excluded.display_name,
                "updated_at": now,
                "deleted_at": None,
            },
            where=User.deleted_at.is_not(None),  # type: ignore[union-attr]
        ).returning(User)

        result = await self.session.scalars(stmt, execution_options={"populate_existing": True})
        return result.one_or_none()
