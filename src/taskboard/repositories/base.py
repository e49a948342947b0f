"""Base repository with common CRUD and soft-delete operations."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only: no ownership or hierarchy rules,
    and no transaction control. Writes are flushed so generated ids and
    RETURNING rows are available; committing is done by the caller that
    owns the session.

    ``model`` must declare ``id`` and ``deleted_at`` columns.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: int, include_deleted: bool = False) -> ModelType | None:
        """Get a record by its primary key, skipping soft-deleted rows by default."""
        query = select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        if not include_deleted:
            query = query.where(self.model.deleted_at.is_(None))  # type: ignore[attr-defined]
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def create(self, entity: ModelType) -> ModelType:
        """Insert entity and return it with its generated id."""
        self.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, id: int, values: dict[str, Any]) -> ModelType | None:
        """Write ``values`` to the row with ``id``.

        Returns:
            The updated entity, or None if no row matched.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .values(**values)
            .returning(self.model)
        )
        result = await self.session.scalars(stmt, execution_options={"populate_existing": True})
        return result.one_or_none()

    async def soft_delete(self, id: int, deleted_at: datetime) -> bool:
        """Mark a live row as deleted.

        Returns:
            True if a live row was marked, False otherwise.
        """
        stmt = (
            update(self.model)
            .where(
                self.model.id == id,  # type: ignore[attr-defined]
                self.model.deleted_at.is_(None),  # type: ignore[attr-defined]
            )
            .values(deleted_at=deleted_at, updated_at=deleted_at)
            .returning(self.model.id)  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
