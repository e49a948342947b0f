"""Repository for Project entity."""

from sqlalchemy import and_
from sqlmodel import select

from src.taskboard.models import Project
from src.taskboard.repositories.base import BaseRepository
from src.taskboard.repositories.filters import UNSET, Unset, creation_order, project_conditions


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity. Reads exclude soft-deleted rows."""

    model = Project

    async def find(
        self,
        project_id: int | None = None,
        user_id: int | None = None,
        parent_project_id: int | None | Unset = UNSET,
    ) -> list[Project]:
        """Find live projects by equality filters.

        Args:
            project_id: Restrict to a single id
            user_id: Restrict to an owner
            parent_project_id: None for roots, an id for direct children,
                or UNSET for no parent filter

        Returns:
            Matching projects in creation order
        """
        conditions = project_conditions(project_id, user_id, parent_project_id)
        query = creation_order(select(Project).where(and_(*conditions)), Project)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_children(self, project_id: int) -> list[Project]:
        """Get live direct children of a project."""
        return await self.find(parent_project_id=project_id)

    async def has_children(self, project_id: int) -> bool:
        """Check whether a project has at least one live child."""
        conditions = project_conditions(parent_project_id=project_id)
        result = await self.session.execute(
            select(Project.id).where(and_(*conditions)).limit(1)
        )
        return result.first() is not None

    async def lock(self, project_id: int) -> None:
        """Lock a project row until the transaction ends.

        Creating a child and checking for children both lock the parent row
        first, so the two cannot interleave. SQLite renders no FOR UPDATE and
        serializes writers by itself.
        """
        await self.session.execute(
            select(Project.id).where(Project.id == project_id).with_for_update()  # type: ignore[arg-type]
        )
