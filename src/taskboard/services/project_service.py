"""Project service - ownership and hierarchy rules for projects."""

from src.taskboard.core.errors import (
    HasChildrenError,
    InvalidHierarchyError,
    NotFoundError,
    PersistenceError,
)
from src.taskboard.core.logging import get_logger
from src.taskboard.models import DEFAULT_PROJECT_COLOR, Project, utc_now
from src.taskboard.repositories.filters import UNSET, Unset
from src.taskboard.repositories.protocols import ProjectStore
from src.taskboard.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Project operations, all scoped to the acting user.

    A project owned by someone else is reported exactly like a missing one.

    Args:
        project_repo: Project persistence
        default_color: Color for projects created without one
        detect_cycles: Also reject reparenting a project under one of its
            descendants. When False only direct self-parenting is rejected.
    """

    def __init__(
        self,
        project_repo: ProjectStore,
        default_color: str = DEFAULT_PROJECT_COLOR,
        detect_cycles: bool = False,
    ):
        self.project_repo = project_repo
        self.default_color = default_color
        self.detect_cycles = detect_cycles

    async def get_project(self, project_id: int, user_id: int) -> Project | None:
        """Get a live project owned by ``user_id``, or None."""
        projects = await self.project_repo.find(project_id=project_id, user_id=user_id)
        return projects[0] if projects else None

    async def require_project(
        self, project_id: int, user_id: int, detail: str = "Project not found"
    ) -> Project:
        """Get a live project owned by ``user_id`` or raise NotFoundError."""
        project = await self.get_project(project_id, user_id)
        if project is None:
            raise NotFoundError(detail)
        return project

    async def list_projects(
        self, user_id: int, parent_project_id: int | None | Unset = UNSET
    ) -> list[Project]:
        """List the user's live projects.

        Args:
            user_id: Owner
            parent_project_id: None for root projects only, an id for the
                direct children of that project, omitted for all projects
        """
        return await self.project_repo.find(user_id=user_id, parent_project_id=parent_project_id)

    async def list_child_projects(self, parent_id: int, user_id: int) -> list[Project]:
        """List direct children after checking the parent is visible to the user."""
        await self.require_project(parent_id, user_id, "Parent project not found")
        return await self.project_repo.find_children(parent_id)

    async def create_project(self, user_id: int, data: ProjectCreate) -> Project:
        """Create a project owned by ``user_id``.

        Raises:
            NotFoundError: If the parent project does not resolve for the user
        """
        if data.parent_project_id is not None:
            await self.require_project(data.parent_project_id, user_id, "Parent project not found")
            await self.project_repo.lock(data.parent_project_id)

        now = utc_now()
        project = Project(
            user_id=user_id,
            parent_project_id=data.parent_project_id,
            name=data.name,
            description=data.description,
            color=data.color or self.default_color,
            depth=data.depth,
            created_at=now,
            updated_at=now,
        )
        project = await self.project_repo.create(project)

        logger.info(
            "Project created",
            project_id=project.id,
            user_id=user_id,
            parent_project_id=project.parent_project_id,
        )
        return project

    async def update_project(self, project_id: int, data: ProjectUpdate, user_id: int) -> Project:
        """Update the provided fields of a project.

        Raises:
            NotFoundError: If the project or the new parent does not resolve
            InvalidHierarchyError: If the project would become its own parent
                (or, with cycle detection, its own ancestor)
            PersistenceError: If the update affected no row
        """
        project = await self.require_project(project_id, user_id)
        changes = data.changes()

        new_parent_id = changes.get("parent_project_id")
        if new_parent_id is not None:
            if new_parent_id == project_id:
                raise InvalidHierarchyError("Project cannot be its own parent")
            new_parent = await self.require_project(
                new_parent_id, user_id, "Parent project not found"
            )
            await self.project_repo.lock(new_parent_id)
            if self.detect_cycles:
                await self._ensure_not_ancestor(project_id, new_parent)

        if not changes:
            return project

        updated = await self.project_repo.update(project_id, {**changes, "updated_at": utc_now()})
        if updated is None:
            raise PersistenceError("Failed to update project")

        logger.info("Project updated", project_id=project_id, fields=sorted(changes))
        return updated

    async def delete_project(self, project_id: int, user_id: int) -> None:
        """Soft-delete a project that has no live children.

        Raises:
            NotFoundError: If the project does not resolve for the user
            HasChildrenError: If any live child project exists
        """
        await self.require_project(project_id, user_id)
        # Held until commit; blocks concurrent child creation under this project
        await self.project_repo.lock(project_id)

        if await self.project_repo.has_children(project_id):
            raise HasChildrenError()

        if not await self.project_repo.soft_delete(project_id, utc_now()):
            raise PersistenceError("Failed to delete project")

        logger.info("Project deleted", project_id=project_id, user_id=user_id)

    async def _ensure_not_ancestor(self, project_id: int, new_parent: Project) -> None:
        """Walk up from ``new_parent`` and fail if ``project_id`` is on the chain."""
        seen: set[int] = set()
        current: Project | None = new_parent
        while current is not None and current.parent_project_id is not None:
            if current.parent_project_id == project_id:
                raise InvalidHierarchyError("Project cannot be moved under its own descendant")
            if current.parent_project_id in seen:
                break
            seen.add(current.parent_project_id)
            current = await self.project_repo.get_by_id(current.parent_project_id)
