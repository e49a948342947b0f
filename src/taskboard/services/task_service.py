"""Task service - ownership, hierarchy and completion rules for tasks."""

from typing import Any

from src.taskboard.core.errors import (
    AlreadyCompletedError,
    ForbiddenError,
    InvalidHierarchyError,
    NotFoundError,
    PersistenceError,
)
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Task, TaskStatus, utc_now
from src.taskboard.repositories.protocols import ProjectStore, TaskStore
from src.taskboard.schemas.task import TaskCreate, TaskFilters, TaskUpdate

logger = get_logger(__name__)


class TaskService:
    """Task operations.

    Tasks of other users are reported as missing (NotFoundError), never as
    forbidden, except when creating a task in another user's project.
    """

    def __init__(self, task_repo: TaskStore, project_repo: ProjectStore):
        self.task_repo = task_repo
        self.project_repo = project_repo

    async def get_task(self, task_id: int, include_deleted: bool = False) -> Task | None:
        """Get a task by id regardless of owner."""
        return await self.task_repo.get_by_id(task_id, include_deleted=include_deleted)

    async def get_owned_task(self, task_id: int, user_id: int) -> Task:
        """Get a live task owned by ``user_id`` or raise NotFoundError."""
        task = await self.task_repo.get_by_id(task_id)
        if task is None or task.user_id != user_id:
            raise NotFoundError("Task not found")
        return task

    async def list_tasks_by_project(self, project_id: int) -> list[Task]:
        """List live tasks of a project."""
        return await self.task_repo.find_by_project(project_id)

    async def list_tasks_by_user(
        self, user_id: int, filters: TaskFilters | None = None
    ) -> list[Task]:
        """List the user's tasks matching ``filters`` (one page if a limit is set)."""
        return await self.task_repo.find_by_user(user_id, filters)

    async def count_tasks(self, user_id: int, filters: TaskFilters | None = None) -> int:
        """Count the user's tasks matching ``filters``, ignoring page/limit."""
        return await self.task_repo.count_by_user(
            user_id, filters.without_window() if filters else None
        )

    async def list_tasks_page(self, user_id: int, filters: TaskFilters) -> tuple[list[Task], int]:
        """List one page of tasks together with the total match count.

        Returns:
            Tuple of (items, total)
        """
        items = await self.list_tasks_by_user(user_id, filters)
        total = await self.count_tasks(user_id, filters)
        return items, total

    async def list_subtasks(self, task_id: int, user_id: int) -> list[Task]:
        """List live direct subtasks of a task owned by ``user_id``."""
        await self.get_owned_task(task_id, user_id)
        return await self.task_repo.find_children(task_id)

    async def create_task(self, user_id: int, data: TaskCreate) -> Task:
        """Create a pending task in one of the user's projects.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the project belongs to another user
            InvalidHierarchyError: If the parent task is missing or in another project
        """
        project = await self.project_repo.get_by_id(data.project_id)
        if project is None:
            raise NotFoundError("Project not found")
        if project.user_id != user_id:
            raise ForbiddenError("User does not have access to this project")

        if data.parent_task_id is not None:
            await self._validate_parent(data.parent_task_id, data.project_id)

        now = utc_now()
        task = Task(
            user_id=user_id,
            project_id=data.project_id,
            parent_task_id=data.parent_task_id,
            title=data.title,
            description=data.description,
            status=TaskStatus.PENDING.value,
            priority=data.priority,
            due_date=data.due_date,
            created_at=now,
            updated_at=now,
        )
        task = await self.task_repo.create(task)

        logger.info(
            "Task created",
            task_id=task.id,
            project_id=task.project_id,
            user_id=user_id,
        )
        return task

    async def update_task(self, task_id: int, data: TaskUpdate, user_id: int) -> Task:
        """Update the provided fields of a task.

        Status may be set to any value; completed_at follows it so that it is
        set exactly when the task is completed.

        Raises:
            NotFoundError: If the task is missing or owned by another user
            InvalidHierarchyError: If the new parent task is invalid
            PersistenceError: If the update affected no row
        """
        task = await self.get_owned_task(task_id, user_id)
        changes: dict[str, Any] = data.changes()

        new_parent_id = changes.get("parent_task_id")
        if new_parent_id is not None:
            if new_parent_id == task_id:
                raise InvalidHierarchyError("Task cannot be its own parent")
            await self._validate_parent(new_parent_id, task.project_id)

        if not changes:
            return task

        now = utc_now()
        if "status" in changes:
            if changes["status"] != TaskStatus.COMPLETED.value:
                changes["completed_at"] = None
            elif not task.is_completed:
                changes["completed_at"] = now

        updated = await self.task_repo.update(task_id, {**changes, "updated_at": now})
        if updated is None:
            raise PersistenceError("Failed to update task")

        logger.info("Task updated", task_id=task_id, fields=sorted(changes))
        return updated

    async def complete_task(self, task_id: int, user_id: int) -> Task:
        """Mark a task completed and stamp completed_at.

        Raises:
            NotFoundError: If the task is missing or owned by another user
            AlreadyCompletedError: If the task is already completed
        """
        task = await self.get_owned_task(task_id, user_id)
        if task.is_completed:
            raise AlreadyCompletedError()

        completed = await self.task_repo.mark_completed(task_id, utc_now())
        if completed is None:
            raise PersistenceError("Failed to complete task")

        logger.info("Task completed", task_id=task_id, user_id=user_id)
        return completed

    async def delete_task(self, task_id: int, user_id: int) -> None:
        """Soft-delete a task. Subtasks are left untouched."""
        await self.get_owned_task(task_id, user_id)

        if not await self.task_repo.soft_delete(task_id, utc_now()):
            raise PersistenceError("Failed to delete task")

        logger.info("Task deleted", task_id=task_id, user_id=user_id)

    async def _validate_parent(self, parent_task_id: int, project_id: int) -> None:
        parent = await self.task_repo.get_by_id(parent_task_id)
        if parent is None:
            raise InvalidHierarchyError("Parent task not found")
        if parent.project_id != project_id:
            raise InvalidHierarchyError("Parent task must belong to the same project")
