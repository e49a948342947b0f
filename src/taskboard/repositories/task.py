"""Repository for Task entity."""

from datetime import datetime

from sqlalchemy import and_, func
from sqlmodel import select

from src.taskboard.models import Task, TaskStatus
from src.taskboard.repositories.base import BaseRepository
from src.taskboard.repositories.filters import apply_window, creation_order, task_conditions
from src.taskboard.schemas.task import TaskFilters


class TaskRepository(BaseRepository[Task]):
    """Repository for Task entity."""

    model = Task

    async def find_by_project(self, project_id: int) -> list[Task]:
        """List live tasks of a project in creation order."""
        query = select(Task).where(and_(*task_conditions(project_id=project_id)))
        result = await self.session.execute(creation_order(query, Task))
        return list(result.scalars().all())

    async def find_by_user(self, user_id: int, filters: TaskFilters | None = None) -> list[Task]:
        """List a user's tasks matching ``filters``.

        Results are in creation order. When ``filters.limit`` is set, only that
        page is returned.
        """
        query = select(Task).where(and_(*task_conditions(user_id=user_id, filters=filters)))
        query = apply_window(creation_order(query, Task), filters)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by_user(self, user_id: int, filters: TaskFilters | None = None) -> int:
        """Count a user's tasks matching ``filters``; page/limit are ignored."""
        conditions = task_conditions(user_id=user_id, filters=filters)
        result = await self.session.execute(
            select(func.count()).select_from(Task).where(and_(*conditions))
        )
        return result.scalar_one()

    async def find_children(self, task_id: int) -> list[Task]:
        """List live direct subtasks of a task in creation order."""
        query = select(Task).where(and_(*task_conditions(parent_task_id=task_id)))
        result = await self.session.execute(creation_order(query, Task))
        return list(result.scalars().all())

    async def mark_completed(self, task_id: int, now: datetime) -> Task | None:
        """Set status to completed and stamp completed_at."""
        return await self.update(
            task_id,
            {
                "status": TaskStatus.COMPLETED.value,
                "completed_at": now,
                "updated_at": now,
            },
        )
