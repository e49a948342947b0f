"""Persistence ports the services depend on.

Services are written against these protocols; the SQL repositories in this
package satisfy them, and tests substitute mocks.
"""

from datetime import datetime
from typing import Any, Protocol

from src.taskboard.models import Project, Task, User
from src.taskboard.repositories.filters import Unset
from src.taskboard.schemas.task import TaskFilters


class UserStore(Protocol):
    async def get_by_id(self, id: int, include_deleted: bool = False) -> User | None: ...

    async def get_by_email(self, email: str, include_deleted: bool = False) -> User | None: ...

    async def upsert_restoring(
        self, email: str, display_name: str, now: datetime
    ) -> User | None: ...

    async def update(self, id: int, values: dict[str, Any]) -> User | None: ...

    async def soft_delete(self, id: int, deleted_at: datetime) -> bool: ...


class ProjectStore(Protocol):
    async def get_by_id(self, id: int, include_deleted: bool = False) -> Project | None: ...

    async def find(
        self,
        project_id: int | None = None,
        user_id: int | None = None,
        parent_project_id: int | None | Unset = ...,
    ) -> list[Project]: ...

    async def find_children(self, project_id: int) -> list[Project]: ...

    async def has_children(self, project_id: int) -> bool: ...

    async def lock(self, project_id: int) -> None: ...

    async def create(self, entity: Project) -> Project: ...

    async def update(self, id: int, values: dict[str, Any]) -> Project | None: ...

    async def soft_delete(self, id: int, deleted_at: datetime) -> bool: ...


class TaskStore(Protocol):
    async def get_by_id(self, id: int, include_deleted: bool = False) -> Task | None: ...

    async def find_by_project(self, project_id: int) -> list[Task]: ...

    async def find_by_user(
        self, user_id: int, filters: TaskFilters | None = None
    ) -> list[Task]: ...

    async def count_by_user(self, user_id: int, filters: TaskFilters | None = None) -> int: ...

    async def find_children(self, task_id: int) -> list[Task]: ...

    async def create(self, entity: Task) -> Task: ...

    async def update(self, id: int, values: dict[str, Any]) -> Task | None: ...

    async def mark_completed(self, task_id: int, now: datetime) -> Task | None: ...

    async def soft_delete(self, id: int, deleted_at: datetime) -> bool: ...
