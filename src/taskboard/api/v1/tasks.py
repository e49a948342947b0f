"""Task endpoints - filtering, pagination and completion."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Query, status

from src.taskboard.api.dependencies import CurrentUser, TaskServiceDep
from src.taskboard.core.config import get_settings
from src.taskboard.models import TaskStatus
from src.taskboard.schemas.pagination import Page, count_pages
from src.taskboard.schemas.task import TaskCreate, TaskFilters, TaskRead, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=Page[TaskRead],
    summary="List tasks",
    description=(
        "List the acting user's tasks in creation order. Filters are combined with AND; "
        "without a limit every matching task is returned."
    ),
)
async def list_tasks(
    task_service: TaskServiceDep,
    user: CurrentUser,
    project_id: Annotated[int | None, Query(ge=1)] = None,
    task_status: Annotated[TaskStatus | None, Query(alias="status")] = None,
    due_before: Annotated[datetime | None, Query(description="Inclusive upper bound")] = None,
    search: Annotated[str | None, Query(max_length=200)] = None,
    page: Annotated[int | None, Query(ge=1)] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    include_deleted: bool = False,
) -> Page[TaskRead]:
    """List tasks with filters and page/limit pagination."""
    if limit is not None:
        limit = min(limit, get_settings().max_page_limit)

    filters = TaskFilters(
        project_id=project_id,
        status=task_status,
        due_before=due_before,
        search=search,
        page=page,
        limit=limit,
        include_deleted=include_deleted,
    )
    items, total = await task_service.list_tasks_page(user.id, filters)  # type: ignore[arg-type]
    return Page[TaskRead](
        items=[TaskRead.model_validate(t) for t in items],
        total=total,
        page=filters.page or 1,
        limit=filters.limit,
        total_pages=count_pages(total, filters.limit),
    )


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create task",
    responses={
        201: {"description": "Task created"},
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project not found"},
        422: {"description": "Parent task missing or in another project"},
    },
)
async def create_task(
    request: TaskCreate,
    task_service: TaskServiceDep,
    user: CurrentUser,
) -> TaskRead:
    """Create a new task."""
    task = await task_service.create_task(user.id, request)  # type: ignore[arg-type]
    return TaskRead.model_validate(task)


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Get task",
    responses={404: {"description": "Task not found"}},
)
async def get_task(task_id: int, task_service: TaskServiceDep, user: CurrentUser) -> TaskRead:
    """Get a task by ID."""
    task = await task_service.get_owned_task(task_id, user.id)  # type: ignore[arg-type]
    return TaskRead.model_validate(task)


@router.get(
    "/{task_id}/subtasks",
    response_model=list[TaskRead],
    summary="List subtasks",
    responses={404: {"description": "Task not found"}},
)
async def list_subtasks(
    task_id: int, task_service: TaskServiceDep, user: CurrentUser
) -> list[TaskRead]:
    """List direct subtasks of a task."""
    tasks = await task_service.list_subtasks(task_id, user.id)  # type: ignore[arg-type]
    return [TaskRead.model_validate(t) for t in tasks]


@router.patch(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update task",
    responses={
        200: {"description": "Task updated"},
        404: {"description": "Task not found"},
        422: {"description": "Invalid parent task"},
    },
)
async def update_task(
    task_id: int,
    request: TaskUpdate,
    task_service: TaskServiceDep,
    user: CurrentUser,
) -> TaskRead:
    """Update an existing task."""
    task = await task_service.update_task(task_id, request, user.id)  # type: ignore[arg-type]
    return TaskRead.model_validate(task)


@router.post(
    "/{task_id}/complete",
    response_model=TaskRead,
    summary="Complete task",
    responses={
        200: {"description": "Task completed"},
        404: {"description": "Task not found"},
        409: {"description": "Task is already completed"},
    },
)
async def complete_task(task_id: int, task_service: TaskServiceDep, user: CurrentUser) -> TaskRead:
    """Mark a task as completed."""
    task = await task_service.complete_task(task_id, user.id)  # type: ignore[arg-type]
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete task",
    responses={
        204: {"description": "Task deleted"},
        404: {"description": "Task not found"},
    },
)
async def delete_task(task_id: int, task_service: TaskServiceDep, user: CurrentUser) -> None:
    """Soft-delete a task."""
    await task_service.delete_task(task_id, user.id)  # type: ignore[arg-type]
