"""Project endpoints - hierarchical projects owned by the acting user.

Projects of other users answer 404, exactly like missing ones.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.taskboard.api.dependencies import CurrentUser, ProjectServiceDep, TaskServiceDep
from src.taskboard.repositories import UNSET
from src.taskboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.taskboard.schemas.task import TaskRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List the acting user's projects, optionally only roots or children of a parent.",
)
async def list_projects(
    project_service: ProjectServiceDep,
    user: CurrentUser,
    parent_id: Annotated[
        int | None, Query(ge=1, description="Only children of this project")
    ] = None,
    roots_only: Annotated[bool, Query(description="Only projects without a parent")] = False,
) -> list[ProjectRead]:
    """List projects."""
    parent = None if roots_only else (parent_id if parent_id is not None else UNSET)
    projects = await project_service.list_projects(user.id, parent)  # type: ignore[arg-type]
    return [ProjectRead.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        404: {"description": "Parent project not found"},
    },
)
async def create_project(
    request: ProjectCreate,
    project_service: ProjectServiceDep,
    user: CurrentUser,
) -> ProjectRead:
    """Create a new project."""
    project = await project_service.create_project(user.id, request)  # type: ignore[arg-type]
    return ProjectRead.model_validate(project)


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={404: {"description": "Project not found"}},
)
async def get_project(
    project_id: int,
    project_service: ProjectServiceDep,
    user: CurrentUser,
) -> ProjectRead:
    """Get a project by ID."""
    project = await project_service.require_project(project_id, user.id)  # type: ignore[arg-type]
    return ProjectRead.model_validate(project)


@router.get(
    "/{project_id}/children",
    response_model=list[ProjectRead],
    summary="List child projects",
    responses={404: {"description": "Parent project not found"}},
)
async def list_child_projects(
    project_id: int,
    project_service: ProjectServiceDep,
    user: CurrentUser,
) -> list[ProjectRead]:
    """List direct children of a project."""
    children = await project_service.list_child_projects(project_id, user.id)  # type: ignore[arg-type]
    return [ProjectRead.model_validate(p) for p in children]


@router.get(
    "/{project_id}/tasks",
    response_model=list[TaskRead],
    summary="List project tasks",
    responses={404: {"description": "Project not found"}},
)
async def list_project_tasks(
    project_id: int,
    project_service: ProjectServiceDep,
    task_service: TaskServiceDep,
    user: CurrentUser,
) -> list[TaskRead]:
    """List live tasks of a project."""
    await project_service.require_project(project_id, user.id)  # type: ignore[arg-type]
    tasks = await task_service.list_tasks_by_project(project_id)
    return [TaskRead.model_validate(t) for t in tasks]


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    responses={
        200: {"description": "Project updated"},
        404: {"description": "Project or new parent not found"},
        422: {"description": "Project cannot be its own parent"},
    },
)
async def update_project(
    project_id: int,
    request: ProjectUpdate,
    project_service: ProjectServiceDep,
    user: CurrentUser,
) -> ProjectRead:
    """Update an existing project."""
    project = await project_service.update_project(project_id, request, user.id)  # type: ignore[arg-type]
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    responses={
        204: {"description": "Project deleted"},
        404: {"description": "Project not found"},
        409: {"description": "Project still has child projects"},
    },
)
async def delete_project(
    project_id: int,
    project_service: ProjectServiceDep,
    user: CurrentUser,
) -> None:
    """Soft-delete a project without live children."""
    await project_service.delete_project(project_id, user.id)  # type: ignore[arg-type]
