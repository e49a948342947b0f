"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskboard.api.dependencies.repositories import ProjectRepo, TaskRepo, UserRepo
from src.taskboard.core.config import get_settings
from src.taskboard.services import ProjectService, TaskService, UserService


def get_user_service(user_repo: UserRepo) -> UserService:
    """Get user service."""
    return UserService(user_repo)


def get_project_service(project_repo: ProjectRepo) -> ProjectService:
    """Get project service configured from settings."""
    settings = get_settings()
    return ProjectService(
        project_repo,
        default_color=settings.default_project_color,
        detect_cycles=settings.project_cycle_detection,
    )


def get_task_service(task_repo: TaskRepo, project_repo: ProjectRepo) -> TaskService:
    """Get task service."""
    return TaskService(task_repo, project_repo)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
