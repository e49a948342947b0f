"""FastAPI dependency injection definitions."""

from src.taskboard.api.dependencies.auth import CurrentUser, get_current_user
from src.taskboard.api.dependencies.db import DBSession, get_db_session
from src.taskboard.api.dependencies.repositories import (
    ProjectRepo,
    TaskRepo,
    UserRepo,
    get_project_repository,
    get_task_repository,
    get_user_repository,
)
from src.taskboard.api.dependencies.services import (
    ProjectServiceDep,
    TaskServiceDep,
    UserServiceDep,
    get_project_service,
    get_task_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentUser",
    "get_current_user",
    # Repositories
    "ProjectRepo",
    "TaskRepo",
    "UserRepo",
    "get_project_repository",
    "get_task_repository",
    "get_user_repository",
    # Services
    "ProjectServiceDep",
    "TaskServiceDep",
    "UserServiceDep",
    "get_project_service",
    "get_task_service",
    "get_user_service",
]
