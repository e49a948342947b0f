"""Service layer - business rules over the repositories."""

from src.taskboard.services.project_service import ProjectService
from src.taskboard.services.task_service import TaskService
from src.taskboard.services.user_service import UserService

__all__ = [
    "ProjectService",
    "TaskService",
    "UserService",
]
