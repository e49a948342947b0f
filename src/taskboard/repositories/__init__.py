"""Repository layer - data access abstraction."""

from src.taskboard.repositories.base import BaseRepository
from src.taskboard.repositories.filters import UNSET
from src.taskboard.repositories.project import ProjectRepository
from src.taskboard.repositories.protocols import ProjectStore, TaskStore, UserStore
from src.taskboard.repositories.task import TaskRepository
from src.taskboard.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "UNSET",
    # Ports
    "ProjectStore",
    "TaskStore",
    "UserStore",
    # SQL implementations
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
]
