"""Model exports.

Import from here: `from src.taskboard.models import User, Project, Task`
"""

from src.taskboard.models.base import utc_now
from src.taskboard.models.enums import TaskStatus
from src.taskboard.models.project import DEFAULT_PROJECT_COLOR, Project
from src.taskboard.models.task import Task
from src.taskboard.models.user import User

__all__ = [
    # Enums
    "TaskStatus",
    # Models
    "Project",
    "Task",
    "User",
    # Helpers
    "DEFAULT_PROJECT_COLOR",
    "utc_now",
]
