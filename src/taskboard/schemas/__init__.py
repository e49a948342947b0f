"""Request/response and input schemas."""

from src.taskboard.schemas.pagination import Page, count_pages, page_offset
from src.taskboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.taskboard.schemas.task import TaskCreate, TaskFilters, TaskRead, TaskUpdate
from src.taskboard.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    "Page",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "TaskCreate",
    "TaskFilters",
    "TaskRead",
    "TaskUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "count_pages",
    "page_offset",
]
