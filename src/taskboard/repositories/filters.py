"""Query composition for filtered, deterministic and paginated listings.

Predicates are built as lists of SQL expressions and ANDed by the caller.
Ordering is always (created_at, id) ascending so that concatenating pages
of a fixed size reproduces the unbounded listing.
"""

from typing import Any, Final

from sqlalchemy import ColumnElement, or_

from src.taskboard.models import Project, Task
from src.taskboard.schemas.pagination import page_offset
from src.taskboard.schemas.task import TaskFilters


class Unset:
    """Marker for "argument omitted", distinct from an explicit None."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = Unset()


def project_conditions(
    project_id: int | None = None,
    user_id: int | None = None,
    parent_project_id: int | None | Unset = UNSET,
) -> list[ColumnElement[bool]]:
    """Conditions for live projects matching the given equality filters.

    ``parent_project_id=None`` selects roots; leaving it UNSET applies no
    parent filter at all.
    """
    conditions: list[ColumnElement[bool]] = [Project.deleted_at.is_(None)]  # type: ignore[union-attr]

    if project_id is not None:
        conditions.append(Project.id == project_id)  # type: ignore[arg-type]
    if user_id is not None:
        conditions.append(Project.user_id == user_id)  # type: ignore[arg-type]
    if parent_project_id is None:
        conditions.append(Project.parent_project_id.is_(None))  # type: ignore[union-attr]
    elif not isinstance(parent_project_id, Unset):
        conditions.append(Project.parent_project_id == parent_project_id)  # type: ignore[arg-type]

    return conditions


def task_conditions(
    user_id: int | None = None,
    filters: TaskFilters | None = None,
    project_id: int | None = None,
    parent_task_id: int | None = None,
) -> list[ColumnElement[bool]]:
    """Conditions for tasks: scope first, then each present filter.

    Soft-deleted tasks are excluded unless ``filters.include_deleted``.
    """
    filters = filters or TaskFilters()
    conditions: list[ColumnElement[bool]] = []

    if not filters.include_deleted:
        conditions.append(Task.deleted_at.is_(None))  # type: ignore[union-attr]

    if user_id is not None:
        conditions.append(Task.user_id == user_id)  # type: ignore[arg-type]
    if project_id is not None:
        conditions.append(Task.project_id == project_id)  # type: ignore[arg-type]
    if parent_task_id is not None:
        conditions.append(Task.parent_task_id == parent_task_id)  # type: ignore[arg-type]

    if filters.project_id is not None:
        conditions.append(Task.project_id == filters.project_id)  # type: ignore[arg-type]
    if filters.status is not None:
        conditions.append(Task.status == filters.status)  # type: ignore[arg-type]
    if filters.due_before is not None:
        conditions.append(Task.due_date <= filters.due_before)  # type: ignore[operator]
    if filters.search:
        conditions.append(
            or_(
                Task.title.icontains(filters.search, autoescape=True),  # type: ignore[attr-defined]
                Task.description.icontains(filters.search, autoescape=True),  # type: ignore[union-attr]
            )
        )

    return conditions


def creation_order(query: Any, model: type[Project] | type[Task]) -> Any:
    """Order by creation time, with id as tie-breaker for equal timestamps."""
    return query.order_by(model.created_at.asc(), model.id.asc())  # type: ignore[union-attr]


def apply_window(query: Any, filters: TaskFilters | None) -> Any:
    """Apply OFFSET/LIMIT when a limit is set; otherwise return the query unchanged."""
    if filters is None or not filters.limit:
        return query
    return query.offset(page_offset(filters.page, filters.limit)).limit(filters.limit)
