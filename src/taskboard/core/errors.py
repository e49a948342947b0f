"""Typed failures raised by the service layer.

Each error carries the HTTP status it maps to so the transport layer can
render it without knowing about individual business rules.
"""


class TaskboardError(Exception):
    """Base class for all domain errors."""

    status_code: int = 400
    default_detail: str = "Request could not be processed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFoundError(TaskboardError):
    """Entity is absent, soft-deleted, or not owned by the caller."""

    status_code = 404
    default_detail = "Not found"


class ForbiddenError(TaskboardError):
    """Entity exists but the caller may not use it."""

    status_code = 403
    default_detail = "Access denied"


class InvalidHierarchyError(TaskboardError):
    """Parent/child link breaks a same-owner or same-project rule."""

    status_code = 422
    default_detail = "Invalid hierarchy"


class ConflictError(TaskboardError):
    """Unique key already taken by a live row."""

    status_code = 409
    default_detail = "Conflict"


class PreconditionFailedError(TaskboardError):
    """A business rule blocks the operation in the entity's current state."""

    status_code = 409
    default_detail = "Precondition failed"


class HasChildrenError(PreconditionFailedError):
    default_detail = "Cannot delete project with child projects"


class AlreadyCompletedError(PreconditionFailedError):
    default_detail = "Task is already completed"


class PersistenceError(TaskboardError):
    """A write that should have affected a row did not."""

    status_code = 500
    default_detail = "Persistence failure"
