"""Shared enums for models."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    pending -> in_progress -> completed, and any non-terminal status may move
    to cancelled.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
