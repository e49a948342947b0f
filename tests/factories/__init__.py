"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, ProjectFactory, TaskFactory
"""

from tests.factories.base import BaseFactory, next_id, utc_now
from tests.factories.project import ProjectFactory
from tests.factories.task import TaskFactory
from tests.factories.user import UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "next_id",
    "utc_now",
    # Entities
    "ProjectFactory",
    "TaskFactory",
    "UserFactory",
]
