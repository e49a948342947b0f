"""Integration test fixtures for database and HTTP client operations.

Every test gets a fresh in-memory SQLite database (aiosqlite) with the
schema created from the SQLModel metadata. Uses polyfactory for test data.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.taskboard.core import db
from src.taskboard.core.db import get_session
from src.taskboard.main import create_app
from src.taskboard.models import Project, User
from src.taskboard.repositories import ProjectRepository, TaskRepository, UserRepository
from src.taskboard.services import ProjectService, TaskService, UserService
from tests.factories import ProjectFactory, UserFactory
from tests.utils.db import create_test_engine


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory database shared by all sessions of one test."""
    test_engine = await create_test_engine()
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for repository and service tests.

    Repositories only flush; tests that need data visible to other sessions
    (e.g. the HTTP client) must call `await db_session.commit()`.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def user_repo(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def project_repo(db_session: AsyncSession) -> ProjectRepository:
    return ProjectRepository(db_session)


@pytest.fixture
def task_repo(db_session: AsyncSession) -> TaskRepository:
    return TaskRepository(db_session)


@pytest.fixture
def user_service(user_repo: UserRepository) -> UserService:
    return UserService(user_repo)


@pytest.fixture
def project_service(project_repo: ProjectRepository) -> ProjectService:
    return ProjectService(project_repo)


@pytest.fixture
def task_service(task_repo: TaskRepository, project_repo: ProjectRepository) -> TaskService:
    return TaskService(task_repo, project_repo)


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a live user."""
    user = UserFactory.build(id=None)
    db_session.add(user)
    await db_session.flush()
    return user


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    """Create a second live user for isolation checks."""
    user = UserFactory.build(id=None)
    db_session.add(user)
    await db_session.flush()
    return user


@pytest.fixture
async def test_project(db_session: AsyncSession, test_user: User) -> Project:
    """Create a root project owned by test_user."""
    project = ProjectFactory.build(id=None, user_id=test_user.id)
    db_session.add(project)
    await db_session.flush()
    return project


@pytest.fixture
def app(engine: AsyncEngine, monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    """Create the app with request sessions bound to the test database."""
    monkeypatch.setattr(
        "src.taskboard.api.dependencies.db.get_session", lambda: get_session(engine)
    )
    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create test client for the app."""
    await db.dispose_engine()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    await db.dispose_engine()
