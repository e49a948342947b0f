"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.db import get_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """Get a request-scoped session that forms one unit of work.

    Services never commit; the whole request is committed after the
    endpoint returns, or rolled back if anything raised. The dependency is
    function-scoped so the commit happens before the response is sent and a
    failed commit turns into an error response.
    """
    async with get_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


DBSession = Annotated[AsyncSession, Depends(get_db_session, scope="function")]
