"""Acting-user dependency.

Authentication itself (sessions, OAuth) happens upstream; requests arrive
with the authenticated user's id in the X-User-Id header.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.taskboard.api.dependencies.services import UserServiceDep
from src.taskboard.core.logging import bind_user_context
from src.taskboard.models import User


async def get_current_user(
    user_service: UserServiceDep,
    x_user_id: Annotated[int | None, Header(description="Id of the acting user")] = None,
) -> User:
    """Resolve the acting user; deleted or unknown users are rejected."""
    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )

    user = await user_service.get_user(user_id=x_user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown or deleted user",
        )

    bind_user_context(user.id)  # type: ignore[arg-type]
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
