"""User endpoints - signup/restore and the acting user's profile."""

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import CurrentUser, UserServiceDep
from src.taskboard.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description=(
        "Create a user. If the email belongs to a deleted account, that account "
        "is restored with the new display name."
    ),
    responses={
        201: {"description": "User created or restored"},
        409: {"description": "Email already in use by a live account"},
    },
)
async def create_user(request: UserCreate, user_service: UserServiceDep) -> UserRead:
    """Create or restore a user."""
    user = await user_service.create_user(request)
    return UserRead.model_validate(user)


@router.get(
    "/me",
    response_model=UserRead,
    responses={401: {"description": "Not authenticated"}},
)
async def get_me(current_user: CurrentUser) -> UserRead:
    """Get the acting user."""
    return UserRead.model_validate(current_user)


@router.patch(
    "/me",
    response_model=UserRead,
    responses={
        200: {"description": "User profile updated"},
        401: {"description": "Not authenticated"},
        409: {"description": "Email already in use"},
    },
)
async def update_me(
    request: UserUpdate,
    current_user: CurrentUser,
    user_service: UserServiceDep,
) -> UserRead:
    """Update the acting user's profile."""
    user = await user_service.update_user(current_user.id, request)  # type: ignore[arg-type]
    return UserRead.model_validate(user)


@router.delete(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "User deleted"},
        401: {"description": "Not authenticated"},
    },
)
async def delete_me(current_user: CurrentUser, user_service: UserServiceDep) -> None:
    """Soft-delete the acting user."""
    await user_service.delete_user(current_user.id)  # type: ignore[arg-type]
