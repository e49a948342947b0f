"""User management service - create/restore, update and soft delete."""

from sqlalchemy.exc import IntegrityError

from src.taskboard.core.errors import ConflictError, NotFoundError, PersistenceError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import User, utc_now
from src.taskboard.repositories.protocols import UserStore
from src.taskboard.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """User management service."""

    def __init__(self, user_repo: UserStore):
        self.user_repo = user_repo

    async def get_user(self, user_id: int | None = None, email: str | None = None) -> User | None:
        """Get a live user by id or by email."""
        if user_id is not None:
            return await self.user_repo.get_by_id(user_id)
        if email is not None:
            return await self.user_repo.get_by_email(email)
        raise ValueError("Either user_id or email is required")

    async def require_user(self, user_id: int) -> User:
        """Get a live user by id or raise NotFoundError."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def create_user(self, data: UserCreate) -> User:
        """Create a user, restoring a soft-deleted account with the same email.

        A restored account keeps its id and original created_at; its display
        name is replaced and deleted_at cleared.

        Raises:
            ConflictError: If the email belongs to a live user
        """
        user = await self.user_repo.upsert_restoring(data.email, data.display_name, utc_now())
        if user is None:
            raise ConflictError("User with this email already exists")

        logger.info("User created", user_id=user.id)
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Update the provided fields of a live user.

        Raises:
            NotFoundError: If the user does not exist or is deleted
            ConflictError: If the new email is held by another account
            PersistenceError: If the update affected no row
        """
        user = await self.require_user(user_id)
        changes = data.changes()
        if not changes:
            return user

        new_email = changes.get("email")
        if new_email is not None and new_email != user.email:
            # Deleted accounts keep their email reserved for restore
            holder = await self.user_repo.get_by_email(new_email, include_deleted=True)
            if holder is not None:
                raise ConflictError("User with this email already exists")

        try:
            updated = await self.user_repo.update(user_id, {**changes, "updated_at": utc_now()})
        except IntegrityError as e:
            raise ConflictError("User with this email already exists") from e
        if updated is None:
            raise PersistenceError("Failed to update user")

        logger.info("User updated", user_id=user_id, fields=sorted(changes))
        return updated

    async def delete_user(self, user_id: int) -> None:
        """Soft-delete a live user."""
        await self.require_user(user_id)

        if not await self.user_repo.soft_delete(user_id, utc_now()):
            raise PersistenceError("Failed to delete user")

        logger.info("User deleted", user_id=user_id)
