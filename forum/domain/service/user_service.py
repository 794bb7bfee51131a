"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import AdminRequiredError, NotFoundError, ValidationError
from forum.domain.model.user import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def create_user(
        self, username: str, email: str | None = None, is_admin: bool = False
    ) -> User:
        """Register a user.

        Raises:
            ValidationError: If the username is taken
        """
        with logfire.span("user_service.create_user", username=username):
            if await self.user_repository.find_by_username(username):
                raise ValidationError(f"Username already taken: {username}")

            user = User(
                id=UserId(uuid4()),
                username=Username(username),
                email=email,
                is_admin=is_admin,
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), is_admin=is_admin)
            return saved

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        """Get user by username."""
        return await self.user_repository.find_by_username(username)

    async def require_user(self, user_id: UserId) -> User:
        """Get a user that must exist.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.get_user_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user

    async def grant_admin(self, username: str) -> User:
        """Give an existing user admin rights.

        Raises:
            NotFoundError: If no user has this username
        """
        with logfire.span("user_service.grant_admin", username=username):
            user = await self.user_repository.find_by_username(username)
            if user is None:
                raise NotFoundError("User", username)
            updated = await self.user_repository.save(
                user.model_copy(update={"is_admin": True})
            )
            logfire.info("Admin granted", user_id=str(updated.id))
            return updated

    async def require_admin(self, user_id: UserId, action: str) -> User:
        """Get a user that must exist and be an admin.

        Raises:
            NotFoundError: If the user does not exist
            AdminRequiredError: If the user is not an admin
        """
        user = await self.require_user(user_id)
        if not user.is_admin:
            logfire.warn("Admin action refused", user_id=str(user_id), action=action)
            raise AdminRequiredError(action, f"user:{user_id}")
        return user

    async def update_username(self, user_id: UserId, username: str) -> User:
        """Rename a user.

        Content already posted keeps the name it was posted under.

        Raises:
            NotFoundError: If the user does not exist
            pydantic.ValidationError: If the username is malformed
            ValidationError: If another user holds the username
        """
        with logfire.span("user_service.update_username", user_id=str(user_id)):
            new_name = Username(username.strip())
            user = await self.require_user(user_id)
            holder = await self.user_repository.find_by_username(new_name.root)
            if holder is not None and holder.id != user.id:
                logfire.warn("Username taken", user_id=str(user_id))
                raise ValidationError(f"Username already taken: {new_name.root}")

            updated = await self.user_repository.save(
                user.model_copy(update={"username": new_name})
            )
            logfire.info("Username updated", user_id=str(user_id))
            return updated
