"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import User
from forum.domain.service import UserService
from forum.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: UUID  # From the verified token


class UserProfile(BaseModel):
    """The caller's own profile."""

    user_id: str
    username: str
    email: str | None
    is_admin: bool
    created_at: datetime


def user_profile(user: User) -> UserProfile:
    """Build the profile response for a user."""
    return UserProfile(
        user_id=str(user.id),
        username=user.username.root,
        email=user.email,
        is_admin=user.is_admin,
        created_at=user.created_at,
    )


class GetCurrentUserUseCase:
    """Use case for getting the authenticated caller's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserProfile:
        """Execute get current user flow.

        Raises:
            NotFoundError: If the token names a user that no longer exists
        """
        user = await self.user_service.require_user(UserId(request.user_id))
        return user_profile(user)
