"""Update username use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserId

from .get_current_user import UserProfile, user_profile


class UpdateUsernameRequest(BaseModel):
    """Update username request."""

    user_id: UUID  # From the verified token
    username: str


class UpdateUsernameUseCase:
    """Use case for renaming the authenticated caller.

    Comments and posts already published keep the old name.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update username use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUsernameRequest) -> UserProfile:
        """Execute update username flow.

        Raises:
            ValidationError: If another user holds the username
            NotFoundError: If the caller no longer exists
        """
        user = await self.user_service.update_username(
            UserId(request.user_id), request.username
        )
        return user_profile(user)
