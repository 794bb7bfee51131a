"""User use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserProfile,
)
from .update_username import UpdateUsernameRequest, UpdateUsernameUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "UpdateUsernameRequest",
    "UpdateUsernameUseCase",
    "UserProfile",
]
