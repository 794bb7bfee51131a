"""User routes."""

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from forum.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UpdateUsernameRequest,
    UpdateUsernameUseCase,
    UserProfile,
)
from forum.domain.service import IdentityService
from forum.interface.api.identity import require_user_id, resolve_identity
from forum.interface.api.transaction import TransactionalRoute

router = APIRouter(prefix="/users", tags=["users"], route_class=TransactionalRoute)


class UpdateUsernameAPIRequest(BaseModel):
    """API request for choosing a new username."""

    username: str


@router.get("/me", response_model=UserProfile)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    identity_service: FromDishka[IdentityService],
) -> UserProfile:
    """Get the authenticated caller's profile.

    Args:
        request: Incoming request
        get_current_user_use_case: Get current user use case from DI
        identity_service: Identity service from DI

    Returns:
        Profile of the user the token belongs to
    """
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "view their profile")

    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )


@router.put("/me/username", response_model=UserProfile)
async def update_username(
    body: UpdateUsernameAPIRequest,
    request: Request,
    update_username_use_case: FromDishka[UpdateUsernameUseCase],
    identity_service: FromDishka[IdentityService],
) -> UserProfile:
    """Rename the authenticated caller.

    Usernames are unique. Already published content keeps the old name.
    """
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "change their username")

    return await update_username_use_case.execute(
        UpdateUsernameRequest(user_id=user_id, username=body.username)
    )
