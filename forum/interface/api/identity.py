"""Caller identity extraction for routes."""

from uuid import UUID

from fastapi import HTTPException, Request, status

from forum.domain.service import IdentityService
from forum.domain.value import Identity

AUTH_COOKIE = "auth_token"
SESSION_COOKIE = "session_id"
SESSION_HEADER = "X-Session-Id"


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization")
    if header:
        scheme, _, token = header.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    return request.cookies.get(AUTH_COOKIE)


def resolve_identity(request: Request, identity_service: IdentityService) -> Identity:
    """Resolve the identity of the caller.

    Credentials are read from the ``Authorization: Bearer`` header (or the
    ``auth_token`` cookie), the session id from the ``X-Session-Id`` header
    (or the ``session_id`` cookie), and the IP from the connection.

    Args:
        request: Incoming request
        identity_service: Identity service from DI

    Returns:
        The caller's identity, anonymous when no valid token was sent
    """
    return identity_service.resolve(
        token=_bearer_token(request),
        session_id=request.headers.get(SESSION_HEADER)
        or request.cookies.get(SESSION_COOKIE),
        client_ip=request.client.host if request.client else None,
    )


def require_user_id(identity: Identity, action: str) -> UUID:
    """Get the user id of an authenticated caller.

    Raises:
        HTTPException: 401 if the caller is anonymous
    """
    if identity.user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return identity.user_id
