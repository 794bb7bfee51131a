"""Caller identity resolution."""

import hashlib
import time
from uuid import UUID

import logfire

from forum.domain.value import FINGERPRINT_LIMIT, Identity, UserId

from .base import Service
from .jwt_service import JWTService


class IdentityService(Service):
    """Turns request credentials into the identity used for votes and authorship."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize identity service.

        Args:
            jwt_service: JWT service used to verify bearer tokens
        """
        self.jwt_service = jwt_service

    def resolve(
        self,
        token: str | None = None,
        session_id: str | None = None,
        client_ip: str | None = None,
    ) -> Identity:
        """Resolve the caller's identity.

        A valid token yields an authenticated identity. Anything else,
        including an expired or forged token, yields an anonymous identity
        fingerprinted by session id, then IP, then a time-based placeholder.
        Fingerprints longer than FINGERPRINT_LIMIT are replaced by a digest.

        Args:
            token: Bearer token (optional)
            session_id: Client session id (optional)
            client_ip: Client IP address (optional)

        Returns:
            The caller's identity
        """
        user_id = self.jwt_service.get_user_id_from_token(token)
        if user_id:
            try:
                return Identity.authenticated(UserId(UUID(user_id)))
            except ValueError:
                logfire.warn("Token subject is not a user id", subject=user_id)

        fingerprint = session_id or client_ip or f"anonymous_{int(time.time() * 1000)}"
        return Identity.anonymous(_bounded(fingerprint))


def _bounded(fingerprint: str) -> str:
    """Replace an oversized client-supplied fingerprint with its SHA-256 digest.

    The digest is stable, so the same session id keeps the same identity.
    """
    if len(fingerprint) <= FINGERPRINT_LIMIT:
        return fingerprint
    return "sha256:" + hashlib.sha256(fingerprint.encode()).hexdigest()

