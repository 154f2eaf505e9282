"""Resolve the per-request authentication context from request headers."""

from __future__ import annotations

from ..logging import get_logger, user_id_ctx
from .context import AuthContext
from .tokens import verify_token

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None

    if not authorization.startswith(BEARER_PREFIX):
        logger.warning("Invalid authorization format received")
        return None

    token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        logger.warning("Empty token provided")
        return None

    return token


async def get_auth_context(authorization: str | None) -> AuthContext:
    """
    Build the AuthContext for a request.

    A missing, malformed or invalid token yields an unauthenticated context;
    resolvers decide whether that is acceptable.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return AuthContext(user_id=None)

    user = await verify_token(token)
    if user is None:
        return AuthContext(user_id=None, token=token)

    # Attach the verified user to log records for the rest of the request
    user_id_ctx.set(str(user.id))
    return AuthContext(user_id=user.id, user=user, token=token)
