"""
Shared access control logic for GraphQL resolvers
"""

from uuid import UUID

import strawberry

from ..auth.context import AuthContext
from ..logging import get_logger
from .errors import UnauthenticatedError

logger = get_logger(__name__)


def get_auth_context_from_info(info: strawberry.Info) -> AuthContext:
    """
    Extract auth context from GraphQL info object.

    A context without one (e.g. a schema executed directly) is unauthenticated.
    """
    auth_context = info.context.get("auth")
    if auth_context is None:
        return AuthContext(user_id=None)
    return auth_context


def require_authenticated(info: strawberry.Info, operation: str) -> AuthContext:
    """Return the caller's auth context or raise UnauthenticatedError."""
    auth_context = get_auth_context_from_info(info)
    if not auth_context.is_authenticated:
        logger.info("Unauthenticated request rejected", operation=operation)
        raise UnauthenticatedError()
    return auth_context


def parse_id(value: str | None) -> UUID | None:
    """Parse a GraphQL ID into a UUID, returning None when it is not one."""
    if value is None:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None
