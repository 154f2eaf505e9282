"""Authentication for TubeTalk."""

from .adapters.base import AuthAdapter, AuthenticationError, Principal
from .context import AuthContext
from .factory import get_auth_adapter
from .middleware import get_auth_context
from .tokens import issue_token, verify_token

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "Principal",
    "AuthContext",
    "get_auth_adapter",
    "get_auth_context",
    "issue_token",
    "verify_token",
]
