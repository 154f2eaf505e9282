"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from ..dbmodels import Users


@dataclass
class AuthContext:
    """Runtime authentication context for a request."""

    user_id: UUID | None
    user: Users | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request is authenticated."""
        return self.user_id is not None

    @property
    def verified_user(self) -> Users | None:
        """The user the request's bearer token resolved to, if any."""
        return self.user
