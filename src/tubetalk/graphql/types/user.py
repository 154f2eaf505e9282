"""
User GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API.

    The access token a user registered with is deliberately not exposed.
    """

    id: strawberry.ID
    username: str
    avatar_url: str | None
    created_at: datetime = strawberry.field(name="createdAt")
    updated_at: datetime = strawberry.field(name="updatedAt")

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:  # noqa: E501
        """Get posts written by this user."""
        from ..resolvers.post import resolve_user_posts

        return await resolve_user_posts(self, info)
