"""
Comment GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .post import Post
    from .user import User


@strawberry.type
class Comment:
    """A user's comment on a post."""

    id: strawberry.ID
    user_id: strawberry.ID = strawberry.field(name="userId")
    post_id: strawberry.ID = strawberry.field(name="postId")
    comment: str
    created_at: datetime = strawberry.field(name="createdAt")
    updated_at: datetime = strawberry.field(name="updatedAt")

    @strawberry.field
    async def user(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the user who wrote this comment."""
        from ..resolvers.user import resolve_comment_user

        return await resolve_comment_user(self, info)

    @strawberry.field
    async def post(
        self, info: strawberry.Info
    ) -> Annotated["Post", strawberry.lazy(".post")] | None:
        """Get the commented post; null once the post has been deleted."""
        from ..resolvers.post import resolve_comment_post

        return await resolve_comment_post(self, info)
