"""
Root GraphQL query definitions
"""

import strawberry

from ..types.post import Post
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Retrieves list of users")
    async def users(self, info: strawberry.Info) -> list[User]:
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field(description="Retrieves one user")
    async def user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    @strawberry.field(description="Retrieves list of posts")
    async def posts(self, info: strawberry.Info) -> list[Post]:
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info)

    @strawberry.field(description="Retrieves one post")
    async def post(self, info: strawberry.Info, id: strawberry.ID) -> Post | None:
        from ..resolvers.post import resolve_post_by_id

        return await resolve_post_by_id(info, id)
