"""
Errors raised by GraphQL resolvers.

graphql-core copies an exception's ``extensions`` dict onto the GraphQL error,
so clients get a stable ``code`` next to the message.
"""


class TubeTalkError(Exception):
    """Base class for errors reported to GraphQL clients."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.extensions = {"code": self.code}


class UnauthenticatedError(TubeTalkError):
    """No verified user is attached to the request."""

    code = "UNAUTHENTICATED"

    def __init__(self) -> None:
        super().__init__("Unauthenticated")


class NotFoundForAuthorError(TubeTalkError):
    """The resource does not exist or belongs to someone else.

    The two cases share one error so callers cannot probe for other users'
    resources.
    """

    code = "NOT_FOUND_FOR_AUTHOR"

    def __init__(self, resource: str):
        super().__init__(f"No {resource} with the given ID found for the author")
        self.resource = resource


class UserNotFoundError(TubeTalkError):
    """No user is registered with the given access token."""

    code = "NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("User does not exist")


class InvalidIdError(TubeTalkError):
    """An ID argument is not a well-formed identifier."""

    code = "BAD_USER_INPUT"

    def __init__(self, field: str):
        super().__init__(f"Invalid {field}")
        self.field = field
