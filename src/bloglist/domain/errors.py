"""Domain errors raised by the blog list services."""


class BlogListError(Exception):
    """Base error carrying a user-facing message."""

    default_message = "request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogListError):
    """Input is missing or malformed."""

    default_message = "invalid input"


class ConflictError(BlogListError):
    """Entity already exists."""

    default_message = "already exists"


class AuthError(BlogListError):
    """Credentials or session are not valid."""

    default_message = "invalid or missing session"


class ForbiddenError(BlogListError):
    """Caller is authenticated but not allowed to act."""

    default_message = "not allowed"


class NotFoundError(BlogListError):
    """Referenced entity does not exist."""

    default_message = "not found"
