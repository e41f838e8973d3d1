"""
Domain exception hierarchy for the Blog List service.

Raised by use cases and domain policies; the API layer maps each class to
a single HTTP status. All errors carry a short message that is safe to
show to the caller.
"""

# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BlogListError(Exception):
    """Base exception for all Blog List errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Request errors
# -----------------------------------------------------------------------------


class ValidationError(BlogListError):
    """Raised when a required field is missing or too short."""
    pass


class ConflictError(BlogListError):
    """Raised when a unique value (username) is already taken."""
    pass


# -----------------------------------------------------------------------------
# Access errors
# -----------------------------------------------------------------------------


class AuthenticationError(BlogListError):
    """Raised on bad login credentials. The message never reveals which part was wrong."""

    def __init__(self, message: str = "invalid username or password"):
        super().__init__(message)


class AuthorizationError(BlogListError):
    """Raised when the caller may not perform a mutation on a post."""
    pass


class NotFoundError(BlogListError):
    """Raised when a target post id does not resolve."""
    pass
