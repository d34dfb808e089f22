"""
Errors raised by the repositories.

Both kinds are recoverable and reported back to the caller; anything else
raised while talking to the store propagates untouched.
"""


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class ValidationError(RepositoryError):
    """Raised when input is malformed or outside the domain's bounds."""
    pass


class NotFoundError(RepositoryError):
    """Raised when no row matches the requested natural key."""
    pass
