"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class ConflictError(DomainError):
    """Entity with the same unique key already exists."""


class UnauthorizedError(DomainError):
    """Supplied credentials do not match the stored account."""


class InvalidArgumentError(DomainError):
    """Input violates a business validation rule."""
