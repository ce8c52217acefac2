from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Lookups return None only when no user matches; a storage failure
    during a read raises DomainError.
    """
    def find_all(self) -> list[User]:
        """Return every stored user in repository order."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def get_by_username(self, username: str) -> User | None:
        """Find a user by username. Return User or None if not found."""
        ...

    def get_by_name(self, name: str) -> User | None:
        """Find a user by display name. Return User or None if not found."""
        ...

    def exists_by_username(self, username: str) -> bool:
        """Return True if any user owns this username."""
        ...

    def exists_by_name(self, name: str) -> bool:
        """Return True if any user owns this display name."""
        ...

    def save(self, user: User) -> User | None:
        """Insert or update a user, assigning an ID on first save.

        Return the stored User once the write is committed, or None if the
        write failed. Raise ConflictError when a unique constraint on
        username or name rejects the write.
        """
        ...
