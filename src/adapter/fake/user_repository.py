"""In-memory implementation of UserRepository for testing."""

import uuid
from dataclasses import replace

from domain.model.errors import ConflictError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def save(self, user: User) -> User | None:
        user_id = user.id or uuid.uuid4().hex

        # same unique constraints as the MongoDB indexes
        for other in self.store.values():
            if other.id == user_id:
                continue
            if other.username == user.username or other.name == user.name:
                raise ConflictError("The username or name provided is already taken")

        stored = replace(user, id=user_id)
        self.store[user_id] = stored
        return replace(stored)

    # ── read operations ──────────────────────────────────────

    def find_all(self) -> list[User]:
        return [replace(u) for u in self.store.values()]

    def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return replace(user) if user else None

    def get_by_username(self, username: str) -> User | None:
        for user in self.store.values():
            if user.username == username:
                return replace(user)
        return None

    def get_by_name(self, name: str) -> User | None:
        for user in self.store.values():
            if user.name == name:
                return replace(user)
        return None

    def exists_by_username(self, username: str) -> bool:
        return any(u.username == username for u in self.store.values())

    def exists_by_name(self, name: str) -> bool:
        return any(u.name == name for u in self.store.values())
