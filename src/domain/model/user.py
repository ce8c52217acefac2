# domain/model/user.py

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class UserStatus(str, Enum):
    """Presence state of a user account."""
    ONLINE = 'ONLINE'
    OFFLINE = 'OFFLINE'


@dataclass
class User:
    """Domain model representing a user account.

    ``name`` doubles as the login credential and is never edited after
    registration. ``id`` stays ``None`` until the repository stores the user.
    """
    username: str
    name: str
    token: str
    status: UserStatus
    creation_date: datetime
    id: str | None = None
    birth_date: date | None = None


@dataclass(frozen=True)
class ProfileChanges:
    """Partial profile update. ``None`` members are left untouched."""
    username: str | None = None
    birth_date: str | None = None
