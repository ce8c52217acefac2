"""User service — registration, presence and profile business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import re
import uuid
from datetime import date, datetime, timezone

from domain.model.errors import ConflictError, DomainError, InvalidArgumentError, NotFoundError, UnauthorizedError
from domain.model.user import ProfileChanges, User, UserStatus
from port.user_repository import UserRepository

BIRTH_DATE_FORMAT = "%d-%m-%Y"
_BIRTH_DATE_PATTERN = re.compile(r"^\d{2}-\d{2}-\d{4}$")

_TAKEN_MESSAGE = "The {} provided {} already taken. Therefore, the user could not be created!"


def _parse_birth_date(value: str) -> date:
    """Parse a DD-MM-YYYY birth date, rejecting impossible calendar dates."""
    if not _BIRTH_DATE_PATTERN.match(value):
        raise InvalidArgumentError(f"Birth date '{value}' must use the DD-MM-YYYY format")
    try:
        return datetime.strptime(value, BIRTH_DATE_FORMAT).date()
    except ValueError:
        raise InvalidArgumentError(f"Birth date '{value}' is not a valid calendar date")


def _check_registration_unique(repo: UserRepository, username: str, name: str) -> None:
    username_taken = repo.exists_by_username(username)
    name_taken = repo.exists_by_name(name)

    if username_taken and name_taken:
        raise ConflictError(_TAKEN_MESSAGE.format("username and the name", "are"))
    if username_taken:
        raise ConflictError(_TAKEN_MESSAGE.format("username", "is"))
    if name_taken:
        raise ConflictError(_TAKEN_MESSAGE.format("name", "is"))


def _save(repo: UserRepository, user: User) -> User:
    saved = repo.save(user)
    if not saved:
        raise DomainError("Failed to save user")
    return saved


def list_users(repo: UserRepository) -> list[User]:
    return repo.find_all()


def get_user(repo: UserRepository, user_id: str) -> User:
    """Return the user with this ID.

    Raises:
        NotFoundError: no user has this ID
    """
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("This user does not exist!")
    return user


def register(repo: UserRepository, username: str, name: str) -> User:
    """Register a new user and mark them online.

    Returns the stored User, including its generated id and token.

    Raises:
        InvalidArgumentError: username or name is blank
        ConflictError: username and/or name already taken
    """
    if not username or not username.strip():
        raise InvalidArgumentError("Username must not be empty")
    if not name or not name.strip():
        raise InvalidArgumentError("Name must not be empty")

    _check_registration_unique(repo, username, name)

    user = User(
        username=username,
        name=name,
        token=str(uuid.uuid4()),
        status=UserStatus.ONLINE,
        creation_date=datetime.now(timezone.utc),
    )
    return _save(repo, user)


def authenticate(repo: UserRepository, username: str, name: str) -> User:
    """Log a user in by username and name.

    The name is compared exactly (case-sensitive); it is the only credential.

    Raises:
        NotFoundError: no user has this username
        UnauthorizedError: name does not match
    """
    user = repo.get_by_username(username)
    if not user:
        raise NotFoundError("The user with the given username does not exist!")
    if user.name != name:
        raise UnauthorizedError("The name is incorrect!")

    user.status = UserStatus.ONLINE
    return _save(repo, user)


def deauthenticate(repo: UserRepository, user_id: str) -> User:
    """Log a user out. Logging out an offline user is a no-op success.

    Raises:
        NotFoundError: no user has this ID
    """
    user = get_user(repo, user_id)
    user.status = UserStatus.OFFLINE
    return _save(repo, user)


def edit_profile(repo: UserRepository, user: User, changes: ProfileChanges) -> None:
    """Apply a partial profile update to an already resolved user.

    Every change is validated before any field is assigned, so a failed
    edit leaves the stored user untouched. Nothing is written when no
    field actually changes.

    Raises:
        ConflictError: another user already owns the new username
        InvalidArgumentError: username is blank, or birth date is not a valid
            DD-MM-YYYY date
    """
    new_username = None
    if changes.username and not changes.username.strip():
        raise InvalidArgumentError("Username must not be blank")
    if changes.username and changes.username != user.username:
        if repo.exists_by_username(changes.username):
            raise ConflictError("The username provided is not unique. Please choose a different username!")
        new_username = changes.username

    new_birth_date = None
    if changes.birth_date is not None:
        new_birth_date = _parse_birth_date(changes.birth_date)

    changed = False
    if new_username is not None:
        user.username = new_username
        changed = True
    if new_birth_date is not None and new_birth_date != user.birth_date:
        user.birth_date = new_birth_date
        changed = True

    if changed:
        _save(repo, user)
