"""MongoDB implementation of UserRepository."""

import uuid
from dataclasses import replace
from datetime import date, datetime, timezone
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import ConflictError, DomainError
from domain.model.user import User, UserStatus

logger = getLogger(__name__)


def _as_stored(value: datetime) -> datetime:
    """Return ``value`` as BSON keeps it: UTC, millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]
    
    def ensure_indexes(self) -> bool:
        """Create indexes for users collection.

        The unique indexes on username and name are the storage-level
        guarantee behind the service's existence checks.
        """
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('username', 1)], 'idx_users_username', unique=True)
            create_index_safe(self.collection, [('name', 1)], 'idx_users_name', unique=True)
            create_index_safe(self.collection, [('creation_date', 1)], 'idx_users_creation_date')
            return True
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        birth_date = doc.get('birth_date')
        return User(
            id=doc['_id'],
            username=doc['username'],
            name=doc['name'],
            token=doc['token'],
            status=UserStatus(doc['status']),
            creation_date=_as_stored(doc['creation_date']),
            birth_date=date.fromisoformat(birth_date) if birth_date else None,
        )

    # ── write operations ─────────────────────────────────────

    def save(self, user: User) -> User | None:
        """Insert or update a user. Return the User as stored, or None on failure."""
        user_id = user.id or uuid.uuid4().hex
        creation_date = _as_stored(user.creation_date)
        doc = {
            'username': user.username,
            'name': user.name,
            'status': user.status.value,
            'birth_date': user.birth_date.isoformat() if user.birth_date else None,
        }
        try:
            # token and creation_date are written once and never rotated
            self.collection.update_one(
                {'_id': user_id},
                {
                    '$set': doc,
                    '$setOnInsert': {
                        '_id': user_id,
                        'token': user.token,
                        'creation_date': creation_date,
                    },
                },
                upsert=True,
            )
        except DuplicateKeyError:
            logger.warning("User save rejected: username or name already exists", extra={
                "userId": user_id, "username": user.username,
            })
            raise ConflictError("The username or name provided is already taken")
        except PyMongoError as e:
            logger.error("Failed to save user", extra={"userId": user_id, "error": str(e)})
            return None

        logger.debug("User saved", extra={"userId": user_id, "status": user.status.value})
        return replace(user, id=user_id, creation_date=creation_date)

    # ── read operations ──────────────────────────────────────
    # Read failures raise DomainError so an outage is never reported as "not found".

    def find_all(self) -> list[User]:
        """Return every user, oldest first."""
        try:
            docs = self.collection.find({}).sort('creation_date', 1)
            return [self._to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise DomainError("Failed to read users")

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        return self._find_one({'_id': user_id}, "userId", user_id)

    def get_by_username(self, username: str) -> User | None:
        """Find a user by username. Return User or None if not found."""
        return self._find_one({'username': username}, "username", username)

    def get_by_name(self, name: str) -> User | None:
        """Find a user by display name. Return User or None if not found."""
        return self._find_one({'name': name}, "displayName", name)

    def exists_by_username(self, username: str) -> bool:
        return self._exists({'username': username})

    def exists_by_name(self, name: str) -> bool:
        return self._exists({'name': name})

    def _find_one(self, query: dict, log_key: str, log_value: str) -> User | None:
        try:
            doc = self.collection.find_one(query)
        except PyMongoError as e:
            logger.error("Failed to get user", extra={log_key: log_value, "error": str(e)})
            raise DomainError("Failed to read user")
        if doc:
            return self._to_domain(doc)
        return None

    def _exists(self, query: dict) -> bool:
        try:
            return self.collection.count_documents(query, limit=1) > 0
        except PyMongoError as e:
            logger.error("Failed to check user existence", extra={"query": str(query), "error": str(e)})
            raise DomainError("Failed to read user")
