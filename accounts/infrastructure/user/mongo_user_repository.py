"""MongoDB User Repository implementation."""

from typing import Any, Dict, Optional

from pymongo.errors import WriteConcernError, WriteError
from pymongo.write_concern import WriteConcern

from accounts.domain.user.core.entities.user import User
from accounts.domain.user.core.exceptions.user_errors import DuplicateOrWriteError
from accounts.domain.user.core.ports.user_repository import IUserRepository
from accounts.domain.user.core.value_objects.user_preferences import UserPreferences
from accounts.infrastructure.persistence.mongodb.base import MongoBaseRepository

MAJORITY = WriteConcern(w="majority")


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Collection `users`, one document per email:
    - email: Unique identifier (unique index)
    - name: Display name
    - password: Opaque credential blob
    - preferences: Mapping of string keys to string values (may be absent)

    User creation is acknowledged by a majority of replica set members
    before returning.

    Examples:
        >>> repo = MongoUserRepository(db)
        >>> await repo.add(User(email="alice@x.com", name="Alice", password="hash"))
        >>> found = await repo.find_by_email("alice@x.com")
    """

    collection_name = "users"
    unique_key = "email"

    def to_document(self, user: User) -> Dict[str, Any]:
        return {
            "email": user.email,
            "name": user.name,
            "password": user.password,
            "preferences": dict(user.preferences.data),
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        return User(
            email=doc["email"],
            name=doc.get("name", ""),
            password=doc.get("password", ""),
            preferences=UserPreferences.from_stored(doc.get("preferences")),
        )

    async def add(self, user: User) -> None:
        """Insert user with majority write concern.

        Raises:
            DuplicateOrWriteError: On duplicate email or any rejected write
        """
        try:
            await self._insert_one(self.to_document(user), write_concern=MAJORITY)
        except (WriteError, WriteConcernError) as e:
            raise DuplicateOrWriteError(user.name, str(e)) from e

    async def find_by_email(self, email: str) -> Optional[User]:
        document = await self._find_one({"email": email})

        if not document:
            return None

        return self.from_document(document)

    async def update_preferences(self, email: str, preferences: UserPreferences) -> bool:
        """Set the full preferences mapping in a single update.

        Returns:
            True if the update was acknowledged
        """
        try:
            result = await self._update_one(
                {"email": email},
                {"$set": {"preferences": dict(preferences.data)}},
            )
        except (WriteError, WriteConcernError) as e:
            raise DuplicateOrWriteError(email, str(e)) from e

        return bool(result.acknowledged)

    async def delete_by_email(self, email: str) -> bool:
        try:
            result = await self._delete_one({"email": email})
        except (WriteError, WriteConcernError) as e:
            raise DuplicateOrWriteError(email, str(e)) from e

        return bool(result.acknowledged)
