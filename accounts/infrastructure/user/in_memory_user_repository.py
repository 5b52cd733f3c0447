"""In-memory User Repository for testing."""

from typing import Dict, Optional

from accounts.domain.user.core.entities.user import User
from accounts.domain.user.core.exceptions.user_errors import DuplicateOrWriteError
from accounts.domain.user.core.ports.user_repository import IUserRepository
from accounts.domain.user.core.value_objects.user_preferences import UserPreferences


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores detached copies of users keyed by email, so callers mutating a
    returned entity never change the stored record.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> await repo.add(User(email="alice@x.com", name="Alice", password="hash"))
        >>> found = await repo.find_by_email("alice@x.com")
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}

    async def add(self, user: User) -> None:
        """Insert user in memory.

        Raises:
            DuplicateOrWriteError: If the email is already stored
        """
        if user.email in self._users:
            raise DuplicateOrWriteError(user.name, f"duplicate key: email {user.email}")

        self._users[user.email] = user.copy()

    async def find_by_email(self, email: str) -> Optional[User]:
        user = self._users.get(email)
        return user.copy() if user is not None else None

    async def update_preferences(self, email: str, preferences: UserPreferences) -> bool:
        """Replace stored preferences; a missing email matches nothing but is acknowledged."""
        user = self._users.get(email)
        if user is not None:
            user.preferences = UserPreferences(data=dict(preferences.data))
        return True

    async def delete_by_email(self, email: str) -> bool:
        self._users.pop(email, None)
        return True

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
