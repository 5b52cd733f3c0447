"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.user.core.entities.user import User
from accounts.domain.user.core.value_objects.user_preferences import UserPreferences


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Records are keyed by email. Implementations must guarantee at most one
    record per email.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def add(self, user: User) -> None:
        ...         # Insert into MongoDB
        ...         pass
    """

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user.

        Args:
            user: User entity to persist

        Raises:
            DuplicateOrWriteError: If a user with the same email exists
                or the store otherwise rejects the write

        Note:
            Returning normally means the write is durable (majority
            acknowledged where the store supports replication).
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email.

        Args:
            email: User email

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_preferences(self, email: str, preferences: UserPreferences) -> bool:
        """Replace the stored preferences mapping of a user in one write.

        Args:
            email: User email
            preferences: Full preferences mapping to store

        Returns:
            True if the write was acknowledged by the store

        Raises:
            DuplicateOrWriteError: If the store rejects the write
        """
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> bool:
        """Delete user by email.

        Args:
            email: User email

        Returns:
            True if the delete was acknowledged (also when nothing matched)

        Raises:
            DuplicateOrWriteError: If the store rejects the write
        """
        pass
