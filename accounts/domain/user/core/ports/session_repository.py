"""Session repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.user.core.entities.session import Session


class ISessionRepository(ABC):
    """Repository interface for user sessions.

    Holds at most one Session per user identifier. Write failures are
    reported through the boolean result, never raised.
    """

    @abstractmethod
    async def upsert(self, user_id: str, jwt: str) -> bool:
        """Create the session of `user_id`, or replace its token.

        Args:
            user_id: User identifier
            jwt: Token to store

        Returns:
            True if the write was acknowledged, False on a write error
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[Session]:
        """Find the session of a user.

        Args:
            user_id: User identifier

        Returns:
            Session if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: str) -> bool:
        """Delete the session of a user.

        Args:
            user_id: User identifier

        Returns:
            True if the delete was acknowledged (also when no session existed),
            False on a write error
        """
        pass
