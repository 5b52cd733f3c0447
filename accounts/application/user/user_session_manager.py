"""User/session manager.

Entry point for the API layer. Coordinates the user store and the session
store so that:
- no user record is removed while its session survives
- preference updates merge into the stored mapping instead of replacing it
"""

from collections.abc import Mapping
from typing import Optional

import structlog

from accounts.domain.user.core.entities.session import Session
from accounts.domain.user.core.entities.user import User
from accounts.domain.user.core.exceptions.user_errors import (
    DuplicateOrWriteError,
    InvalidOperation,
)
from accounts.domain.user.core.ports.session_repository import ISessionRepository
from accounts.domain.user.core.ports.user_repository import IUserRepository
from accounts.domain.user.core.value_objects.user_preferences import UserPreferences

logger = structlog.get_logger(__name__)


class UserSessionManager:
    """Accounts operations over the user and session stores.

    Both stores are injected at construction and never replaced.

    Examples:
        >>> manager = UserSessionManager(InMemoryUserRepository(), InMemorySessionRepository())
        >>> await manager.add_user(User(email="alice@x.com", name="Alice", password="hash"))
        True
        >>> await manager.create_user_session("alice@x.com", "token")
        True
        >>> await manager.delete_user("alice@x.com")
        True
    """

    def __init__(self, users: IUserRepository, sessions: ISessionRepository) -> None:
        self._users = users
        self._sessions = sessions

    async def add_user(self, user: User) -> bool:
        """Insert a new user.

        Returns:
            True once the write is durable

        Raises:
            DuplicateOrWriteError: If the email already exists or the write is rejected
        """
        logger.debug("user.add", email=user.email)
        await self._users.add(user)
        return True

    async def create_user_session(self, user_id: str, jwt: str) -> bool:
        """Store `jwt` as the single active session of `user_id`.

        A store write failure is reported as False, never raised.
        """
        logger.debug("session.create", user_id=user_id)
        created = await self._sessions.upsert(user_id, jwt)
        if not created:
            logger.warning("session.create_not_acknowledged", user_id=user_id)
        return created

    async def get_user(self, email: str) -> Optional[User]:
        logger.debug("user.get", email=email)
        return await self._users.find_by_email(email)

    async def get_user_session(self, user_id: str) -> Optional[Session]:
        logger.debug("session.get", user_id=user_id)
        return await self._sessions.find_by_user_id(user_id)

    async def delete_user_sessions(self, user_id: str) -> bool:
        """Delete the session of `user_id`; deleting a missing session succeeds."""
        logger.debug("session.delete", user_id=user_id)
        return await self._sessions.delete_by_user_id(user_id)

    async def delete_user(self, email: str) -> bool:
        """Delete the session of a user, then the user itself.

        The user record is only deleted once the session delete was
        acknowledged. The two writes are not transactional: if the second
        one fails the user remains without a session.

        Args:
            email: User email (also the session user_id)

        Returns:
            True if both deletes were acknowledged
        """
        logger.debug("user.delete", email=email)

        if not await self.delete_user_sessions(email):
            logger.error("user.delete_sessions_failed", email=email)
            return False

        try:
            return await self._users.delete_by_email(email)
        except DuplicateOrWriteError as e:
            logger.error("user.delete_failed", email=email, error=str(e))
            return False

    async def update_user_preferences(
        self, email: str, updates: Optional[Mapping[str, str]]
    ) -> bool:
        """Merge `updates` into the stored preferences of a user.

        Every key in `updates` overwrites or inserts that key; other stored
        keys are kept. The merged mapping is written back in one update.

        The read and the write are separate round trips: two concurrent
        updates for the same email may both read the same mapping, and the
        later write wins.

        Args:
            email: User email
            updates: Preference key-value pairs (strings only)

        Returns:
            True if the write was acknowledged

        Raises:
            InvalidOperation: If `updates` is None or not a string mapping,
                the user does not exist, or the store rejects the write

        Examples:
            >>> await manager.update_user_preferences("alice@x.com", {"theme": "light"})
            True
        """
        if updates is None:
            raise InvalidOperation("Preference updates cannot be None")
        if not isinstance(updates, Mapping):
            raise InvalidOperation(
                f"Preference updates must be a mapping, got {type(updates).__name__}"
            )

        try:
            changes = UserPreferences(data=dict(updates))
        except TypeError as e:
            raise InvalidOperation(f"Invalid preference updates for {email}: {e}") from e

        logger.debug("user.update_preferences", email=email, keys=sorted(changes.data))

        user = await self._users.find_by_email(email)
        if user is None:
            raise InvalidOperation(f"User by email {email} not found")

        user.merge_preferences(changes.data)

        try:
            return await self._users.update_preferences(email, user.preferences)
        except DuplicateOrWriteError as e:
            raise InvalidOperation(
                f"Preferences of user {email} were not updated: {e.reason or e}"
            ) from e
