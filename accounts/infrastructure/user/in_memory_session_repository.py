"""In-memory Session Repository for testing."""

from typing import Dict, Optional

from accounts.domain.user.core.entities.session import Session
from accounts.domain.user.core.ports.session_repository import ISessionRepository


class InMemorySessionRepository(ISessionRepository):
    """In-memory implementation of Session repository for testing.

    Stores one session per user_id; upsert replaces the stored token.
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._sessions: Dict[str, Session] = {}

    async def upsert(self, user_id: str, jwt: str) -> bool:
        self._sessions[user_id] = Session(user_id=user_id, jwt=jwt)
        return True

    async def find_by_user_id(self, user_id: str) -> Optional[Session]:
        return self._sessions.get(user_id)

    async def delete_by_user_id(self, user_id: str) -> bool:
        self._sessions.pop(user_id, None)
        return True

    def clear(self) -> None:
        """Clear all sessions from memory."""
        self._sessions.clear()

    def count(self) -> int:
        """Get total number of sessions in memory."""
        return len(self._sessions)
