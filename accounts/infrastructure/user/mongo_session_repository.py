"""MongoDB Session Repository implementation."""

from typing import Any, Dict, Optional

import structlog
from pymongo.errors import OperationFailure

from accounts.domain.user.core.entities.session import Session
from accounts.domain.user.core.ports.session_repository import ISessionRepository
from accounts.infrastructure.persistence.mongodb.base import MongoBaseRepository

logger = structlog.get_logger(__name__)


class MongoSessionRepository(MongoBaseRepository[Session], ISessionRepository):
    """MongoDB implementation of Session repository.

    Collection `sessions`, one document per user_id (unique index):
    - user_id: User identifier
    - jwt: Active token

    Writes never raise on server-side failures (write errors, write concern
    errors, a rejected unique index build): the failure is logged and
    reported as False.
    """

    collection_name = "sessions"
    unique_key = "user_id"

    def to_document(self, session: Session) -> Dict[str, Any]:
        return {"user_id": session.user_id, "jwt": session.jwt}

    def from_document(self, doc: Dict[str, Any]) -> Session:
        return Session(user_id=doc["user_id"], jwt=doc["jwt"])

    async def upsert(self, user_id: str, jwt: str) -> bool:
        document = self.to_document(Session(user_id=user_id, jwt=jwt))
        try:
            result = await self._update_one({"user_id": user_id}, {"$set": document}, upsert=True)
        except OperationFailure as e:
            logger.error("session.upsert_failed", user_id=user_id, error=str(e))
            return False

        return bool(result.acknowledged)

    async def find_by_user_id(self, user_id: str) -> Optional[Session]:
        document = await self._find_one({"user_id": user_id})

        if not document:
            return None

        return self.from_document(document)

    async def delete_by_user_id(self, user_id: str) -> bool:
        try:
            result = await self._delete_one({"user_id": user_id})
        except OperationFailure as e:
            logger.error("session.delete_failed", user_id=user_id, error=str(e))
            return False

        return bool(result.acknowledged)
