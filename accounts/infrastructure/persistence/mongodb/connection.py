"""MongoDB client lifecycle.

One MongoConnection owns one motor client for the lifetime of the process
(or of a test). Repositories receive the database handle it yields and
never create clients of their own.

Usage:
    async with MongoConnection(uri, "accounts") as db:
        users = MongoUserRepository(db)
"""

from types import TracebackType
from typing import Any, Optional, Type

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = structlog.get_logger(__name__)


class MongoConnection:
    """Async context manager opening and closing a motor client."""

    def __init__(self, uri: str, database_name: str, **client_options: Any) -> None:
        """
        Args:
            uri: MongoDB connection string
            database_name: Database holding the `users` and `sessions` collections
            **client_options: Extra keyword arguments for AsyncIOMotorClient
        """
        if not uri:
            raise ValueError("MongoDB URI cannot be empty")
        self._uri = uri
        self._database_name = database_name
        self._client_options = client_options
        self._client: Optional[AsyncIOMotorClient] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def __aenter__(self) -> AsyncIOMotorDatabase:
        self._client = AsyncIOMotorClient(self._uri, **self._client_options)
        logger.info("mongo.connection_opened", database=self._database_name)
        return self._client[self._database_name]

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("mongo.connection_closed", database=self._database_name)
