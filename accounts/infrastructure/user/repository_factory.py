"""User/session manager factory for environment-based store selection.

The store backend is chosen by the USER_REPOSITORY setting:
- "inmemory": InMemoryUserRepository + InMemorySessionRepository (for testing)
- "mongodb": MongoUserRepository + MongoSessionRepository (for production)

Default: inmemory

The MongoDB handle is never cached at module level: `open_user_session_manager`
owns the connection for the duration of the `async with` block, which is
meant to wrap the process startup/shutdown sequence.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase

from accounts.application.user.user_session_manager import UserSessionManager
from accounts.infrastructure.config import Settings, load_settings
from accounts.infrastructure.logging_config import configure_logging
from accounts.infrastructure.persistence.mongodb.connection import MongoConnection
from accounts.infrastructure.user.in_memory_session_repository import (
    InMemorySessionRepository,
)
from accounts.infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from accounts.infrastructure.user.mongo_session_repository import MongoSessionRepository
from accounts.infrastructure.user.mongo_user_repository import MongoUserRepository

logger = structlog.get_logger(__name__)


def create_user_session_manager(
    settings: Optional[Settings] = None,
    db: Optional[AsyncIOMotorDatabase] = None,
) -> UserSessionManager:
    """Create a manager bound to the configured stores.

    Args:
        settings: Runtime settings (loaded from the environment if None)
        db: Database handle, required for the mongodb backend

    Returns:
        UserSessionManager over the selected stores

    Raises:
        ValueError: If mongodb is selected without a database handle
    """
    settings = settings or load_settings()

    if settings.user_repository == "mongodb":
        if db is None:
            raise ValueError("A database handle is required when USER_REPOSITORY=mongodb")
        return UserSessionManager(MongoUserRepository(db), MongoSessionRepository(db))

    return UserSessionManager(InMemoryUserRepository(), InMemorySessionRepository())


@asynccontextmanager
async def open_user_session_manager(
    settings: Optional[Settings] = None,
) -> AsyncIterator[UserSessionManager]:
    """Open the configured stores and yield a manager over them.

    For the mongodb backend the client is closed when the block exits.

    Examples:
        >>> async with open_user_session_manager() as manager:
        ...     await manager.get_user("alice@x.com")
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger.info("accounts.startup", backend=settings.user_repository)

    try:
        if settings.user_repository == "mongodb":
            if not settings.mongodb_uri:
                raise ValueError("MONGODB_URI is required when USER_REPOSITORY=mongodb")
            async with MongoConnection(settings.mongodb_uri, settings.mongodb_database) as db:
                yield create_user_session_manager(settings, db)
        else:
            yield create_user_session_manager(settings)
    finally:
        logger.info("accounts.shutdown", backend=settings.user_repository)
