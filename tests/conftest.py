"""Shared test fixtures.

Unit tests run against the in-memory stores or AsyncMock-backed motor
collections. Tests marked `integration_real` need a running MongoDB and
are skipped unless USER_REPOSITORY=mongodb.
"""

from pathlib import Path
from typing import Generator

import pytest
import structlog
from dotenv import load_dotenv

from accounts.application.user.user_session_manager import UserSessionManager
from accounts.domain.user.core.entities.user import User
from accounts.domain.user.core.value_objects.user_preferences import UserPreferences
from accounts.infrastructure.user.in_memory_session_repository import (
    InMemorySessionRepository,
)
from accounts.infrastructure.user.in_memory_user_repository import InMemoryUserRepository

# .env.test overrides the environment for integration_real runs
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None, None, None]:
    """Undo any structlog.configure() done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Create fresh in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    """Create fresh in-memory session repository."""
    return InMemorySessionRepository()


@pytest.fixture
def manager(
    user_repository: InMemoryUserRepository,
    session_repository: InMemorySessionRepository,
) -> UserSessionManager:
    """Manager over the in-memory stores."""
    return UserSessionManager(user_repository, session_repository)


@pytest.fixture
def alice() -> User:
    """Sample user with one stored preference."""
    return User(
        email="alice@x.com",
        name="Alice",
        password="$2b$12$opaque",
        preferences=UserPreferences(data={"theme": "dark"}),
    )


@pytest.fixture
def bob() -> User:
    """Sample user without preferences."""
    return User(email="bob@x.com", name="Bob", password="$2b$12$opaque")
