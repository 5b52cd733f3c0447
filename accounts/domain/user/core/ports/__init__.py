"""User domain ports."""

from accounts.domain.user.core.ports.session_repository import ISessionRepository
from accounts.domain.user.core.ports.user_repository import IUserRepository

__all__ = ["ISessionRepository", "IUserRepository"]
