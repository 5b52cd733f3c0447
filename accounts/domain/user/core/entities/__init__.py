"""User domain entities."""

from accounts.domain.user.core.entities.session import Session
from accounts.domain.user.core.entities.user import User

__all__ = ["Session", "User"]
