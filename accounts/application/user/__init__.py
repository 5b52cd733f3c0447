"""User application layer."""

from accounts.application.user.user_session_manager import UserSessionManager

__all__ = ["UserSessionManager"]
