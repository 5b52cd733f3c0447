"""User domain value objects."""

from accounts.domain.user.core.value_objects.user_preferences import UserPreferences

__all__ = ["UserPreferences"]
