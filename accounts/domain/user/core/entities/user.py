"""User entity - aggregate root."""

from dataclasses import dataclass, field, replace
from typing import Mapping

from accounts.domain.user.core.value_objects.user_preferences import UserPreferences


@dataclass
class User:
    """User aggregate root.

    Represents a registered account. Primary identifier is the email.

    Invariants:
    - email must be non-empty and is immutable
    - at most one User per email (enforced by the user store)

    The password is an opaque credential blob and is not validated here.

    Examples:
        >>> user = User(email="alice@x.com", name="Alice", password="hash")
        >>> user.preferences.data
        {}

        >>> user.merge_preferences({"theme": "dark"})
        >>> user.preferences.get("theme")
        'dark'
    """

    email: str
    name: str
    password: str
    preferences: UserPreferences = field(default_factory=UserPreferences.default)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not isinstance(self.email, str) or not self.email.strip():
            raise ValueError("User email cannot be empty")

    def merge_preferences(self, updates: Mapping[str, str]) -> None:
        """Overwrite or insert the given preference keys.

        Keys not named in `updates` are left untouched.

        Args:
            updates: Preference key-value pairs to merge in

        Examples:
            >>> user = User(
            ...     email="alice@x.com",
            ...     name="Alice",
            ...     password="hash",
            ...     preferences=UserPreferences(data={"theme": "dark"}),
            ... )
            >>> user.merge_preferences({"lang": "en"})
            >>> user.preferences.data
            {'theme': 'dark', 'lang': 'en'}
        """
        self.preferences = self.preferences.with_values(updates)

    def copy(self) -> "User":
        """Return a detached copy (preferences dictionary included)."""
        return replace(self, preferences=UserPreferences(data=dict(self.preferences.data)))

    def __eq__(self, other: object) -> bool:
        """Equality based on email (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.email == other.email

    def __hash__(self) -> int:
        """Hash based on email (aggregate identity)."""
        return hash(self.email)
