"""UserPreferences value object."""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class UserPreferences:
    """User application preferences value object.

    A mapping from string key to string value.
    Immutable - use `with_values()` to create merged copies.

    Examples:
        >>> prefs = UserPreferences.default()
        >>> prefs.data
        {}

        >>> prefs = UserPreferences(data={"theme": "dark", "language": "it"})
        >>> prefs.get("theme")
        'dark'

        >>> prefs2 = prefs.with_values({"theme": "light"})
        >>> prefs2.data
        {'theme': 'light', 'language': 'it'}

    Note:
        This value object is immutable. Each modification returns a new instance.
    """

    data: Dict[str, str]

    def __post_init__(self) -> None:
        """Validate preferences data."""
        if not isinstance(self.data, dict):
            raise TypeError("Preferences data must be a dictionary")

        for key, value in self.data.items():
            if not isinstance(key, str):
                raise TypeError(f"Preference key must be a string: {key!r}")
            if not isinstance(value, str):
                raise TypeError(f"Preference '{key}' must have a string value, got {value!r}")

    @staticmethod
    def default() -> "UserPreferences":
        """Create default empty preferences.

        Returns:
            UserPreferences with empty data dictionary
        """
        return UserPreferences(data={})

    @staticmethod
    def from_stored(data: Optional[Mapping[str, str]]) -> "UserPreferences":
        """Build preferences from a stored mapping, treating a missing one as empty.

        Args:
            data: Stored preferences mapping, or None when absent

        Returns:
            UserPreferences holding a private copy of the data
        """
        if data is None:
            return UserPreferences.default()
        return UserPreferences(data=dict(data))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get preference value by key.

        Args:
            key: Preference key
            default: Default value if key not found

        Returns:
            Preference value or default

        Examples:
            >>> prefs = UserPreferences(data={"theme": "dark"})
            >>> prefs.get("theme")
            'dark'
            >>> prefs.get("missing", "default_value")
            'default_value'
        """
        return self.data.get(key, default)

    def with_values(self, updates: Mapping[str, str]) -> "UserPreferences":
        """Return new preferences with the given keys overwritten or inserted.

        Keys absent from `updates` keep their current value.

        Args:
            updates: Key-value pairs to merge in

        Returns:
            New UserPreferences instance with merged data

        Examples:
            >>> prefs = UserPreferences(data={"theme": "dark"})
            >>> prefs.with_values({"theme": "light", "lang": "en"}).data
            {'theme': 'light', 'lang': 'en'}
        """
        new_data = self.data.copy()
        new_data.update(updates)
        return UserPreferences(data=new_data)

    def __contains__(self, key: str) -> bool:
        """Check if preference key exists."""
        return key in self.data

    def __len__(self) -> int:
        """Return number of preferences."""
        return len(self.data)
