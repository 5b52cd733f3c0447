"""User domain exceptions."""

from typing import Optional


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class DuplicateOrWriteError(UserDomainError):
    """The store rejected a write (duplicate key or any other write error)."""

    def __init__(self, identifier: str, reason: Optional[str] = None):
        """Initialize with the affected record identifier.

        Args:
            identifier: User name (on creation) or email of the affected record
            reason: Optional detail reported by the store
        """
        self.identifier = identifier
        self.reason = reason
        message = f"User {identifier} wasn't written"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidOperation(UserDomainError):
    """Caller contract violation or logically impossible state.

    Raised for a missing preference update set, an update targeting a
    nonexistent user, or a store failure while writing preferences.
    """

    pass
