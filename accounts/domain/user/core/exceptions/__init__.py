"""User domain exceptions."""

from accounts.domain.user.core.exceptions.user_errors import (
    DuplicateOrWriteError,
    InvalidOperation,
    UserDomainError,
)

__all__ = ["DuplicateOrWriteError", "InvalidOperation", "UserDomainError"]
