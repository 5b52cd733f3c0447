"""Session entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Active session token of a user.

    At most one Session exists per `user_id`; issuing a new token for the
    same user replaces the stored one.

    Examples:
        >>> session = Session(user_id="alice@x.com", jwt="eyJhbGciOi...")
        >>> session.user_id
        'alice@x.com'
    """

    user_id: str
    jwt: str

    def __repr__(self) -> str:
        """Developer-friendly representation (token is not printed)."""
        return f"Session(user_id='{self.user_id}')"
