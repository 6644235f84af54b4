"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from school_identity.domain.user.value_objects import UserRole


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``uid`` claim)
    username
        The user's login name (``sub`` claim)
    email
        The user's email address
    role
        The role the token was issued for
    token_id
        Unique token identifier (``jti`` claim)
    exp
        Token expiration timestamp
    """

    user_id: UUID
    username: str
    email: str
    role: UserRole
    token_id: str
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""

    token: str
    username: str
    email: str
    role: UserRole
