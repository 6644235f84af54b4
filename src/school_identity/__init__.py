"""School Identity - users, credentials and tokens.

This package handles all identity-related concerns:
- User management (username, email, role, active flag)
- Password hashing and verification
- JWT issuance and verification

Student and teacher profiles live in the core ``school`` package and
only reference the user by id.
"""

from school_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from school_identity.exceptions import AuthError, InvalidTokenError
from school_identity.schemas import AuthResult, TokenPayload
from school_identity.services import JWTService, PasswordHashingService

__all__ = [
    # Domain - User
    "EmailAlreadyExistsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UsernameAlreadyExistsError",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    # Schemas
    "AuthResult",
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
]
