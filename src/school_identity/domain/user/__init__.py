"""User domain manages login identity only.

This domain handles:
- User aggregate (username, email, password hash, role, active flag)
- Role definitions used for authorization

Student and teacher data are handled by their own profile aggregates.
"""

from school_identity.domain.user.aggregates import User
from school_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
)
from school_identity.domain.user.repositories import UserRepository
from school_identity.domain.user.value_objects import UserRole

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UsernameAlreadyExistsError",
]
