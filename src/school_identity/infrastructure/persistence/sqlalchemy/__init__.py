"""SQLAlchemy implementation for school_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from school_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from school_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from school_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
