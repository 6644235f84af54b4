"""Shared domain components.

This module exports shared exceptions, helpers and base classes used
across domain boundaries.
"""

from school.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    OutOfRangeError,
    ValidationError,
)
from school.domain.shared.identifiers import require_reference_id
from school.domain.shared.repository import Repository
from school.domain.shared.time import today_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "OutOfRangeError",
    "EntityNotFoundError",
    "ConflictError",
    # Base classes
    "Repository",
    # Utilities
    "require_reference_id",
    "today_utc",
    "utc_now",
]
