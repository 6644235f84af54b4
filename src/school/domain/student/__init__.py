"""Student domain: profiles attached to user accounts."""

from school.domain.student.aggregates import StudentProfile
from school.domain.student.exceptions import (
    StudentNotFoundError,
    StudentProfileAlreadyExistsError,
)
from school.domain.student.repositories import StudentProfileRepository

__all__ = [
    "StudentNotFoundError",
    "StudentProfile",
    "StudentProfileAlreadyExistsError",
    "StudentProfileRepository",
]
