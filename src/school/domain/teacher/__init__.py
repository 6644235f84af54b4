"""Teacher domain: profiles attached to user accounts."""

from school.domain.teacher.aggregates import TeacherProfile
from school.domain.teacher.exceptions import (
    TeacherHasCoursesError,
    TeacherNotFoundError,
    TeacherProfileAlreadyExistsError,
)
from school.domain.teacher.repositories import TeacherProfileRepository

__all__ = [
    "TeacherHasCoursesError",
    "TeacherNotFoundError",
    "TeacherProfile",
    "TeacherProfileAlreadyExistsError",
    "TeacherProfileRepository",
]
