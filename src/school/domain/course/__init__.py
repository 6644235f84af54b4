"""Course domain."""

from school.domain.course.aggregates import Course
from school.domain.course.exceptions import (
    CourseHasEnrollmentsError,
    CourseNotFoundError,
)
from school.domain.course.repositories import CourseRepository

__all__ = [
    "Course",
    "CourseHasEnrollmentsError",
    "CourseNotFoundError",
    "CourseRepository",
]
