# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations organized by aggregate."""

from school.infrastructure.persistence.sqlalchemy.repositories.course_repository import (
    CourseRepositorySQLAlchemy,
)
from school.infrastructure.persistence.sqlalchemy.repositories.enrollment_repository import (
    EnrollmentRepositorySQLAlchemy,
)
from school.infrastructure.persistence.sqlalchemy.repositories.student_profile_repository import (
    StudentProfileRepositorySQLAlchemy,
)
from school.infrastructure.persistence.sqlalchemy.repositories.teacher_profile_repository import (
    TeacherProfileRepositorySQLAlchemy,
)

__all__ = [
    "CourseRepositorySQLAlchemy",
    "EnrollmentRepositorySQLAlchemy",
    "StudentProfileRepositorySQLAlchemy",
    "TeacherProfileRepositorySQLAlchemy",
]
