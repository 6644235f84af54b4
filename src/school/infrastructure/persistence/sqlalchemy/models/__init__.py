# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for the school domain."""

from school.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from school.infrastructure.persistence.sqlalchemy.models.course_model import (
    CourseModel,
)
from school.infrastructure.persistence.sqlalchemy.models.enrollment_model import (
    EnrollmentModel,
)
from school.infrastructure.persistence.sqlalchemy.models.student_profile_model import (
    StudentProfileModel,
)
from school.infrastructure.persistence.sqlalchemy.models.teacher_profile_model import (
    TeacherProfileModel,
)

__all__ = [
    "Base",
    "CourseModel",
    "EnrollmentModel",
    "StudentProfileModel",
    "TeacherProfileModel",
    "TimestampMixin",
]
