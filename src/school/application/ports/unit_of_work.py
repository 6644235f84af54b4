"""Unit of work port for the application layer."""

from __future__ import annotations

from typing import Protocol

from school.domain.course import CourseRepository
from school.domain.enrollment import EnrollmentRepository
from school.domain.student import StudentProfileRepository
from school.domain.teacher import TeacherProfileRepository
from school_identity.domain.user import UserRepository


class UnitOfWork(Protocol):
    """Protocol giving services access to repositories and the commit boundary.

    All repositories share one transaction. Nothing becomes durable until
    ``save_changes`` is awaited.
    """

    @property
    def users(self) -> UserRepository:
        """Get user repository."""
        ...

    @property
    def student_profiles(self) -> StudentProfileRepository:
        """Get student profile repository."""
        ...

    @property
    def teacher_profiles(self) -> TeacherProfileRepository:
        """Get teacher profile repository."""
        ...

    @property
    def courses(self) -> CourseRepository:
        """Get course repository."""
        ...

    @property
    def enrollments(self) -> EnrollmentRepository:
        """Get enrollment repository."""
        ...

    async def save_changes(self) -> int:
        """Commit staged changes and return the number of affected rows."""
        ...

    async def rollback(self) -> None:
        """Discard staged changes."""
        ...
