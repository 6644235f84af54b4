"""Enrollment repository interface."""

from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from school.domain.enrollment.aggregates.enrollment import Enrollment
from school.domain.shared.repository import Repository


class EnrollmentRepository(Repository[Enrollment]):
    """Repository interface for Enrollment aggregates."""

    @abstractmethod
    async def find_by_student(self, student_profile_id: UUID) -> List[Enrollment]:
        """Find all enrollments of a student, with their courses populated."""

    @abstractmethod
    async def find_by_course(self, course_id: UUID) -> List[Enrollment]:
        """Find all enrollments of a course, with their students populated."""

    @abstractmethod
    async def is_enrolled(self, student_profile_id: UUID, course_id: UUID) -> bool:
        """Check whether the student is already enrolled in the course."""

    @abstractmethod
    async def find_with_details(self, enrollment_id: UUID) -> Optional[Enrollment]:
        """Find an enrollment with its student and course populated."""
