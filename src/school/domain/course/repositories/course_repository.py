"""Course repository interface."""

from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from school.domain.course.aggregates.course import Course
from school.domain.shared.repository import Repository


class CourseRepository(Repository[Course]):
    """Repository interface for Course aggregates."""

    @abstractmethod
    async def find_with_details(self, course_id: UUID) -> Optional[Course]:
        """Find a course with its teacher and enrollments populated."""

    @abstractmethod
    async def find_by_teacher(self, teacher_profile_id: UUID) -> List[Course]:
        """Find the courses of one teacher, ordered by title."""
