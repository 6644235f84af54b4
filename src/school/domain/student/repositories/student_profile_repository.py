"""Student profile repository interface."""

from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from school.domain.shared.repository import Repository
from school.domain.student.aggregates.student_profile import StudentProfile


class StudentProfileRepository(Repository[StudentProfile]):
    """Repository interface for StudentProfile aggregates."""

    @abstractmethod
    async def find_with_enrollments(self, student_id: UUID) -> Optional[StudentProfile]:
        """Find a student with its enrollments populated."""

    @abstractmethod
    async def find_active(self) -> List[StudentProfile]:
        """Find students whose user account is active, ordered by name."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> Optional[StudentProfile]:
        """Find the student profile owned by a user."""
