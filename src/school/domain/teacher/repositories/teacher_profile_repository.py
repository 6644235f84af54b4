"""Teacher profile repository interface."""

from abc import abstractmethod
from typing import List, Optional
from uuid import UUID

from school.domain.shared.repository import Repository
from school.domain.teacher.aggregates.teacher_profile import TeacherProfile


class TeacherProfileRepository(Repository[TeacherProfile]):
    """Repository interface for TeacherProfile aggregates."""

    @abstractmethod
    async def find_with_courses(self, teacher_id: UUID) -> Optional[TeacherProfile]:
        """Find a teacher with their courses populated."""

    @abstractmethod
    async def find_active(self) -> List[TeacherProfile]:
        """Find teachers whose user account is active, ordered by name."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> Optional[TeacherProfile]:
        """Find the teacher profile owned by a user."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[TeacherProfile]:
        """Find a teacher through their user's email address."""
