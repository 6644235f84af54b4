"""Application service for student profiles."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from school.domain.student import StudentProfile, StudentProfileAlreadyExistsError
from school_identity import UserNotFoundError

if TYPE_CHECKING:
    from school.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


class StudentService:
    """Create, read, update and delete student profiles.

    Lookups that find nothing return None (or False for deletes) rather
    than raising.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def list_students(self) -> List[StudentProfile]:
        return await self._uow.student_profiles.find_all()

    async def get_student(self, student_id: UUID) -> Optional[StudentProfile]:
        return await self._uow.student_profiles.find_by_id(student_id)

    async def get_student_with_enrollments(
        self,
        student_id: UUID,
    ) -> Optional[StudentProfile]:
        return await self._uow.student_profiles.find_with_enrollments(student_id)

    async def list_active_students(self) -> List[StudentProfile]:
        return await self._uow.student_profiles.find_active()

    async def create_student(
        self,
        user_id: UUID,
        full_name: str,
        birth_date: date,
    ) -> StudentProfile:
        """Create the student profile of an existing user.

        Raises
        ------
        UserNotFoundError
            If the user does not exist
        StudentProfileAlreadyExistsError
            If the user already has a student profile
        ValidationError
            If name or birth date are invalid
        """
        student = StudentProfile.create(user_id, full_name, birth_date)

        if not await self._uow.users.exists(student.user_id):
            raise UserNotFoundError(student.user_id)
        if await self._uow.student_profiles.find_by_user_id(student.user_id):
            raise StudentProfileAlreadyExistsError(student.user_id)

        await self._uow.student_profiles.add(student)
        await self._uow.save_changes()

        logger.info("Student created: %s (%s)", student.full_name, student.id)
        return student

    async def update_student(
        self,
        student_id: UUID,
        full_name: str,
    ) -> Optional[StudentProfile]:
        student = await self._uow.student_profiles.find_by_id(student_id)
        if student is None:
            return None

        student.update_full_name(full_name)
        await self._uow.student_profiles.update(student)
        await self._uow.save_changes()
        return student

    async def delete_student(self, student_id: UUID) -> bool:
        """Delete a student together with all of their enrollments."""
        student = await self._uow.student_profiles.find_by_id(student_id)
        if student is None:
            return False

        enrollments = await self._uow.enrollments.find_by_student(student_id)
        for enrollment in enrollments:
            await self._uow.enrollments.delete(enrollment)

        await self._uow.student_profiles.delete(student)
        await self._uow.save_changes()

        logger.info(
            "Student deleted: %s (%d enrollment(s) removed)",
            student_id,
            len(enrollments),
        )
        return True

    async def student_exists(self, student_id: UUID) -> bool:
        return await self._uow.student_profiles.exists(student_id)
