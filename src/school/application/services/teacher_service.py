"""Application service for teacher profiles."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from school.domain.teacher import (
    TeacherHasCoursesError,
    TeacherProfile,
    TeacherProfileAlreadyExistsError,
)
from school_identity import UserNotFoundError

if TYPE_CHECKING:
    from school.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


class TeacherService:
    """Create, read, update and delete teacher profiles."""

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def list_teachers(self) -> List[TeacherProfile]:
        return await self._uow.teacher_profiles.find_all()

    async def get_teacher(self, teacher_id: UUID) -> Optional[TeacherProfile]:
        return await self._uow.teacher_profiles.find_by_id(teacher_id)

    async def get_teacher_with_courses(
        self,
        teacher_id: UUID,
    ) -> Optional[TeacherProfile]:
        return await self._uow.teacher_profiles.find_with_courses(teacher_id)

    async def get_teacher_by_email(self, email: str) -> Optional[TeacherProfile]:
        return await self._uow.teacher_profiles.find_by_email(email)

    async def list_active_teachers(self) -> List[TeacherProfile]:
        return await self._uow.teacher_profiles.find_active()

    async def create_teacher(
        self,
        user_id: UUID,
        full_name: str,
        hire_date: date,
    ) -> TeacherProfile:
        """Create the teacher profile of an existing user.

        Raises
        ------
        UserNotFoundError
            If the user does not exist
        TeacherProfileAlreadyExistsError
            If the user already has a teacher profile
        ValidationError
            If name or hire date are invalid
        """
        teacher = TeacherProfile.create(user_id, full_name, hire_date)

        if not await self._uow.users.exists(teacher.user_id):
            raise UserNotFoundError(teacher.user_id)
        if await self._uow.teacher_profiles.find_by_user_id(teacher.user_id):
            raise TeacherProfileAlreadyExistsError(teacher.user_id)

        await self._uow.teacher_profiles.add(teacher)
        await self._uow.save_changes()

        logger.info("Teacher created: %s (%s)", teacher.full_name, teacher.id)
        return teacher

    async def update_teacher(
        self,
        teacher_id: UUID,
        full_name: str,
    ) -> Optional[TeacherProfile]:
        teacher = await self._uow.teacher_profiles.find_by_id(teacher_id)
        if teacher is None:
            return None

        teacher.update_full_name(full_name)
        await self._uow.teacher_profiles.update(teacher)
        await self._uow.save_changes()
        return teacher

    async def delete_teacher(self, teacher_id: UUID) -> bool:
        """Delete a teacher who has no courses left.

        Raises
        ------
        TeacherHasCoursesError
            If courses are still assigned to the teacher
        """
        teacher = await self._uow.teacher_profiles.find_with_courses(teacher_id)
        if teacher is None:
            return False

        if teacher.courses:
            raise TeacherHasCoursesError(teacher_id, len(teacher.courses))

        await self._uow.teacher_profiles.delete(teacher)
        await self._uow.save_changes()

        logger.info("Teacher deleted: %s", teacher_id)
        return True

    async def teacher_exists(self, teacher_id: UUID) -> bool:
        return await self._uow.teacher_profiles.exists(teacher_id)
