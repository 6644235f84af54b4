"""Application service for courses."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from school.domain.course import Course, CourseHasEnrollmentsError
from school.domain.shared.identifiers import require_reference_id
from school.domain.teacher import TeacherNotFoundError

if TYPE_CHECKING:
    from school.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


class CourseService:
    """Create, read, update and delete courses.

    Enforces the rules the Course aggregate cannot check on its own:
    the assigned teacher must exist, and a course with enrollments
    cannot be deleted.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def list_courses(self) -> List[Course]:
        return await self._uow.courses.find_all()

    async def get_course(self, course_id: UUID) -> Optional[Course]:
        return await self._uow.courses.find_by_id(course_id)

    async def get_course_with_details(self, course_id: UUID) -> Optional[Course]:
        return await self._uow.courses.find_with_details(course_id)

    async def list_courses_by_teacher(self, teacher_profile_id: UUID) -> List[Course]:
        return await self._uow.courses.find_by_teacher(teacher_profile_id)

    async def create_course(
        self,
        title: str,
        teacher_profile_id: UUID,
        start_date: date,
        description: Optional[str] = None,
    ) -> Course:
        """Create a course for an existing teacher.

        Returns the course reloaded with its details.

        Raises
        ------
        TeacherNotFoundError
            If the teacher profile does not exist
        ValidationError
            If any course field is invalid
        """
        course = Course.create(title, teacher_profile_id, start_date, description)
        await self._ensure_teacher_exists(course.teacher_profile_id)

        await self._uow.courses.add(course)
        await self._uow.save_changes()

        logger.info("Course created: %s (%s)", course.title, course.id)
        return await self._uow.courses.find_with_details(course.id) or course

    async def update_course(  # NOQA: PLR0913
        self,
        course_id: UUID,
        title: str,
        teacher_profile_id: UUID,
        start_date: date,
        description: Optional[str] = None,
    ) -> Optional[Course]:
        """Replace the editable fields of a course.

        Returns None if the course does not exist.

        Raises
        ------
        TeacherNotFoundError
            If the course is reassigned to an unknown teacher
        """
        course = await self._uow.courses.find_by_id(course_id)
        if course is None:
            return None

        new_teacher_id = require_reference_id(teacher_profile_id, "Teacher profile ID")
        if new_teacher_id != course.teacher_profile_id:
            await self._ensure_teacher_exists(new_teacher_id)

        course.update_title(title)
        course.update_description(description)
        course.update_start_date(start_date)
        course.assign_teacher(new_teacher_id)

        await self._uow.courses.update(course)
        await self._uow.save_changes()

        return await self._uow.courses.find_with_details(course.id) or course

    async def delete_course(self, course_id: UUID) -> bool:
        """Delete a course that has no enrollments.

        Raises
        ------
        CourseHasEnrollmentsError
            If the course still has enrollments, naming how many
        """
        course = await self._uow.courses.find_with_details(course_id)
        if course is None:
            return False

        if course.enrollments:
            raise CourseHasEnrollmentsError(course_id, len(course.enrollments))

        await self._uow.courses.delete(course)
        await self._uow.save_changes()

        logger.info("Course deleted: %s", course_id)
        return True

    async def course_exists(self, course_id: UUID) -> bool:
        return await self._uow.courses.exists(course_id)

    async def _ensure_teacher_exists(self, teacher_profile_id: UUID) -> None:
        if not await self._uow.teacher_profiles.exists(teacher_profile_id):
            raise TeacherNotFoundError(teacher_profile_id)
