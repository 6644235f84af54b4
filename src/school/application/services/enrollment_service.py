"""Application service for enrollments and grading."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID

from school.domain.course import CourseNotFoundError
from school.domain.enrollment import AlreadyEnrolledError, Enrollment
from school.domain.enrollment.value_objects import GradeInput
from school.domain.student import StudentNotFoundError

if TYPE_CHECKING:
    from school.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Enroll students in courses and manage their grades.

    Existence of the student and course, and the one-enrollment-per-pair
    rule, are checked here before an Enrollment is created.
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._uow = unit_of_work

    async def list_enrollments(self) -> List[Enrollment]:
        return await self._uow.enrollments.find_all()

    async def get_enrollment(self, enrollment_id: UUID) -> Optional[Enrollment]:
        return await self._uow.enrollments.find_by_id(enrollment_id)

    async def get_enrollment_with_details(
        self,
        enrollment_id: UUID,
    ) -> Optional[Enrollment]:
        return await self._uow.enrollments.find_with_details(enrollment_id)

    async def list_by_student(self, student_profile_id: UUID) -> List[Enrollment]:
        return await self._uow.enrollments.find_by_student(student_profile_id)

    async def list_by_course(self, course_id: UUID) -> List[Enrollment]:
        return await self._uow.enrollments.find_by_course(course_id)

    async def enroll(
        self,
        student_profile_id: UUID,
        course_id: UUID,
        enroll_date: Optional[datetime] = None,
    ) -> Enrollment:
        """Enroll a student in a course.

        Raises
        ------
        StudentNotFoundError
            If the student profile does not exist
        CourseNotFoundError
            If the course does not exist
        AlreadyEnrolledError
            If the student is already enrolled in the course
        ValidationError
            If an id is malformed or the enroll date lies in the future
        """
        enrollment = Enrollment.create(student_profile_id, course_id, enroll_date)

        if not await self._uow.student_profiles.exists(enrollment.student_profile_id):
            raise StudentNotFoundError(enrollment.student_profile_id)
        if not await self._uow.courses.exists(enrollment.course_id):
            raise CourseNotFoundError(enrollment.course_id)
        if await self._uow.enrollments.is_enrolled(
            enrollment.student_profile_id,
            enrollment.course_id,
        ):
            raise AlreadyEnrolledError(
                enrollment.student_profile_id,
                enrollment.course_id,
            )

        await self._uow.enrollments.add(enrollment)
        await self._uow.save_changes()

        logger.info(
            "Student %s enrolled in course %s",
            enrollment.student_profile_id,
            enrollment.course_id,
        )
        details = await self._uow.enrollments.find_with_details(enrollment.id)
        return details or enrollment

    async def update_enrollment(
        self,
        enrollment_id: UUID,
        grade: Optional[GradeInput],
    ) -> Optional[Enrollment]:
        """Set the grade, or clear it when ``grade`` is None."""
        enrollment = await self._uow.enrollments.find_by_id(enrollment_id)
        if enrollment is None:
            return None

        if grade is None:
            enrollment.remove_grade()
        else:
            enrollment.assign_grade(grade)

        await self._uow.enrollments.update(enrollment)
        await self._uow.save_changes()
        return enrollment

    async def assign_grade(
        self,
        enrollment_id: UUID,
        grade: GradeInput,
    ) -> Optional[Enrollment]:
        """Assign a grade to an enrollment.

        Raises
        ------
        OutOfRangeError
            If the grade is outside [0, 100]
        """
        enrollment = await self._uow.enrollments.find_by_id(enrollment_id)
        if enrollment is None:
            return None

        enrollment.assign_grade(grade)
        await self._uow.enrollments.update(enrollment)
        await self._uow.save_changes()

        logger.info("Grade %s assigned to enrollment %s", grade, enrollment_id)
        return enrollment

    async def delete_enrollment(self, enrollment_id: UUID) -> bool:
        enrollment = await self._uow.enrollments.find_by_id(enrollment_id)
        if enrollment is None:
            return False

        await self._uow.enrollments.delete(enrollment)
        await self._uow.save_changes()

        logger.info("Enrollment deleted: %s", enrollment_id)
        return True

    async def enrollment_exists(self, enrollment_id: UUID) -> bool:
        return await self._uow.enrollments.exists(enrollment_id)

    async def is_student_enrolled(
        self,
        student_profile_id: UUID,
        course_id: UUID,
    ) -> bool:
        return await self._uow.enrollments.is_enrolled(student_profile_id, course_id)
