"""SQLAlchemy implementation of EnrollmentRepository."""

from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from school.domain.enrollment import (
    AlreadyEnrolledError,
    Enrollment,
    EnrollmentRepository,
)
from school.infrastructure.persistence.sqlalchemy.models import (
    CourseModel,
    EnrollmentModel,
    StudentProfileModel,
)
from school.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepository,
    is_unique_violation,
)
from school.infrastructure.persistence.sqlalchemy.repositories.mappers import (
    course_to_domain,
    enrollment_to_domain,
    student_to_domain,
)

logger = logging.getLogger(__name__)


class EnrollmentRepositorySQLAlchemy(
    SQLAlchemyRepository[Enrollment, EnrollmentModel],
    EnrollmentRepository,
):
    """SQLAlchemy implementation of the EnrollmentRepository interface."""

    model = EnrollmentModel

    async def find_by_student(self, student_profile_id: UUID) -> List[Enrollment]:
        stmt = (
            select(EnrollmentModel, CourseModel)
            .join(CourseModel, EnrollmentModel.course_id == CourseModel.id)
            .where(EnrollmentModel.student_profile_id == student_profile_id)
            .order_by(EnrollmentModel.enroll_date)
        )
        result = await self._session.execute(stmt)
        return [
            enrollment_to_domain(enrollment, course=course_to_domain(course))
            for enrollment, course in result.all()
        ]

    async def find_by_course(self, course_id: UUID) -> List[Enrollment]:
        stmt = (
            select(EnrollmentModel, StudentProfileModel)
            .join(
                StudentProfileModel,
                EnrollmentModel.student_profile_id == StudentProfileModel.id,
            )
            .where(EnrollmentModel.course_id == course_id)
            .order_by(EnrollmentModel.enroll_date)
        )
        result = await self._session.execute(stmt)
        return [
            enrollment_to_domain(enrollment, student=student_to_domain(student))
            for enrollment, student in result.all()
        ]

    async def is_enrolled(self, student_profile_id: UUID, course_id: UUID) -> bool:
        stmt = (
            select(func.count())
            .select_from(EnrollmentModel)
            .where(
                EnrollmentModel.student_profile_id == student_profile_id,
                EnrollmentModel.course_id == course_id,
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def find_with_details(self, enrollment_id: UUID) -> Optional[Enrollment]:
        stmt = (
            select(EnrollmentModel, StudentProfileModel, CourseModel)
            .join(
                StudentProfileModel,
                EnrollmentModel.student_profile_id == StudentProfileModel.id,
            )
            .join(CourseModel, EnrollmentModel.course_id == CourseModel.id)
            .where(EnrollmentModel.id == enrollment_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        enrollment, student, course = row
        return enrollment_to_domain(
            enrollment,
            student=student_to_domain(student),
            course=course_to_domain(course),
        )

    def _translate_integrity_error(
        self,
        error: IntegrityError,
        entity: Enrollment,
    ) -> Optional[Exception]:
        if is_unique_violation(
            error,
            "uq_enrollments_student_course",
            "enrollments.student_profile_id",
        ):
            return AlreadyEnrolledError(entity.student_profile_id, entity.course_id)
        return None

    def _default_order(self) -> tuple:
        return (EnrollmentModel.enroll_date,)

    def _map_to_domain(self, model: EnrollmentModel) -> Enrollment:
        return enrollment_to_domain(model)

    def _map_to_model(self, enrollment: Enrollment) -> EnrollmentModel:
        return EnrollmentModel(
            id=enrollment.id,
            student_profile_id=enrollment.student_profile_id,
            course_id=enrollment.course_id,
            enroll_date=enrollment.enroll_date,
            grade=enrollment.grade.value if enrollment.grade else None,
            created_at=enrollment.created_at,
            updated_at=enrollment.updated_at,
        )

    def _update_model(self, model: EnrollmentModel, enrollment: Enrollment) -> None:
        model.grade = enrollment.grade.value if enrollment.grade else None
        model.updated_at = enrollment.updated_at
