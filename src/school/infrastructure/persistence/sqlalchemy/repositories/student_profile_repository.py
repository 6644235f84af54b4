"""SQLAlchemy implementation of StudentProfileRepository."""

from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from school.domain.student import (
    StudentProfile,
    StudentProfileAlreadyExistsError,
    StudentProfileRepository,
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
from school_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class StudentProfileRepositorySQLAlchemy(
    SQLAlchemyRepository[StudentProfile, StudentProfileModel],
    StudentProfileRepository,
):
    """SQLAlchemy implementation of the StudentProfileRepository interface."""

    model = StudentProfileModel

    async def find_with_enrollments(self, student_id: UUID) -> Optional[StudentProfile]:
        model = await self._session.get(StudentProfileModel, student_id)
        if model is None:
            return None

        stmt = (
            select(EnrollmentModel, CourseModel)
            .join(CourseModel, EnrollmentModel.course_id == CourseModel.id)
            .where(EnrollmentModel.student_profile_id == student_id)
            .order_by(EnrollmentModel.enroll_date)
        )
        result = await self._session.execute(stmt)
        enrollments = [
            enrollment_to_domain(enrollment, course=course_to_domain(course))
            for enrollment, course in result.all()
        ]
        return student_to_domain(model, enrollments=enrollments)

    async def find_active(self) -> List[StudentProfile]:
        stmt = (
            select(StudentProfileModel)
            .join(UserModel, StudentProfileModel.user_id == UserModel.id)
            .where(UserModel.is_active.is_(True))
            .order_by(StudentProfileModel.full_name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_user_id(self, user_id: UUID) -> Optional[StudentProfile]:
        stmt = select(StudentProfileModel).where(StudentProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model is not None else None

    def _translate_integrity_error(
        self,
        error: IntegrityError,
        entity: StudentProfile,
    ) -> Optional[Exception]:
        if is_unique_violation(error, "user_id"):
            return StudentProfileAlreadyExistsError(entity.user_id)
        return None

    def _default_order(self) -> tuple:
        return (StudentProfileModel.full_name,)

    def _map_to_domain(self, model: StudentProfileModel) -> StudentProfile:
        return student_to_domain(model)

    def _map_to_model(self, student: StudentProfile) -> StudentProfileModel:
        return StudentProfileModel(
            id=student.id,
            user_id=student.user_id,
            full_name=student.full_name,
            birth_date=student.birth_date,
            created_at=student.created_at,
            updated_at=student.updated_at,
        )

    def _update_model(
        self,
        model: StudentProfileModel,
        student: StudentProfile,
    ) -> None:
        model.full_name = student.full_name
        model.updated_at = student.updated_at
