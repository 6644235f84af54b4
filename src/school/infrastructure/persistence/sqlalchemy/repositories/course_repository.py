"""SQLAlchemy implementation of CourseRepository."""

from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select

from school.domain.course import Course, CourseRepository
from school.infrastructure.persistence.sqlalchemy.models import (
    CourseModel,
    EnrollmentModel,
    StudentProfileModel,
    TeacherProfileModel,
)
from school.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepository,
)
from school.infrastructure.persistence.sqlalchemy.repositories.mappers import (
    course_to_domain,
    enrollment_to_domain,
    student_to_domain,
    teacher_to_domain,
)

logger = logging.getLogger(__name__)


class CourseRepositorySQLAlchemy(
    SQLAlchemyRepository[Course, CourseModel],
    CourseRepository,
):
    """SQLAlchemy implementation of the CourseRepository interface."""

    model = CourseModel

    async def find_with_details(self, course_id: UUID) -> Optional[Course]:
        """Load a course with its teacher and enrollments (students populated)."""
        model = await self._session.get(CourseModel, course_id)
        if model is None:
            return None

        teacher_model = await self._session.get(
            TeacherProfileModel,
            model.teacher_profile_id,
        )
        teacher = teacher_to_domain(teacher_model) if teacher_model else None

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
        enrollments = [
            enrollment_to_domain(enrollment, student=student_to_domain(student))
            for enrollment, student in result.all()
        ]
        return course_to_domain(model, teacher=teacher, enrollments=enrollments)

    async def find_by_teacher(self, teacher_profile_id: UUID) -> List[Course]:
        stmt = (
            select(CourseModel)
            .where(CourseModel.teacher_profile_id == teacher_profile_id)
            .order_by(CourseModel.title)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    def _default_order(self) -> tuple:
        return (CourseModel.title,)

    def _map_to_domain(self, model: CourseModel) -> Course:
        return course_to_domain(model)

    def _map_to_model(self, course: Course) -> CourseModel:
        return CourseModel(
            id=course.id,
            title=course.title,
            description=course.description,
            start_date=course.start_date,
            teacher_profile_id=course.teacher_profile_id,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )

    def _update_model(self, model: CourseModel, course: Course) -> None:
        model.title = course.title
        model.description = course.description
        model.start_date = course.start_date
        model.teacher_profile_id = course.teacher_profile_id
        model.updated_at = course.updated_at
