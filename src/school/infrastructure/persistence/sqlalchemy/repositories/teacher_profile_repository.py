"""SQLAlchemy implementation of TeacherProfileRepository."""

from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from school.domain.teacher import (
    TeacherProfile,
    TeacherProfileAlreadyExistsError,
    TeacherProfileRepository,
)
from school.infrastructure.persistence.sqlalchemy.models import (
    CourseModel,
    TeacherProfileModel,
)
from school.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepository,
    is_unique_violation,
)
from school.infrastructure.persistence.sqlalchemy.repositories.mappers import (
    course_to_domain,
    teacher_to_domain,
)
from school_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class TeacherProfileRepositorySQLAlchemy(
    SQLAlchemyRepository[TeacherProfile, TeacherProfileModel],
    TeacherProfileRepository,
):
    """SQLAlchemy implementation of the TeacherProfileRepository interface."""

    model = TeacherProfileModel

    async def find_with_courses(self, teacher_id: UUID) -> Optional[TeacherProfile]:
        model = await self._session.get(TeacherProfileModel, teacher_id)
        if model is None:
            return None

        stmt = (
            select(CourseModel)
            .where(CourseModel.teacher_profile_id == teacher_id)
            .order_by(CourseModel.title)
        )
        result = await self._session.execute(stmt)
        courses = [course_to_domain(c) for c in result.scalars().all()]
        return teacher_to_domain(model, courses=courses)

    async def find_active(self) -> List[TeacherProfile]:
        stmt = (
            select(TeacherProfileModel)
            .join(UserModel, TeacherProfileModel.user_id == UserModel.id)
            .where(UserModel.is_active.is_(True))
            .order_by(TeacherProfileModel.full_name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_user_id(self, user_id: UUID) -> Optional[TeacherProfile]:
        stmt = select(TeacherProfileModel).where(TeacherProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model is not None else None

    async def find_by_email(self, email: str) -> Optional[TeacherProfile]:
        stmt = (
            select(TeacherProfileModel)
            .join(UserModel, TeacherProfileModel.user_id == UserModel.id)
            .where(UserModel.email == email.strip().lower())
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model is not None else None

    def _translate_integrity_error(
        self,
        error: IntegrityError,
        entity: TeacherProfile,
    ) -> Optional[Exception]:
        if is_unique_violation(error, "user_id"):
            return TeacherProfileAlreadyExistsError(entity.user_id)
        return None

    def _default_order(self) -> tuple:
        return (TeacherProfileModel.full_name,)

    def _map_to_domain(self, model: TeacherProfileModel) -> TeacherProfile:
        return teacher_to_domain(model)

    def _map_to_model(self, teacher: TeacherProfile) -> TeacherProfileModel:
        return TeacherProfileModel(
            id=teacher.id,
            user_id=teacher.user_id,
            full_name=teacher.full_name,
            hire_date=teacher.hire_date,
            created_at=teacher.created_at,
            updated_at=teacher.updated_at,
        )

    def _update_model(
        self,
        model: TeacherProfileModel,
        teacher: TeacherProfile,
    ) -> None:
        model.full_name = teacher.full_name
        model.updated_at = teacher.updated_at
