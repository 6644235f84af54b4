"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from school.domain.shared.time import ensure_tz_aware
from school.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepository,
    is_unique_violation,
)
from school_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UsernameAlreadyExistsError,
    UserRepository,
)
from school_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(
    SQLAlchemyRepository[User, UserModel],
    UserRepository,
):
    """SQLAlchemy implementation of the UserRepository interface."""

    model = UserModel

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username.strip())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def username_exists(
        self,
        username: str,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.username == username.strip())
        )
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def email_exists(
        self,
        email: str,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.email == email.strip().lower())
        )
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    def _translate_integrity_error(
        self,
        error: IntegrityError,
        entity: User,
    ) -> Optional[Exception]:
        if is_unique_violation(error, "username"):
            return UsernameAlreadyExistsError(entity.username)
        if is_unique_violation(error, "email"):
            return EmailAlreadyExistsError(entity.email)
        return None

    def _default_order(self) -> tuple:
        return (UserModel.username,)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            role=model.role,
            is_active=model.is_active,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=(
                ensure_tz_aware(model.updated_at) if model.updated_at else None
            ),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role.value
        model.is_active = user.is_active
        model.updated_at = user.updated_at
