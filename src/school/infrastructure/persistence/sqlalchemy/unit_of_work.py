"""SQLAlchemy unit of work shared by all application services."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from school.infrastructure.persistence.sqlalchemy.repositories import (
    CourseRepositorySQLAlchemy,
    EnrollmentRepositorySQLAlchemy,
    StudentProfileRepositorySQLAlchemy,
    TeacherProfileRepositorySQLAlchemy,
)
from school_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


class UnitOfWorkSQLAlchemy:
    """SQLAlchemy implementation of the UnitOfWork Protocol.

    Repositories are created on demand and all share one session, so a
    single ``save_changes`` commits everything staged through them.

    Repositories flush on every write. The number of rows touched by
    those flushes is collected with an ``after_flush`` listener and
    reported by ``save_changes``.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self._affected_rows = 0

        # Cached instances (created on demand)
        self._users: UserRepositorySQLAlchemy | None = None
        self._student_profiles: StudentProfileRepositorySQLAlchemy | None = None
        self._teacher_profiles: TeacherProfileRepositorySQLAlchemy | None = None
        self._courses: CourseRepositorySQLAlchemy | None = None
        self._enrollments: EnrollmentRepositorySQLAlchemy | None = None

        event.listen(session.sync_session, "after_flush", self._on_after_flush)
        event.listen(session.sync_session, "after_rollback", self._on_after_rollback)

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def users(self) -> UserRepositorySQLAlchemy:
        if self._users is None:
            self._users = UserRepositorySQLAlchemy(self._session)
        return self._users

    @property
    def student_profiles(self) -> StudentProfileRepositorySQLAlchemy:
        if self._student_profiles is None:
            self._student_profiles = StudentProfileRepositorySQLAlchemy(self._session)
        return self._student_profiles

    @property
    def teacher_profiles(self) -> TeacherProfileRepositorySQLAlchemy:
        if self._teacher_profiles is None:
            self._teacher_profiles = TeacherProfileRepositorySQLAlchemy(self._session)
        return self._teacher_profiles

    @property
    def courses(self) -> CourseRepositorySQLAlchemy:
        if self._courses is None:
            self._courses = CourseRepositorySQLAlchemy(self._session)
        return self._courses

    @property
    def enrollments(self) -> EnrollmentRepositorySQLAlchemy:
        if self._enrollments is None:
            self._enrollments = EnrollmentRepositorySQLAlchemy(self._session)
        return self._enrollments

    async def save_changes(self) -> int:
        """Flush anything pending, commit, and return the affected row count."""
        await self._session.flush()
        await self._session.commit()

        affected = self._affected_rows
        self._affected_rows = 0
        logger.debug("Committed unit of work (%d row(s) affected)", affected)
        return affected

    async def rollback(self) -> None:
        await self._session.rollback()

    def _on_after_flush(self, session: Session, flush_context: Any) -> None:
        dirty = sum(1 for obj in session.dirty if session.is_modified(obj))
        self._affected_rows += len(session.new) + dirty + len(session.deleted)

    def _on_after_rollback(self, session: Session) -> None:
        self._affected_rows = 0
