"""SQLAlchemy model for TeacherProfile aggregate."""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from school.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TeacherProfileModel(Base, TimestampMixin):
    """One row per teacher. ``user_id`` is unique, making the link 1:1."""

    __tablename__ = "teacher_profiles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<TeacherProfileModel(id={self.id}, full_name={self.full_name})>"
