"""SQLAlchemy model for Course aggregate."""

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import Date, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from school.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CourseModel(Base, TimestampMixin):
    """Courses reference their teacher. Teachers with courses cannot be dropped."""

    __tablename__ = "courses"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    teacher_profile_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("teacher_profiles.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<CourseModel(id={self.id}, title={self.title})>"
