"""SQLAlchemy model for Enrollment aggregate."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Numeric, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from school.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class EnrollmentModel(Base, TimestampMixin):
    """Join table between students and courses, carrying the grade.

    Enrollments go away with their student but block deleting the course.
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint(
            "student_profile_id",
            "course_id",
            name="uq_enrollments_student_course",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    student_profile_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("student_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("courses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    enroll_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    grade: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(asdecimal=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"<EnrollmentModel(id={self.id}, student={self.student_profile_id}, "
            f"course={self.course_id})>"
        )
