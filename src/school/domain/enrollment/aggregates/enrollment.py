"""Enrollment aggregate linking a student to a course."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID, uuid4

from school.domain.enrollment.value_objects import Grade, GradeInput
from school.domain.shared.exceptions import ErrorCode, OutOfRangeError, ValidationError
from school.domain.shared.identifiers import require_reference_id
from school.domain.shared.time import ensure_tz_aware, utc_now

if TYPE_CHECKING:
    from school.domain.course import Course
    from school.domain.student import StudentProfile


def _resolve_enroll_date(enroll_date: Optional[datetime]) -> datetime:
    now = utc_now()
    if enroll_date is None:
        return now

    value = ensure_tz_aware(enroll_date)
    if value > now:
        msg = "Enrollment date cannot be in the future"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_DATE,
            details={"enroll_date": value.isoformat()},
        )
    return value


class Enrollment:
    """A student's enrollment in a course with an optional grade.

    Student, course and enroll date never change after creation; only the
    grade does. Preventing a second enrollment for the same pair is the
    job of the application layer.
    """

    def __init__(  # NOQA: PLR0913
        self,
        student_profile_id: UUID,
        course_id: UUID,
        enroll_date: datetime,
        grade: Optional[Grade] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        student: Optional[StudentProfile] = None,
        course: Optional[Course] = None,
    ):
        self._id = id or uuid4()
        self._student_profile_id = student_profile_id
        self._course_id = course_id
        self._enroll_date = enroll_date
        self._grade = grade
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at
        self._student = student
        self._course = course

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def student_profile_id(self) -> UUID:
        return self._student_profile_id

    @property
    def course_id(self) -> UUID:
        return self._course_id

    @property
    def enroll_date(self) -> datetime:
        return self._enroll_date

    @property
    def grade(self) -> Optional[Grade]:
        return self._grade

    @property
    def student(self) -> Optional[StudentProfile]:
        return self._student

    @property
    def course(self) -> Optional[Course]:
        return self._course

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    def assign_grade(self, value: Union[Grade, GradeInput]) -> None:
        """Assign or replace the grade.

        Raises
        ------
        OutOfRangeError
            If the value is outside [0, 100]
        """
        if isinstance(value, Grade):
            grade = value
        else:
            try:
                grade = Grade(value)  # type: ignore[arg-type]
            except OutOfRangeError as e:
                msg = f"Grade {value} is out of range. Grade must be between 0 and 100"
                raise OutOfRangeError(msg, details={"value": str(value)}) from e

        self._grade = grade
        self._updated_at = utc_now()

    def remove_grade(self) -> None:
        self._grade = None
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        student_profile_id: Union[UUID, str],
        course_id: Union[UUID, str],
        enroll_date: Optional[datetime] = None,
    ) -> Enrollment:
        """Create an enrollment, dated now unless a past date is given.

        Raises
        ------
        ValidationError
            If a reference id is invalid or the enroll date lies in the future
        """
        return cls(
            student_profile_id=require_reference_id(
                student_profile_id,
                "Student profile ID",
            ),
            course_id=require_reference_id(course_id, "Course ID"),
            enroll_date=_resolve_enroll_date(enroll_date),
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        student_profile_id: UUID,
        course_id: UUID,
        enroll_date: datetime,
        grade: Optional[Grade],
        created_at: datetime,
        updated_at: datetime | None,
        student: Optional[StudentProfile] = None,
        course: Optional[Course] = None,
    ) -> Enrollment:
        return cls(
            id=id,
            student_profile_id=student_profile_id,
            course_id=course_id,
            enroll_date=enroll_date,
            grade=grade,
            created_at=created_at,
            updated_at=updated_at,
            student=student,
            course=course,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enrollment):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Enrollment(id={self._id}, student={self._student_profile_id}, "
            f"course={self._course_id})"
        )
