"""Course aggregate."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Sequence, Union
from uuid import UUID, uuid4

from school.domain.shared.exceptions import ErrorCode, ValidationError
from school.domain.shared.identifiers import require_reference_id
from school.domain.shared.time import as_date, utc_now
from school.domain.shared.validation import optional_text, require_text

if TYPE_CHECKING:
    from school.domain.enrollment import Enrollment
    from school.domain.teacher import TeacherProfile

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000


def _normalize_title(title: Optional[str]) -> str:
    return require_text(title, "Course title", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)


def _normalize_description(description: Optional[str]) -> Optional[str]:
    return optional_text(description, "Course description", DESCRIPTION_MAX_LENGTH)


def _validate_start_date(start_date: Union[date, datetime, None]) -> date:
    if start_date is None:
        msg = "Course start date is required"
        raise ValidationError(msg, code=ErrorCode.INVALID_DATE)
    return as_date(start_date)


class Course:
    """A course taught by one teacher.

    The teacher is referenced by profile id only. Whether that teacher
    exists is checked by the application layer before construction.
    ``teacher`` and ``enrollments`` are only filled on detailed loads.
    """

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        teacher_profile_id: UUID,
        start_date: date,
        description: Optional[str] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        teacher: Optional[TeacherProfile] = None,
        enrollments: Sequence[Enrollment] = (),
    ):
        self._id = id or uuid4()
        self._title = title
        self._teacher_profile_id = teacher_profile_id
        self._start_date = start_date
        self._description = description
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at
        self._teacher = teacher
        self._enrollments = tuple(enrollments)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def teacher_profile_id(self) -> UUID:
        return self._teacher_profile_id

    @property
    def teacher(self) -> Optional[TeacherProfile]:
        return self._teacher

    @property
    def enrollments(self) -> tuple[Enrollment, ...]:
        return self._enrollments

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    def update_title(self, title: str) -> None:
        self._title = _normalize_title(title)
        self._touch()

    def update_description(self, description: Optional[str]) -> None:
        self._description = _normalize_description(description)
        self._touch()

    def update_start_date(self, start_date: Union[date, datetime]) -> None:
        self._start_date = _validate_start_date(start_date)
        self._touch()

    def assign_teacher(self, teacher_profile_id: Union[UUID, str]) -> None:
        new_id = require_reference_id(teacher_profile_id, "Teacher profile ID")
        if new_id != self._teacher_profile_id:
            # A previously loaded teacher no longer matches the reference
            self._teacher = None
        self._teacher_profile_id = new_id
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        title: str,
        teacher_profile_id: Union[UUID, str],
        start_date: Union[date, datetime],
        description: Optional[str] = None,
    ) -> Course:
        """Create a new course.

        Raises
        ------
        ValidationError
            If title, teacher reference, start date or description is invalid
        """
        return cls(
            title=_normalize_title(title),
            teacher_profile_id=require_reference_id(
                teacher_profile_id,
                "Teacher profile ID",
            ),
            start_date=_validate_start_date(start_date),
            description=_normalize_description(description),
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        title: str,
        teacher_profile_id: UUID,
        start_date: date,
        description: Optional[str],
        created_at: datetime,
        updated_at: datetime | None,
        teacher: Optional[TeacherProfile] = None,
        enrollments: Sequence[Enrollment] = (),
    ) -> Course:
        return cls(
            id=id,
            title=title,
            teacher_profile_id=teacher_profile_id,
            start_date=start_date,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
            teacher=teacher,
            enrollments=enrollments,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Course(id={self._id}, title={self._title!r})"
