"""Teacher profile aggregate."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Sequence, Union
from uuid import UUID, uuid4

from school.domain.shared.exceptions import ErrorCode, ValidationError
from school.domain.shared.identifiers import require_reference_id
from school.domain.shared.time import as_date, today_utc, utc_now, years_before
from school.domain.shared.validation import require_text

if TYPE_CHECKING:
    from school.domain.course import Course

FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 200
MAX_SERVICE_YEARS = 50


def _validate_hire_date(hire_date: Union[date, datetime, None]) -> date:
    if hire_date is None:
        msg = "Hire date is required"
        raise ValidationError(msg, code=ErrorCode.INVALID_DATE)

    value = as_date(hire_date)
    today = today_utc()

    if value > today:
        msg = "Hire date cannot be in the future"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_DATE,
            details={"hire_date": value.isoformat()},
        )
    if value < years_before(today, MAX_SERVICE_YEARS):
        msg = "Hire date is not realistic"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_DATE,
            details={"hire_date": value.isoformat()},
        )
    return value


class TeacherProfile:
    """Teacher data attached 1:1 to a user account.

    ``courses`` is only filled when the profile was loaded with its courses.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        full_name: str,
        hire_date: date,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        courses: Sequence[Course] = (),
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._full_name = full_name
        self._hire_date = hire_date
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at
        self._courses = tuple(courses)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def hire_date(self) -> date:
        return self._hire_date

    @property
    def courses(self) -> tuple[Course, ...]:
        return self._courses

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    def update_full_name(self, full_name: str) -> None:
        self._full_name = require_text(
            full_name,
            "Full name",
            FULL_NAME_MIN_LENGTH,
            FULL_NAME_MAX_LENGTH,
        )
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        user_id: Union[UUID, str],
        full_name: str,
        hire_date: Union[date, datetime],
    ) -> TeacherProfile:
        """Create a teacher profile for an existing user.

        Raises
        ------
        ValidationError
            If the user id, full name or hire date is invalid
        """
        return cls(
            user_id=require_reference_id(user_id, "User ID"),
            full_name=require_text(
                full_name,
                "Full name",
                FULL_NAME_MIN_LENGTH,
                FULL_NAME_MAX_LENGTH,
            ),
            hire_date=_validate_hire_date(hire_date),
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        full_name: str,
        hire_date: date,
        created_at: datetime,
        updated_at: datetime | None,
        courses: Sequence[Course] = (),
    ) -> TeacherProfile:
        return cls(
            id=id,
            user_id=user_id,
            full_name=full_name,
            hire_date=hire_date,
            created_at=created_at,
            updated_at=updated_at,
            courses=courses,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TeacherProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"TeacherProfile(id={self._id}, full_name={self._full_name!r})"
