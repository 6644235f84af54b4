"""Student profile aggregate."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Sequence, Union
from uuid import UUID, uuid4

from school.domain.shared.exceptions import ErrorCode, ValidationError
from school.domain.shared.identifiers import require_reference_id
from school.domain.shared.time import as_date, today_utc, utc_now, years_before
from school.domain.shared.validation import require_text

if TYPE_CHECKING:
    from school.domain.enrollment import Enrollment

FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 200
MAX_AGE_YEARS = 120


def _validate_birth_date(birth_date: Union[date, datetime, None]) -> date:
    if birth_date is None:
        msg = "Birth date is required"
        raise ValidationError(msg, code=ErrorCode.INVALID_DATE)

    value = as_date(birth_date)
    today = today_utc()

    if value >= today:
        msg = "Birth date must be in the past"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_DATE,
            details={"birth_date": value.isoformat()},
        )
    if value < years_before(today, MAX_AGE_YEARS):
        msg = "Birth date is not realistic"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_DATE,
            details={"birth_date": value.isoformat()},
        )
    return value


class StudentProfile:
    """Student data attached 1:1 to a user account.

    The birth date is fixed at creation. ``enrollments`` is only filled
    when the profile was loaded with its enrollments.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        full_name: str,
        birth_date: date,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        enrollments: Sequence[Enrollment] = (),
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._full_name = full_name
        self._birth_date = birth_date
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at
        self._enrollments = tuple(enrollments)

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
    def birth_date(self) -> date:
        return self._birth_date

    @property
    def enrollments(self) -> tuple[Enrollment, ...]:
        return self._enrollments

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
        birth_date: Union[date, datetime],
    ) -> StudentProfile:
        """Create a student profile for an existing user.

        Raises
        ------
        ValidationError
            If the user id, full name or birth date is invalid
        """
        return cls(
            user_id=require_reference_id(user_id, "User ID"),
            full_name=require_text(
                full_name,
                "Full name",
                FULL_NAME_MIN_LENGTH,
                FULL_NAME_MAX_LENGTH,
            ),
            birth_date=_validate_birth_date(birth_date),
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        full_name: str,
        birth_date: date,
        created_at: datetime,
        updated_at: datetime | None,
        enrollments: Sequence[Enrollment] = (),
    ) -> StudentProfile:
        return cls(
            id=id,
            user_id=user_id,
            full_name=full_name,
            birth_date=birth_date,
            created_at=created_at,
            updated_at=updated_at,
            enrollments=enrollments,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"StudentProfile(id={self._id}, full_name={self._full_name!r})"
