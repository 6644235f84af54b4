"""User aggregate for identity concerns only."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from school.domain.shared.exceptions import ValidationError
from school.domain.shared.time import utc_now
from school.domain.shared.value_objects import Email
from school_identity.domain.user.value_objects import UserRole

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50


def _normalize_username(username: Optional[str]) -> str:
    if username is None or not username.strip():
        msg = "Username is required"
        raise ValidationError(msg)

    normalized = username.strip()
    if not USERNAME_MIN_LENGTH <= len(normalized) <= USERNAME_MAX_LENGTH:
        msg = (
            f"Username must be between {USERNAME_MIN_LENGTH} and "
            f"{USERNAME_MAX_LENGTH} characters"
        )
        raise ValidationError(msg, details={"username": normalized})
    return normalized


def _normalize_email(email: Union[str, Email]) -> str:
    email_obj = email if isinstance(email, Email) else Email(email)
    return email_obj.value.lower()


def _require_password_hash(password_hash: Optional[str]) -> str:
    if password_hash is None or not password_hash.strip():
        msg = "Password hash is required"
        raise ValidationError(msg)
    return password_hash


class User:
    """
    User aggregate root.

    Holds login identity only. Student and teacher data live in their own
    profile aggregates that reference the user by id.
    """

    def __init__(  # NOQA: PLR0913
        self,
        username: str,
        email: str,
        password_hash: str,
        role: Union[str, UserRole] = UserRole.STUDENT,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._username = username
        self._email = email
        self._password_hash = password_hash
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._is_active = is_active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    def update_email(self, email: Union[str, Email]) -> None:
        self._email = _normalize_email(email)
        self._updated_at = utc_now()

    def update_password_hash(self, password_hash: str) -> None:
        self._password_hash = _require_password_hash(password_hash)
        self._updated_at = utc_now()

    def activate(self) -> None:
        if self._is_active:
            return
        self._is_active = True
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        if not self._is_active:
            return
        self._is_active = False
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole] = UserRole.STUDENT,
    ) -> User:
        """Create a new, active user.

        Uniqueness of username and email is the caller's responsibility.

        Raises
        ------
        ValidationError
            If the username, email or password hash is invalid
        """
        return cls(
            username=_normalize_username(username),
            email=_normalize_email(email),
            password_hash=_require_password_hash(password_hash),
            role=role,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        username: str,
        email: str,
        password_hash: str,
        role: Union[str, UserRole],
        is_active: bool,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> User:
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username})"
