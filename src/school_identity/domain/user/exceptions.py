"""User domain exceptions."""

from uuid import UUID

from school.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class UsernameAlreadyExistsError(ConflictError):
    """Username already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            message=f"Username '{username}' is already taken",
            code=ErrorCode.DUPLICATE_USERNAME,
            details={"username": username},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message=f"Email '{email}' is already registered",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: UUID | str) -> None:
        self.user_id = user_id
        super().__init__(
            message=f"User with ID {user_id} does not exist.",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )
