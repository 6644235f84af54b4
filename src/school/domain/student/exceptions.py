"""Student domain exceptions."""

from uuid import UUID

from school.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class StudentNotFoundError(EntityNotFoundError):
    """Raised when a referenced student profile does not exist."""

    def __init__(self, student_id: UUID | str) -> None:
        super().__init__(
            message=f"Student with ID {student_id} does not exist.",
            code=ErrorCode.STUDENT_NOT_FOUND,
            details={"student_id": str(student_id)},
        )


class StudentProfileAlreadyExistsError(ConflictError):
    """Raised when a user already owns a student profile."""

    def __init__(self, user_id: UUID | str) -> None:
        super().__init__(
            message=f"User with ID {user_id} already has a student profile.",
            code=ErrorCode.DUPLICATE_PROFILE,
            details={"user_id": str(user_id)},
        )
