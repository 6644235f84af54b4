"""Teacher domain exceptions."""

from uuid import UUID

from school.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class TeacherNotFoundError(EntityNotFoundError):
    """Raised when a referenced teacher profile does not exist."""

    def __init__(self, teacher_id: UUID | str) -> None:
        super().__init__(
            message=f"Teacher with ID {teacher_id} does not exist.",
            code=ErrorCode.TEACHER_NOT_FOUND,
            details={"teacher_id": str(teacher_id)},
        )


class TeacherProfileAlreadyExistsError(ConflictError):
    """Raised when a user already owns a teacher profile."""

    def __init__(self, user_id: UUID | str) -> None:
        super().__init__(
            message=f"User with ID {user_id} already has a teacher profile.",
            code=ErrorCode.DUPLICATE_PROFILE,
            details={"user_id": str(user_id)},
        )


class TeacherHasCoursesError(ConflictError):
    """Raised when deleting a teacher who still has courses assigned."""

    def __init__(self, teacher_id: UUID | str, course_count: int) -> None:
        self.course_count = course_count
        super().__init__(
            message=(
                f"Cannot delete teacher with ID {teacher_id} because they have "
                f"{course_count} assigned course(s). "
                "Please reassign or remove courses first."
            ),
            code=ErrorCode.TEACHER_HAS_COURSES,
            details={"teacher_id": str(teacher_id), "course_count": course_count},
        )
