"""Course domain exceptions."""

from uuid import UUID

from school.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class CourseNotFoundError(EntityNotFoundError):
    """Raised when a referenced course does not exist."""

    def __init__(self, course_id: UUID | str) -> None:
        super().__init__(
            message=f"Course with ID {course_id} does not exist.",
            code=ErrorCode.COURSE_NOT_FOUND,
            details={"course_id": str(course_id)},
        )


class CourseHasEnrollmentsError(ConflictError):
    """Raised when deleting a course that still has enrollments."""

    def __init__(self, course_id: UUID | str, enrollment_count: int) -> None:
        self.enrollment_count = enrollment_count
        super().__init__(
            message=(
                f"Cannot delete course with ID {course_id} because it has "
                f"{enrollment_count} active enrollment(s). "
                "Please remove enrollments first."
            ),
            code=ErrorCode.COURSE_HAS_ENROLLMENTS,
            details={
                "course_id": str(course_id),
                "enrollment_count": enrollment_count,
            },
        )
