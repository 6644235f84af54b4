"""Enrollment domain exceptions."""

from uuid import UUID

from school.domain.shared.exceptions import ConflictError, ErrorCode


class AlreadyEnrolledError(ConflictError):
    """Raised when a student is enrolled in the same course twice."""

    def __init__(self, student_id: UUID | str, course_id: UUID | str) -> None:
        super().__init__(
            message=(
                f"Student with ID {student_id} is already enrolled in "
                f"course with ID {course_id}."
            ),
            code=ErrorCode.ALREADY_ENROLLED,
            details={"student_id": str(student_id), "course_id": str(course_id)},
        )
