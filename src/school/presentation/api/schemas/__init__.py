"""Pydantic schemas for API request/response models."""

from school.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from school.presentation.api.schemas.common import (
    ErrorResponse,
    ExistsResponse,
    HealthResponse,
)
from school.presentation.api.schemas.courses import (
    CourseCreateRequest,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdateRequest,
)
from school.presentation.api.schemas.enrollments import (
    EnrollmentCreateRequest,
    EnrollmentResponse,
    EnrollmentUpdateRequest,
    GradeUpdateRequest,
)
from school.presentation.api.schemas.students import (
    StudentCreateRequest,
    StudentDetailResponse,
    StudentResponse,
    StudentUpdateRequest,
)
from school.presentation.api.schemas.teachers import (
    TeacherCreateRequest,
    TeacherDetailResponse,
    TeacherResponse,
    TeacherUpdateRequest,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    # Common
    "ErrorResponse",
    "ExistsResponse",
    "HealthResponse",
    # Courses
    "CourseCreateRequest",
    "CourseDetailResponse",
    "CourseResponse",
    "CourseUpdateRequest",
    # Enrollments
    "EnrollmentCreateRequest",
    "EnrollmentResponse",
    "EnrollmentUpdateRequest",
    "GradeUpdateRequest",
    # Students
    "StudentCreateRequest",
    "StudentDetailResponse",
    "StudentResponse",
    "StudentUpdateRequest",
    # Teachers
    "TeacherCreateRequest",
    "TeacherDetailResponse",
    "TeacherResponse",
    "TeacherUpdateRequest",
]
