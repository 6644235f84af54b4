"""Student profile schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from school.domain.student import StudentProfile
from school.presentation.api.schemas.enrollments import EnrollmentResponse


class StudentCreateRequest(BaseModel):
    """Request schema for creating a student profile."""

    user_id: UUID = Field(..., description="User the profile belongs to")
    full_name: str = Field(..., description="Full name (2-200 characters)")
    birth_date: date = Field(..., description="Date of birth (must be in the past)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "6f1c1d0e-3a57-4a0c-9a8e-8c1d2b3e4f5a",
                "full_name": "Alice Example",
                "birth_date": "2004-05-17",
            },
        },
    )


class StudentUpdateRequest(BaseModel):
    """Request schema for updating a student profile."""

    full_name: str = Field(..., description="Full name (2-200 characters)")


class StudentResponse(BaseModel):
    """Response schema for a student profile."""

    id: UUID
    user_id: UUID
    full_name: str
    birth_date: date
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, student: StudentProfile) -> StudentResponse:
        return cls(
            id=student.id,
            user_id=student.user_id,
            full_name=student.full_name,
            birth_date=student.birth_date,
            created_at=student.created_at,
            updated_at=student.updated_at,
        )


class StudentDetailResponse(StudentResponse):
    """Student profile with its enrollments."""

    enrollment_count: int
    enrollments: list[EnrollmentResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, student: StudentProfile) -> StudentDetailResponse:
        return cls(
            id=student.id,
            user_id=student.user_id,
            full_name=student.full_name,
            birth_date=student.birth_date,
            created_at=student.created_at,
            updated_at=student.updated_at,
            enrollment_count=len(student.enrollments),
            enrollments=[
                EnrollmentResponse.from_domain(e) for e in student.enrollments
            ],
        )
