"""Enrollment schemas for API request/response models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from school.domain.enrollment import Enrollment


class EnrollmentCreateRequest(BaseModel):
    """Request schema for enrolling a student in a course."""

    student_profile_id: UUID = Field(..., description="Student to enroll")
    course_id: UUID = Field(..., description="Course to enroll in")
    enroll_date: Optional[datetime] = Field(
        default=None,
        description="Enrollment timestamp (defaults to now, must not be in the future)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "student_profile_id": "6f1c1d0e-3a57-4a0c-9a8e-8c1d2b3e4f5a",
                "course_id": "a3d2c1b0-9e8f-4a6b-8c7d-6e5f4a3b2c1d",
            },
        },
    )


class EnrollmentUpdateRequest(BaseModel):
    """Request schema for replacing the grade of an enrollment.

    A null grade removes the current grade.
    """

    grade: Optional[Decimal] = Field(default=None, description="Grade (0-100)")


class GradeUpdateRequest(BaseModel):
    """Request schema for assigning a grade."""

    grade: Decimal = Field(..., description="Grade (0-100)")

    model_config = ConfigDict(json_schema_extra={"example": {"grade": "87.5"}})


class EnrollmentResponse(BaseModel):
    """Response schema for an enrollment.

    Student name and course title are filled when the enrollment was
    loaded with its details.
    """

    id: UUID
    student_profile_id: UUID
    student_name: Optional[str] = None
    course_id: UUID
    course_title: Optional[str] = None
    enroll_date: datetime
    grade: Optional[Decimal] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, enrollment: Enrollment) -> EnrollmentResponse:
        return cls(
            id=enrollment.id,
            student_profile_id=enrollment.student_profile_id,
            student_name=enrollment.student.full_name if enrollment.student else None,
            course_id=enrollment.course_id,
            course_title=enrollment.course.title if enrollment.course else None,
            enroll_date=enrollment.enroll_date,
            grade=enrollment.grade.value if enrollment.grade else None,
            created_at=enrollment.created_at,
            updated_at=enrollment.updated_at,
        )
