"""Teacher profile schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from school.domain.teacher import TeacherProfile
from school.presentation.api.schemas.courses import CourseResponse


class TeacherCreateRequest(BaseModel):
    """Request schema for creating a teacher profile."""

    user_id: UUID = Field(..., description="User the profile belongs to")
    full_name: str = Field(..., description="Full name (2-200 characters)")
    hire_date: date = Field(..., description="Hire date (not in the future)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "0b7e5e1c-0c1f-4d44-9f7f-1b2c3d4e5f60",
                "full_name": "Teacher One",
                "hire_date": "2021-09-01",
            },
        },
    )


class TeacherUpdateRequest(BaseModel):
    """Request schema for updating a teacher profile."""

    full_name: str = Field(..., description="Full name (2-200 characters)")


class TeacherResponse(BaseModel):
    """Response schema for a teacher profile."""

    id: UUID
    user_id: UUID
    full_name: str
    hire_date: date
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, teacher: TeacherProfile) -> TeacherResponse:
        return cls(
            id=teacher.id,
            user_id=teacher.user_id,
            full_name=teacher.full_name,
            hire_date=teacher.hire_date,
            created_at=teacher.created_at,
            updated_at=teacher.updated_at,
        )


class TeacherDetailResponse(TeacherResponse):
    """Teacher profile with the courses they teach."""

    course_count: int
    courses: list[CourseResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, teacher: TeacherProfile) -> TeacherDetailResponse:
        return cls(
            id=teacher.id,
            user_id=teacher.user_id,
            full_name=teacher.full_name,
            hire_date=teacher.hire_date,
            created_at=teacher.created_at,
            updated_at=teacher.updated_at,
            course_count=len(teacher.courses),
            courses=[CourseResponse.from_domain(c) for c in teacher.courses],
        )
