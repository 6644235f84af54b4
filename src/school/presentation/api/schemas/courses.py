"""Course schemas for API request/response models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from school.domain.course import Course
from school.presentation.api.schemas.enrollments import EnrollmentResponse


class CourseCreateRequest(BaseModel):
    """Request schema for creating a course."""

    title: str = Field(..., description="Course title (2-200 characters)")
    description: Optional[str] = Field(
        default=None,
        description="Optional description (up to 2000 characters)",
    )
    start_date: date = Field(..., description="Date the course starts")
    teacher_profile_id: UUID = Field(..., description="Teacher of the course")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Math 101",
                "description": "Introduction to algebra",
                "start_date": "2026-09-01",
                "teacher_profile_id": "0b7e5e1c-0c1f-4d44-9f7f-1b2c3d4e5f60",
            },
        },
    )


class CourseUpdateRequest(CourseCreateRequest):
    """Request schema for updating a course (full replacement)."""


class CourseResponse(BaseModel):
    """Response schema for a course."""

    id: UUID
    title: str
    description: Optional[str] = None
    start_date: date
    teacher_profile_id: UUID
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, course: Course) -> CourseResponse:
        return cls(
            id=course.id,
            title=course.title,
            description=course.description,
            start_date=course.start_date,
            teacher_profile_id=course.teacher_profile_id,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )


class CourseDetailResponse(CourseResponse):
    """Course with its teacher's name and its enrollments."""

    teacher_name: Optional[str] = None
    enrollment_count: int
    enrollments: list[EnrollmentResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, course: Course) -> CourseDetailResponse:
        return cls(
            id=course.id,
            title=course.title,
            description=course.description,
            start_date=course.start_date,
            teacher_profile_id=course.teacher_profile_id,
            created_at=course.created_at,
            updated_at=course.updated_at,
            teacher_name=course.teacher.full_name if course.teacher else None,
            enrollment_count=len(course.enrollments),
            enrollments=[EnrollmentResponse.from_domain(e) for e in course.enrollments],
        )
