"""Enrollments router for enrollment and grading endpoints."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from school.presentation.api.dependencies import CurrentUser, EnrollmentServiceDep
from school.presentation.api.schemas.common import ExistsResponse
from school.presentation.api.schemas.enrollments import (
    EnrollmentCreateRequest,
    EnrollmentResponse,
    EnrollmentUpdateRequest,
    GradeUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

StudentIdQuery = Annotated[
    UUID,
    Query(alias="studentId", description="Student profile ID"),
]
CourseIdQuery = Annotated[UUID, Query(alias="courseId", description="Course ID")]


def _not_found(enrollment_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Enrollment with ID {enrollment_id} not found",
    )


@router.get("", summary="List enrollments")
async def list_enrollments(service: EnrollmentServiceDep) -> list[EnrollmentResponse]:
    enrollments = await service.list_enrollments()
    return [EnrollmentResponse.from_domain(e) for e in enrollments]


@router.get("/check-enrollment", summary="Check if a student is enrolled in a course")
async def check_enrollment(
    student_id: StudentIdQuery,
    course_id: CourseIdQuery,
    service: EnrollmentServiceDep,
) -> ExistsResponse:
    return ExistsResponse(
        exists=await service.is_student_enrolled(student_id, course_id),
    )


@router.get("/student/{student_profile_id}", summary="List enrollments of a student")
async def list_by_student(
    student_profile_id: UUID,
    service: EnrollmentServiceDep,
) -> list[EnrollmentResponse]:
    enrollments = await service.list_by_student(student_profile_id)
    return [EnrollmentResponse.from_domain(e) for e in enrollments]


@router.get("/course/{course_id}", summary="List enrollments of a course")
async def list_by_course(
    course_id: UUID,
    service: EnrollmentServiceDep,
) -> list[EnrollmentResponse]:
    enrollments = await service.list_by_course(course_id)
    return [EnrollmentResponse.from_domain(e) for e in enrollments]


@router.get(
    "/{enrollment_id}",
    summary="Get enrollment",
    responses={404: {"description": "Enrollment not found"}},
)
async def get_enrollment(
    enrollment_id: UUID,
    service: EnrollmentServiceDep,
) -> EnrollmentResponse:
    enrollment = await service.get_enrollment(enrollment_id)
    if enrollment is None:
        raise _not_found(enrollment_id)
    return EnrollmentResponse.from_domain(enrollment)


@router.get(
    "/{enrollment_id}/details",
    summary="Get enrollment with student and course",
    responses={404: {"description": "Enrollment not found"}},
)
async def get_enrollment_details(
    enrollment_id: UUID,
    service: EnrollmentServiceDep,
) -> EnrollmentResponse:
    enrollment = await service.get_enrollment_with_details(enrollment_id)
    if enrollment is None:
        raise _not_found(enrollment_id)
    return EnrollmentResponse.from_domain(enrollment)


@router.get("/{enrollment_id}/exists", summary="Check if an enrollment exists")
async def enrollment_exists(
    enrollment_id: UUID,
    service: EnrollmentServiceDep,
) -> ExistsResponse:
    return ExistsResponse(exists=await service.enrollment_exists(enrollment_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Enroll a student in a course",
    responses={
        201: {"description": "Enrollment created"},
        400: {"description": "Invalid input (e.g. enroll date in the future)"},
        404: {"description": "Student or course not found"},
        409: {"description": "Student already enrolled"},
    },
)
async def create_enrollment(
    request: EnrollmentCreateRequest,
    service: EnrollmentServiceDep,
    current_user: CurrentUser,
) -> EnrollmentResponse:
    enrollment = await service.enroll(
        student_profile_id=request.student_profile_id,
        course_id=request.course_id,
        enroll_date=request.enroll_date,
    )
    logger.info("Enrollment %s created by %s", enrollment.id, current_user.username)
    return EnrollmentResponse.from_domain(enrollment)


@router.put(
    "/{enrollment_id}",
    summary="Update enrollment grade",
    responses={
        400: {"description": "Grade out of range"},
        404: {"description": "Enrollment not found"},
    },
)
async def update_enrollment(
    enrollment_id: UUID,
    request: EnrollmentUpdateRequest,
    service: EnrollmentServiceDep,
    current_user: CurrentUser,
) -> EnrollmentResponse:
    """Replace the grade of an enrollment; a null grade removes it."""
    enrollment = await service.update_enrollment(enrollment_id, request.grade)
    if enrollment is None:
        raise _not_found(enrollment_id)
    return EnrollmentResponse.from_domain(enrollment)


@router.patch(
    "/{enrollment_id}/grade",
    summary="Assign grade",
    responses={
        400: {"description": "Grade out of range"},
        404: {"description": "Enrollment not found"},
    },
)
async def assign_grade(
    enrollment_id: UUID,
    request: GradeUpdateRequest,
    service: EnrollmentServiceDep,
    current_user: CurrentUser,
) -> EnrollmentResponse:
    enrollment = await service.assign_grade(enrollment_id, request.grade)
    if enrollment is None:
        raise _not_found(enrollment_id)
    return EnrollmentResponse.from_domain(enrollment)


@router.delete(
    "/{enrollment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete enrollment",
    responses={
        204: {"description": "Enrollment deleted"},
        404: {"description": "Enrollment not found"},
    },
)
async def delete_enrollment(
    enrollment_id: UUID,
    service: EnrollmentServiceDep,
    current_user: CurrentUser,
) -> None:
    if not await service.delete_enrollment(enrollment_id):
        raise _not_found(enrollment_id)
    logger.info("Enrollment %s deleted by %s", enrollment_id, current_user.username)
