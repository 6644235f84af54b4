"""Students router for student profile endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from school.presentation.api.dependencies import CurrentUser, StudentServiceDep
from school.presentation.api.schemas.common import ExistsResponse
from school.presentation.api.schemas.students import (
    StudentCreateRequest,
    StudentDetailResponse,
    StudentResponse,
    StudentUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(student_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Student with ID {student_id} not found",
    )


@router.get("", summary="List students")
async def list_students(service: StudentServiceDep) -> list[StudentResponse]:
    """List all student profiles ordered by name."""
    students = await service.list_students()
    return [StudentResponse.from_domain(s) for s in students]


@router.get("/active", summary="List active students")
async def list_active_students(service: StudentServiceDep) -> list[StudentResponse]:
    """List students whose user account is active."""
    students = await service.list_active_students()
    return [StudentResponse.from_domain(s) for s in students]


@router.get(
    "/{student_id}",
    summary="Get student",
    responses={404: {"description": "Student not found"}},
)
async def get_student(student_id: UUID, service: StudentServiceDep) -> StudentResponse:
    student = await service.get_student(student_id)
    if student is None:
        raise _not_found(student_id)
    return StudentResponse.from_domain(student)


@router.get(
    "/{student_id}/details",
    summary="Get student with enrollments",
    responses={404: {"description": "Student not found"}},
)
async def get_student_details(
    student_id: UUID,
    service: StudentServiceDep,
) -> StudentDetailResponse:
    student = await service.get_student_with_enrollments(student_id)
    if student is None:
        raise _not_found(student_id)
    return StudentDetailResponse.from_domain(student)


@router.get("/{student_id}/exists", summary="Check if a student exists")
async def student_exists(
    student_id: UUID,
    service: StudentServiceDep,
) -> ExistsResponse:
    return ExistsResponse(exists=await service.student_exists(student_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create student",
    responses={
        201: {"description": "Student created"},
        400: {"description": "Invalid input"},
        404: {"description": "User not found"},
        409: {"description": "User already has a student profile"},
    },
)
async def create_student(
    request: StudentCreateRequest,
    service: StudentServiceDep,
    current_user: CurrentUser,
) -> StudentResponse:
    """Create the student profile of an existing user."""
    student = await service.create_student(
        user_id=request.user_id,
        full_name=request.full_name,
        birth_date=request.birth_date,
    )
    logger.info("Student %s created by %s", student.id, current_user.username)
    return StudentResponse.from_domain(student)


@router.put(
    "/{student_id}",
    summary="Update student",
    responses={
        400: {"description": "Invalid input"},
        404: {"description": "Student not found"},
    },
)
async def update_student(
    student_id: UUID,
    request: StudentUpdateRequest,
    service: StudentServiceDep,
    current_user: CurrentUser,
) -> StudentResponse:
    student = await service.update_student(student_id, request.full_name)
    if student is None:
        raise _not_found(student_id)
    return StudentResponse.from_domain(student)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete student",
    responses={
        204: {"description": "Student deleted"},
        404: {"description": "Student not found"},
    },
)
async def delete_student(
    student_id: UUID,
    service: StudentServiceDep,
    current_user: CurrentUser,
) -> None:
    """Delete a student profile together with its enrollments."""
    if not await service.delete_student(student_id):
        raise _not_found(student_id)
    logger.info("Student %s deleted by %s", student_id, current_user.username)
