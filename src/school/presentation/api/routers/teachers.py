"""Teachers router for teacher profile endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from school.presentation.api.dependencies import CurrentUser, TeacherServiceDep
from school.presentation.api.schemas.common import ExistsResponse
from school.presentation.api.schemas.teachers import (
    TeacherCreateRequest,
    TeacherDetailResponse,
    TeacherResponse,
    TeacherUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(teacher_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Teacher with ID {teacher_id} not found",
    )


@router.get("", summary="List teachers")
async def list_teachers(service: TeacherServiceDep) -> list[TeacherResponse]:
    teachers = await service.list_teachers()
    return [TeacherResponse.from_domain(t) for t in teachers]


@router.get("/active", summary="List active teachers")
async def list_active_teachers(service: TeacherServiceDep) -> list[TeacherResponse]:
    teachers = await service.list_active_teachers()
    return [TeacherResponse.from_domain(t) for t in teachers]


@router.get(
    "/by-email/{email}",
    summary="Get teacher by email",
    responses={404: {"description": "Teacher not found"}},
)
async def get_teacher_by_email(
    email: str,
    service: TeacherServiceDep,
) -> TeacherResponse:
    teacher = await service.get_teacher_by_email(email)
    if teacher is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teacher with email {email} not found",
        )
    return TeacherResponse.from_domain(teacher)


@router.get(
    "/{teacher_id}",
    summary="Get teacher",
    responses={404: {"description": "Teacher not found"}},
)
async def get_teacher(teacher_id: UUID, service: TeacherServiceDep) -> TeacherResponse:
    teacher = await service.get_teacher(teacher_id)
    if teacher is None:
        raise _not_found(teacher_id)
    return TeacherResponse.from_domain(teacher)


@router.get(
    "/{teacher_id}/details",
    summary="Get teacher with courses",
    responses={404: {"description": "Teacher not found"}},
)
async def get_teacher_details(
    teacher_id: UUID,
    service: TeacherServiceDep,
) -> TeacherDetailResponse:
    teacher = await service.get_teacher_with_courses(teacher_id)
    if teacher is None:
        raise _not_found(teacher_id)
    return TeacherDetailResponse.from_domain(teacher)


@router.get("/{teacher_id}/exists", summary="Check if a teacher exists")
async def teacher_exists(
    teacher_id: UUID,
    service: TeacherServiceDep,
) -> ExistsResponse:
    return ExistsResponse(exists=await service.teacher_exists(teacher_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create teacher",
    responses={
        201: {"description": "Teacher created"},
        400: {"description": "Invalid input"},
        404: {"description": "User not found"},
        409: {"description": "User already has a teacher profile"},
    },
)
async def create_teacher(
    request: TeacherCreateRequest,
    service: TeacherServiceDep,
    current_user: CurrentUser,
) -> TeacherResponse:
    """Create the teacher profile of an existing user."""
    teacher = await service.create_teacher(
        user_id=request.user_id,
        full_name=request.full_name,
        hire_date=request.hire_date,
    )
    logger.info("Teacher %s created by %s", teacher.id, current_user.username)
    return TeacherResponse.from_domain(teacher)


@router.put(
    "/{teacher_id}",
    summary="Update teacher",
    responses={
        400: {"description": "Invalid input"},
        404: {"description": "Teacher not found"},
    },
)
async def update_teacher(
    teacher_id: UUID,
    request: TeacherUpdateRequest,
    service: TeacherServiceDep,
    current_user: CurrentUser,
) -> TeacherResponse:
    teacher = await service.update_teacher(teacher_id, request.full_name)
    if teacher is None:
        raise _not_found(teacher_id)
    return TeacherResponse.from_domain(teacher)


@router.delete(
    "/{teacher_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete teacher",
    responses={
        204: {"description": "Teacher deleted"},
        404: {"description": "Teacher not found"},
        409: {"description": "Teacher still has assigned courses"},
    },
)
async def delete_teacher(
    teacher_id: UUID,
    service: TeacherServiceDep,
    current_user: CurrentUser,
) -> None:
    if not await service.delete_teacher(teacher_id):
        raise _not_found(teacher_id)
    logger.info("Teacher %s deleted by %s", teacher_id, current_user.username)
