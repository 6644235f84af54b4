"""Courses router for course endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from school.presentation.api.dependencies import CourseServiceDep, CurrentUser
from school.presentation.api.schemas.common import ExistsResponse
from school.presentation.api.schemas.courses import (
    CourseCreateRequest,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(course_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Course with ID {course_id} not found",
    )


@router.get("", summary="List courses")
async def list_courses(service: CourseServiceDep) -> list[CourseResponse]:
    """List all courses ordered by title."""
    courses = await service.list_courses()
    return [CourseResponse.from_domain(c) for c in courses]


@router.get("/by-teacher/{teacher_profile_id}", summary="List courses of a teacher")
async def list_courses_by_teacher(
    teacher_profile_id: UUID,
    service: CourseServiceDep,
) -> list[CourseResponse]:
    courses = await service.list_courses_by_teacher(teacher_profile_id)
    return [CourseResponse.from_domain(c) for c in courses]


@router.get(
    "/{course_id}",
    summary="Get course",
    responses={404: {"description": "Course not found"}},
)
async def get_course(course_id: UUID, service: CourseServiceDep) -> CourseResponse:
    course = await service.get_course(course_id)
    if course is None:
        raise _not_found(course_id)
    return CourseResponse.from_domain(course)


@router.get(
    "/{course_id}/details",
    summary="Get course with teacher and enrollments",
    responses={404: {"description": "Course not found"}},
)
async def get_course_details(
    course_id: UUID,
    service: CourseServiceDep,
) -> CourseDetailResponse:
    course = await service.get_course_with_details(course_id)
    if course is None:
        raise _not_found(course_id)
    return CourseDetailResponse.from_domain(course)


@router.get("/{course_id}/exists", summary="Check if a course exists")
async def course_exists(course_id: UUID, service: CourseServiceDep) -> ExistsResponse:
    return ExistsResponse(exists=await service.course_exists(course_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
    responses={
        201: {"description": "Course created"},
        400: {"description": "Invalid input"},
        404: {"description": "Teacher not found"},
    },
)
async def create_course(
    request: CourseCreateRequest,
    service: CourseServiceDep,
    current_user: CurrentUser,
) -> CourseDetailResponse:
    course = await service.create_course(
        title=request.title,
        teacher_profile_id=request.teacher_profile_id,
        start_date=request.start_date,
        description=request.description,
    )
    logger.info("Course %s created by %s", course.id, current_user.username)
    return CourseDetailResponse.from_domain(course)


@router.put(
    "/{course_id}",
    summary="Update course",
    responses={
        400: {"description": "Invalid input"},
        404: {"description": "Course or teacher not found"},
    },
)
async def update_course(
    course_id: UUID,
    request: CourseUpdateRequest,
    service: CourseServiceDep,
    current_user: CurrentUser,
) -> CourseDetailResponse:
    course = await service.update_course(
        course_id,
        title=request.title,
        teacher_profile_id=request.teacher_profile_id,
        start_date=request.start_date,
        description=request.description,
    )
    if course is None:
        raise _not_found(course_id)
    return CourseDetailResponse.from_domain(course)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete course",
    responses={
        204: {"description": "Course deleted"},
        404: {"description": "Course not found"},
        409: {"description": "Course still has enrollments"},
    },
)
async def delete_course(
    course_id: UUID,
    service: CourseServiceDep,
    current_user: CurrentUser,
) -> None:
    if not await service.delete_course(course_id):
        raise _not_found(course_id)
    logger.info("Course %s deleted by %s", course_id, current_user.username)
