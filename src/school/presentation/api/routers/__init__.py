from school.presentation.api.routers.auth import router as auth_router
from school.presentation.api.routers.courses import router as courses_router
from school.presentation.api.routers.enrollments import router as enrollments_router
from school.presentation.api.routers.students import router as students_router
from school.presentation.api.routers.teachers import router as teachers_router

__all__ = [
    "auth_router",
    "courses_router",
    "enrollments_router",
    "students_router",
    "teachers_router",
]
