from school.application.services.authentication_service import (
    AuthenticationService,
)
from school.application.services.course_service import CourseService
from school.application.services.enrollment_service import EnrollmentService
from school.application.services.student_service import StudentService
from school.application.services.teacher_service import TeacherService

__all__ = [
    "AuthenticationService",
    "CourseService",
    "EnrollmentService",
    "StudentService",
    "TeacherService",
]
