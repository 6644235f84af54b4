"""Model to aggregate mapping shared by several repositories.

Detailed loads hand already-mapped related aggregates in, so the
aggregates never load anything lazily.
"""

from __future__ import annotations

from typing import Optional, Sequence

from school.domain.course import Course
from school.domain.enrollment import Enrollment, Grade
from school.domain.shared.time import ensure_tz_aware
from school.domain.student import StudentProfile
from school.domain.teacher import TeacherProfile
from school.infrastructure.persistence.sqlalchemy.models import (
    CourseModel,
    EnrollmentModel,
    StudentProfileModel,
    TeacherProfileModel,
)


def _aware(value):
    return ensure_tz_aware(value) if value is not None else None


def student_to_domain(
    model: StudentProfileModel,
    enrollments: Sequence[Enrollment] = (),
) -> StudentProfile:
    return StudentProfile.reconstitute(
        id=model.id,
        user_id=model.user_id,
        full_name=model.full_name,
        birth_date=model.birth_date,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=_aware(model.updated_at),
        enrollments=enrollments,
    )


def teacher_to_domain(
    model: TeacherProfileModel,
    courses: Sequence[Course] = (),
) -> TeacherProfile:
    return TeacherProfile.reconstitute(
        id=model.id,
        user_id=model.user_id,
        full_name=model.full_name,
        hire_date=model.hire_date,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=_aware(model.updated_at),
        courses=courses,
    )


def course_to_domain(
    model: CourseModel,
    teacher: Optional[TeacherProfile] = None,
    enrollments: Sequence[Enrollment] = (),
) -> Course:
    return Course.reconstitute(
        id=model.id,
        title=model.title,
        teacher_profile_id=model.teacher_profile_id,
        start_date=model.start_date,
        description=model.description,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=_aware(model.updated_at),
        teacher=teacher,
        enrollments=enrollments,
    )


def enrollment_to_domain(
    model: EnrollmentModel,
    student: Optional[StudentProfile] = None,
    course: Optional[Course] = None,
) -> Enrollment:
    return Enrollment.reconstitute(
        id=model.id,
        student_profile_id=model.student_profile_id,
        course_id=model.course_id,
        enroll_date=ensure_tz_aware(model.enroll_date),
        grade=Grade(model.grade) if model.grade is not None else None,
        created_at=ensure_tz_aware(model.created_at),
        updated_at=_aware(model.updated_at),
        student=student,
        course=course,
    )
