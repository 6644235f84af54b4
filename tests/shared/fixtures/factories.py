"""
Test data factories for creating deterministic test entities.

These factories provide consistent test data across all tests.
Use fixed values to ensure reproducibility.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory, TestSchoolFactory

    def test_something():
        user = TestUserFactory.alice()
        student = TestSchoolFactory.student(user.id)
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from school.domain.course import Course
from school.domain.enrollment import Enrollment
from school.domain.student import StudentProfile
from school.domain.teacher import TeacherProfile
from school_identity.domain.user import User, UserRole

# Never verified against; repositories only need a non-blank value
FAKE_PASSWORD_HASH = "pbkdf2_sha256$10000$c2FsdA==$a2V5"


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for creating test users.

    Alice is a student, Grace is a teacher and Root is an admin.
    """

    ALICE_USERNAME = "alice"
    ALICE_EMAIL = "alice@example.com"

    BOB_USERNAME = "bob"
    BOB_EMAIL = "bob@example.com"

    GRACE_USERNAME = "grace"
    GRACE_EMAIL = "grace@example.com"

    ROOT_USERNAME = "root"
    ROOT_EMAIL = "root@example.com"

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        role: UserRole = UserRole.STUDENT,
    ) -> User:
        return User.create(
            username=username,
            email=email,
            password_hash=FAKE_PASSWORD_HASH,
            role=role,
        )

    @classmethod
    def alice(cls) -> User:
        """Alice - a student user."""
        return cls.create(cls.ALICE_USERNAME, cls.ALICE_EMAIL)

    @classmethod
    def bob(cls) -> User:
        """Bob - a second student user."""
        return cls.create(cls.BOB_USERNAME, cls.BOB_EMAIL)

    @classmethod
    def grace(cls) -> User:
        """Grace - a teacher user."""
        return cls.create(cls.GRACE_USERNAME, cls.GRACE_EMAIL, UserRole.TEACHER)

    @classmethod
    def root(cls) -> User:
        """Root - an admin user."""
        return cls.create(cls.ROOT_USERNAME, cls.ROOT_EMAIL, UserRole.ADMIN)


@dataclass(frozen=True)
class TestSchoolFactory:
    """Factory for profiles, courses and enrollments with fixed dates."""

    STUDENT_BIRTH_DATE = date(2005, 5, 17)
    TEACHER_HIRE_DATE = date(2015, 9, 1)
    COURSE_START_DATE = date(2025, 9, 1)

    @classmethod
    def student(
        cls,
        user_id: UUID,
        full_name: str = "Alice Liddell",
        birth_date: Optional[date] = None,
    ) -> StudentProfile:
        return StudentProfile.create(
            user_id=user_id,
            full_name=full_name,
            birth_date=birth_date or cls.STUDENT_BIRTH_DATE,
        )

    @classmethod
    def teacher(
        cls,
        user_id: UUID,
        full_name: str = "Grace Hopper",
        hire_date: Optional[date] = None,
    ) -> TeacherProfile:
        return TeacherProfile.create(
            user_id=user_id,
            full_name=full_name,
            hire_date=hire_date or cls.TEACHER_HIRE_DATE,
        )

    @classmethod
    def course(
        cls,
        teacher_profile_id: UUID,
        title: str = "Math 101",
        description: Optional[str] = "Introduction to algebra",
        start_date: Optional[date] = None,
    ) -> Course:
        return Course.create(
            title=title,
            teacher_profile_id=teacher_profile_id,
            start_date=start_date or cls.COURSE_START_DATE,
            description=description,
        )

    @classmethod
    def enrollment(
        cls,
        student_profile_id: UUID,
        course_id: UUID,
        enroll_date: Optional[datetime] = None,
    ) -> Enrollment:
        return Enrollment.create(student_profile_id, course_id, enroll_date)
