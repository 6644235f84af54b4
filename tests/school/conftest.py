"""
Pytest configuration for school domain tests.

This conftest provides fixtures specific to the school domain
(profiles, courses and enrollments).
"""

import pytest

from school.domain.student import StudentProfile
from school.domain.teacher import TeacherProfile
from school_identity.domain.user import User
from tests.shared.fixtures.factories import TestSchoolFactory, TestUserFactory


@pytest.fixture
def student_user() -> User:
    """Provide a user with the Student role."""
    return TestUserFactory.alice()


@pytest.fixture
def teacher_user() -> User:
    """Provide a user with the Teacher role."""
    return TestUserFactory.grace()


@pytest.fixture
def student(student_user: User) -> StudentProfile:
    """Provide a student profile attached to ``student_user``."""
    return TestSchoolFactory.student(student_user.id)


@pytest.fixture
def teacher(teacher_user: User) -> TeacherProfile:
    """Provide a teacher profile attached to ``teacher_user``."""
    return TestSchoolFactory.teacher(teacher_user.id)
