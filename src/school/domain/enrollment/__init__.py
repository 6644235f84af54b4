"""Enrollment domain: students taking courses, and their grades."""

from school.domain.enrollment.aggregates import Enrollment
from school.domain.enrollment.exceptions import AlreadyEnrolledError
from school.domain.enrollment.repositories import EnrollmentRepository
from school.domain.enrollment.value_objects import Grade

__all__ = [
    "AlreadyEnrolledError",
    "Enrollment",
    "EnrollmentRepository",
    "Grade",
]
