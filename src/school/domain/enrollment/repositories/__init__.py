# ruff: noqa: E501 - Long import paths in __init__.py re-exports
from school.domain.enrollment.repositories.enrollment_repository import EnrollmentRepository

__all__ = ["EnrollmentRepository"]
