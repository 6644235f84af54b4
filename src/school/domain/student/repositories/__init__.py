# ruff: noqa: E501 - Long import paths in __init__.py re-exports
from school.domain.student.repositories.student_profile_repository import StudentProfileRepository

__all__ = ["StudentProfileRepository"]
