# ruff: noqa: E501 - Long import paths in __init__.py re-exports
from school.domain.teacher.repositories.teacher_profile_repository import TeacherProfileRepository

__all__ = ["TeacherProfileRepository"]
