from enum import Enum


class UserRole(str, Enum):
    """Closed set of roles. Persisted by value."""

    STUDENT = "Student"
    TEACHER = "Teacher"
    ADMIN = "Admin"
