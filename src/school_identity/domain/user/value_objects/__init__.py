"""Value objects for the user domain having identity concerns only."""

from school_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "UserRole",
]
