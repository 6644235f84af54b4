"""Value objects shared across domain boundaries."""

from school.domain.shared.value_objects.email import Email, InvalidEmailError

__all__ = [
    "Email",
    "InvalidEmailError",
]
