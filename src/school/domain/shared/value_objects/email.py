"""Email value object."""

from dataclasses import dataclass

from school.domain.shared.exceptions import ErrorCode, ValidationError


class InvalidEmailError(ValidationError):
    """Raised when an email address is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


@dataclass(frozen=True)
class Email:
    """Value object representing an email address.

    The stored value is trimmed but otherwise kept as given. Case folding
    is a concern of the User aggregate, not of the address itself.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            msg = "Email is required"
            raise InvalidEmailError(msg)

        normalized = str(self.value).strip()

        if "@" not in normalized:
            msg = f"Email is invalid: {normalized}"
            raise InvalidEmailError(msg)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
