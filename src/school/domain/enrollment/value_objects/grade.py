"""Grade value object."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from school.domain.shared.exceptions import OutOfRangeError, ValidationError

GradeInput = Union[Decimal, int, float, str]

MIN_GRADE = Decimal("0")
MAX_GRADE = Decimal("100")


def _to_decimal(value: GradeInput) -> Decimal:
    if isinstance(value, bool):
        msg = "Grade must be a number"
        raise ValidationError(msg)
    if isinstance(value, Decimal):
        return value
    try:
        # str() keeps the float's shortest repr instead of its binary expansion
        return Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        msg = "Grade must be a number"
        raise ValidationError(msg, details={"value": str(value)}) from e


@dataclass(frozen=True)
class Grade:
    """A grade between 0 and 100 inclusive, stored without rounding."""

    value: Decimal

    def __post_init__(self) -> None:
        value = _to_decimal(self.value)

        if not value.is_finite() or value < MIN_GRADE or value > MAX_GRADE:
            msg = "Grade must be between 0 and 100"
            raise OutOfRangeError(msg, details={"value": str(value)})

        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Grade({self.value})"
