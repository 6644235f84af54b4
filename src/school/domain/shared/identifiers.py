"""Identifier helpers shared by all aggregates.

Aggregates reference each other by UUID. A reference is only accepted when
it parses as a UUID and is not the nil UUID.
"""

from typing import Union
from uuid import UUID

from school.domain.shared.exceptions import ErrorCode, ValidationError

NIL_UUID = UUID(int=0)


def require_reference_id(value: Union[UUID, str, None], label: str) -> UUID:
    """Validate and normalize a reference to another aggregate.

    Parameters
    ----------
    value
        The raw identifier (UUID instance or its string form)
    label
        Human-readable name of the reference, used in error messages

    Returns
    -------
    The identifier as a UUID

    Raises
    ------
    ValidationError
        If the value is missing, malformed or the nil UUID
    """
    if value is None:
        msg = f"{label} is required"
        raise ValidationError(msg, code=ErrorCode.INVALID_REFERENCE)

    if isinstance(value, UUID):
        parsed = value
    else:
        try:
            parsed = UUID(str(value))
        except ValueError as e:
            msg = f"{label} must be a valid identifier"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_REFERENCE,
                details={"value": str(value)},
            ) from e

    if parsed == NIL_UUID:
        msg = f"{label} must be a valid identifier"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_REFERENCE,
            details={"value": str(value)},
        )

    return parsed
