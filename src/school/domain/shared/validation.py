"""Text validation shared by profiles and courses."""

from typing import Optional

from school.domain.shared.exceptions import ValidationError


def require_text(
    value: Optional[str],
    label: str,
    min_length: int,
    max_length: int,
) -> str:
    """Trim ``value`` and check its length bounds.

    Raises
    ------
    ValidationError
        If the trimmed value is empty, shorter than ``min_length`` or
        longer than ``max_length``
    """
    if value is None or not value.strip():
        msg = f"{label} is required"
        raise ValidationError(msg)

    normalized = value.strip()

    if len(normalized) < min_length:
        msg = f"{label} must be at least {min_length} characters"
        raise ValidationError(msg, details={"length": len(normalized)})

    if len(normalized) > max_length:
        msg = f"{label} cannot exceed {max_length} characters"
        raise ValidationError(msg, details={"length": len(normalized)})

    return normalized


def optional_text(value: Optional[str], label: str, max_length: int) -> Optional[str]:
    """Trim an optional free-text field. Blank input becomes None."""
    if value is None or not value.strip():
        return None

    normalized = value.strip()
    if len(normalized) > max_length:
        msg = f"{label} cannot exceed {max_length} characters"
        raise ValidationError(msg, details={"length": len(normalized)})
    return normalized
