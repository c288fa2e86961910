"""Validation helpers shared by the Garage entities."""

from typing import Any


class ValidationError(ValueError):
    """Raised when an entity is constructed with invalid field values."""
    pass


def require_text(value: Any, label: str) -> None:
    """Ensure a string field is present and not blank."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} cannot be null or empty")


def require_present(value: Any, label: str) -> None:
    """Ensure a field is not None."""
    if value is None:
        raise ValidationError(f"{label} cannot be null")


def require_non_negative(value: Any, label: str) -> None:
    """Ensure a numeric field is zero or greater."""
    if value is None:
        raise ValidationError(f"{label} cannot be null")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
