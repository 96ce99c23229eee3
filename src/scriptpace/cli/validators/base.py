"""Validation errors and checks shared by CLI commands."""

from __future__ import annotations


class ValidationError(Exception):
    """A command-line argument was rejected before any work started.

    Attributes:
        field: Name of the offending argument, when known
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


def require_text(value: str | None, field_name: str) -> str:
    """Reject a missing or blank text argument such as a report title."""
    if value is None:
        raise ValidationError(f"{field_name} is required", field_name)
    if not value.strip():
        raise ValidationError(f"{field_name} cannot be empty", field_name)
    return value
