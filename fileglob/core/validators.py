"""
fileglob Core: Input Validators.

Glob strings themselves are never rejected; only the type of the value
carrying them is checked.
"""
from typing import Any

from fileglob.core.constants import ErrorCode


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


def validate_glob(pattern: Any) -> str:
    """Check that a glob pattern is a string.

    Any string is accepted, including the empty string and malformed
    wildcard sequences such as a dangling ``**``.

    Args:
        pattern: Candidate glob pattern

    Returns:
        The pattern unchanged

    Raises:
        ValidationError: If pattern is not a string
    """
    if not isinstance(pattern, str):
        raise ValidationError(f"Glob pattern must be string, got {type(pattern).__name__}")
    return pattern
