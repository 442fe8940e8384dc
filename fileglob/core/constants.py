"""
fileglob: Constants and Type Definitions

This module provides package-wide constants, error codes, and type aliases
shared by the glob compiler and the matchable sets.
"""
from enum import IntEnum
from typing import TypeAlias

# Version information
FILEGLOB_VERSION = "1.0.0"

# Path separator; the only character wildcards refuse to cross
SEPARATOR = "/"


# Error codes (0-9 range)
class ErrorCode(IntEnum):
    """Standardized error codes for fileglob operations."""

    INVALID_INPUT = 1  # Wrong input shape handed to a factory


# Type aliases for clarity
FilePath: TypeAlias = str
GlobPattern: TypeAlias = str
