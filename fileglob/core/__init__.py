"""fileglob Core - constants, input validation and logging shared across the package."""

from fileglob.core import constants, logger, validators

__all__ = [
    "constants",
    "logger",
    "validators",
]
