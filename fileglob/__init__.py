"""fileglob - match file paths against glob patterns and compose pattern sets.

Example:
    >>> import fileglob
    >>> sources = fileglob.make_complement(["**/*.js"], ["**/test/*"])
    >>> sources.matches("src/lib/a.js")
    True
    >>> sources.matches("src/test/a.js")
    False
"""

from fileglob.core.constants import FILEGLOB_VERSION
from fileglob.core.validators import ValidationError
from fileglob.rules import (
    EMPTY_SET,
    Complement,
    EmptySet,
    FileGlob,
    FileGlobSet,
    MatchableSet,
    Union,
    make,
    make_complement,
    make_set,
    make_union,
    translate,
)

__version__ = FILEGLOB_VERSION

__all__ = [
    # Factories
    "make",
    "make_set",
    "make_complement",
    "make_union",
    # Sets
    "MatchableSet",
    "EmptySet",
    "EMPTY_SET",
    "FileGlob",
    "FileGlobSet",
    "Union",
    "Complement",
    "translate",
    # Errors
    "ValidationError",
]
