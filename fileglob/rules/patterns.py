#!/usr/bin/env python3
r"""Glob pattern compilation for file paths.

A glob is translated into an anchored regular expression in one
left-to-right scan:
- ``**/`` matches zero or more whole path segments (``a/**/b`` matches
  ``a/b`` and ``a/x/y/b``)
- ``*`` matches any run of characters within one segment
- ``?`` matches exactly one character other than ``/``
- everything else, ``.`` included, matches itself

A ``**`` that is not followed by ``/`` is read as two ``*`` tokens and so
behaves like a single ``*``. No pattern is rejected.

Example:
    >>> glob = FileGlob("src/**/*.js")
    >>> glob.matches("src/lib/util.js")
    True
    >>> glob.matches("src/lib/util.json")
    False
    >>> str(FileGlob("*.js"))
    '(?s:[^/]*\\.js)\\Z'
"""

import re
from typing import Pattern

from fileglob.core.constants import SEPARATOR, FilePath, GlobPattern
from fileglob.core.logger import get_logger
from fileglob.core.validators import validate_glob
from fileglob.rules.base import MatchableSet

_SEGMENT_CHAR = f"[^{SEPARATOR}]"
_ANY_SEGMENTS = f"(?:{_SEGMENT_CHAR}*{SEPARATOR})*"
_DOUBLESTAR = "**" + SEPARATOR


def translate(glob: GlobPattern) -> str:
    """Translate a glob pattern into regular expression source.

    Args:
        glob: Glob pattern

    Returns:
        Regular expression matching whole paths only
    """
    parts = []
    i = 0
    n = len(glob)
    while i < n:
        ch = glob[i]
        if ch == "*":
            if glob.startswith(_DOUBLESTAR, i):
                parts.append(_ANY_SEGMENTS)
                i += len(_DOUBLESTAR)
                continue
            parts.append(_SEGMENT_CHAR + "*")
        elif ch == "?":
            parts.append(_SEGMENT_CHAR)
        else:
            parts.append(re.escape(ch))
        i += 1

    return "(?s:" + "".join(parts) + r")\Z"


class FileGlob(MatchableSet):
    """A single compiled glob pattern.

    Immutable; two FileGlobs are equal when built from the same pattern.
    """

    __slots__ = ("_glob", "_regex")

    def __init__(self, glob: GlobPattern):
        """Compile a glob pattern.

        Args:
            glob: Glob pattern string

        Raises:
            ValidationError: If glob is not a string
        """
        validate_glob(glob)
        self._glob = glob
        self._regex: Pattern[str] = re.compile(translate(glob))
        get_logger().debug("Compiled glob", glob=glob, regex=self._regex.pattern)

    @property
    def glob(self) -> GlobPattern:
        """Source glob pattern."""
        return self._glob

    @property
    def regex(self) -> Pattern[str]:
        """Compiled regular expression."""
        return self._regex

    def matches(self, path: FilePath) -> bool:
        """Test whether this glob matches the whole of a file path."""
        return self._regex.match(path) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileGlob):
            return NotImplemented
        return self._glob == other._glob

    def __hash__(self) -> int:
        return hash(self._glob)

    def __str__(self) -> str:
        return self._regex.pattern

    def __repr__(self) -> str:
        return f"FileGlob({self._glob!r})"
