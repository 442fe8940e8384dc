#!/usr/bin/env python3
"""Set algebra over glob patterns.

This module composes FileGlobs into larger sets of file paths:
- FileGlobSet: paths matching any glob of a list
- Union: paths belonging to any of several sets
- Complement: paths in an includes set but not in an excludes set

The factory functions are the construction entry points. Each accepts
``None``, a glob string, an iterable of glob strings, or an already built
set, which is passed through unchanged.

Example:
    >>> sources = make_complement(["**/*.js"], ["**/test/*"])
    >>> sources.filter(["src/lib/a.js", "src/test/a.js", "README.md"])
    ['src/lib/a.js']
"""

from collections import abc
from typing import Any, Iterable, Optional, Tuple

from fileglob.core.constants import FilePath, GlobPattern
from fileglob.core.logger import get_logger
from fileglob.core.validators import ValidationError
from fileglob.rules.base import EMPTY_SET, MatchableSet
from fileglob.rules.patterns import FileGlob

SetLike = Any  # None, a glob, an iterable of globs, or a MatchableSet


class FileGlobSet(MatchableSet):
    """Paths matching at least one of a list of globs."""

    __slots__ = ("_fglobs",)

    def __init__(self, globs: Iterable[GlobPattern]):
        fglobs = []
        for i, glob in enumerate(globs):
            try:
                fglobs.append(FileGlob(glob))
            except ValidationError as e:
                raise ValidationError(f"Invalid glob pattern at index {i}: {e}")
        self._fglobs: Tuple[FileGlob, ...] = tuple(fglobs)

    @property
    def globs(self) -> Tuple[GlobPattern, ...]:
        return tuple(fglob.glob for fglob in self._fglobs)

    def matches(self, path: FilePath) -> bool:
        return any(fglob.matches(path) for fglob in self._fglobs)

    def __repr__(self) -> str:
        return f"FileGlobSet({list(self.globs)!r})"


class Union(MatchableSet):
    """Paths belonging to any of its component sets."""

    __slots__ = ("_sets",)

    def __init__(self, sets: Iterable[MatchableSet]):
        self._sets: Tuple[MatchableSet, ...] = tuple(sets)

    @property
    def sets(self) -> Tuple[MatchableSet, ...]:
        return self._sets

    def matches(self, path: FilePath) -> bool:
        return any(s.matches(path) for s in self._sets)

    def __repr__(self) -> str:
        return f"Union({list(self._sets)!r})"


class Complement(MatchableSet):
    """Paths matched by includes which aren't matched by excludes."""

    __slots__ = ("_includes", "_excludes")

    def __init__(self, includes: MatchableSet, excludes: MatchableSet):
        self._includes = includes
        self._excludes = excludes

    @property
    def includes(self) -> MatchableSet:
        return self._includes

    @property
    def excludes(self) -> MatchableSet:
        return self._excludes

    def matches(self, path: FilePath) -> bool:
        return self._includes.matches(path) and not self._excludes.matches(path)

    def __repr__(self) -> str:
        return f"Complement(includes={self._includes!r}, excludes={self._excludes!r})"


def make(glob: GlobPattern) -> FileGlob:
    """Make a new file glob.

    Args:
        glob: Glob pattern string

    Returns:
        Compiled FileGlob
    """
    return FileGlob(glob)


def make_set(globs: Optional[SetLike] = None) -> MatchableSet:
    """Make a set from a glob, a list of globs, or an existing set.

    Args:
        globs: ``None``, a glob string, an iterable of glob strings,
            or a MatchableSet

    Returns:
        EMPTY_SET for ``None``, the argument itself for a MatchableSet,
        otherwise a FileGlobSet

    Raises:
        ValidationError: If globs has any other shape or holds a non-string
    """
    if globs is None:
        return EMPTY_SET
    if isinstance(globs, MatchableSet):
        return globs
    if isinstance(globs, str):
        globs = [globs]
    elif isinstance(globs, (bytes, dict)) or not isinstance(globs, abc.Iterable):
        raise ValidationError(
            f"Expected a glob, a list of globs, or a set, got {type(globs).__name__}"
        )

    globs = list(globs)
    get_logger().debug("Building glob set", globs=globs)
    return FileGlobSet(globs)


def make_complement(
    includes: Optional[SetLike] = None, excludes: Optional[SetLike] = None
) -> Complement:
    """Make the complement of two sets: paths in includes but not in excludes.

    Either side may be anything make_set() accepts.
    """
    return Complement(make_set(includes), make_set(excludes))


def make_union(*sets: SetLike) -> Union:
    """Return the union of multiple sets.

    Each argument may be anything make_set() accepts.
    """
    return Union(make_set(s) for s in sets)
