#!/usr/bin/env python3
"""Base class for matchable sets of file paths.

Every set answers two questions about path strings:
- matches(): does this path belong to the set?
- filter(): which paths of a list belong to the set?

filter() is implemented once here in terms of matches(), so the two always
agree. Subclasses override matches() only. The base matches() returns
False, which makes a bare MatchableSet behave as the empty set.

Example:
    >>> class EverythingSet(MatchableSet):
    ...     def matches(self, path):
    ...         return True
    ...
    >>> EverythingSet().filter(["a.txt", "b/c.js"])
    ['a.txt', 'b/c.js']
"""

from typing import Iterable, List

from fileglob.core.constants import FilePath


class MatchableSet:
    """A set of file paths defined by a membership test."""

    __slots__ = ()

    def matches(self, path: FilePath) -> bool:
        """Test whether a path belongs to this set.

        Args:
            path: Relative file path, ``/``-separated

        Returns:
            True if the path belongs to the set
        """
        return False

    def filter(self, paths: Iterable[FilePath]) -> List[FilePath]:
        """Return the paths belonging to this set, in their original order.

        Args:
            paths: File paths to test

        Returns:
            List of matching paths
        """
        return [path for path in paths if self.matches(path)]

    def __contains__(self, path: FilePath) -> bool:
        return self.matches(path)


class EmptySet(MatchableSet):
    """The set containing no paths."""

    __slots__ = ()

    def filter(self, paths: Iterable[FilePath]) -> List[FilePath]:
        return []

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EmptySet()"


# Default set used when no patterns are supplied
EMPTY_SET = EmptySet()
