"""fileglob Rules System.

This module provides glob matching and the set algebra built on it:
- FileGlob: a single compiled glob pattern
- FileGlobSet, Union, Complement, EmptySet: composable path sets
- make, make_set, make_complement, make_union: construction entry points
"""

from .base import EMPTY_SET, EmptySet, MatchableSet
from .patterns import FileGlob, translate
from .sets import Complement, FileGlobSet, Union, make, make_complement, make_set, make_union

__all__ = [
    # Pattern matching
    "translate",
    "FileGlob",
    # Sets
    "MatchableSet",
    "EmptySet",
    "EMPTY_SET",
    "FileGlobSet",
    "Union",
    "Complement",
    # Factories
    "make",
    "make_set",
    "make_complement",
    "make_union",
]
