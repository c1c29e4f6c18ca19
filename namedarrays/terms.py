"""
Wrappers that say how one dimension is addressed, and the resolved form of
such an address.

Plain Python values are classified directly by the indexing code: integers
are positions, slices are ranges, lists/arrays are selections and anything
else is a name. The wrappers below cover the cases that classification
cannot express on its own.
"""
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Name:
    """Look ``key`` up in the name table, even when it is an integer or tuple."""
    key: Any


@dataclass(frozen=True)
class Pos:
    """Use ``position`` (int, list of ints or slice) without any name lookup."""
    position: Any


@dataclass(frozen=True)
class Not:
    """Select every position not matched by ``term``."""
    term: Any


@dataclass(frozen=True)
class Axis:
    """Address the dimension labelled ``label`` with ``term``."""
    label: Any
    term: Any = field(default_factory=lambda: slice(None))


@dataclass(frozen=True)
class ResolvedTerm:
    """
    Canonical form of one dimension's term.

    ``index`` is an int when the dimension collapses, otherwise a slice or a
    list of positions.
    """
    index: int | slice | list
    collapse: bool

    def positions(self, extent: int) -> list[int]:
        if isinstance(self.index, slice):
            return list(range(extent)[self.index])
        if isinstance(self.index, list):
            return [p + extent if p < 0 else p for p in self.index]
        return [self.index + extent if self.index < 0 else self.index]
