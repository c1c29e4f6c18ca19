"""Error types raised while resolving names and axes."""


class NamedArrayError(Exception):
    """Base class for namedarrays errors."""


class UnknownName(NamedArrayError, KeyError):
    """
    One or more names are absent from a dimension's name table.
    """

    def __init__(self, keys, axis=None):
        self.keys = list(keys)
        self.axis = axis
        super().__init__(*self.keys)

    def __str__(self):
        keys = ", ".join(repr(k) for k in self.keys)
        if self.axis is None:
            return f"Name(s) not found: {keys}"
        return f"Name(s) not found along dimension {self.axis!r}: {keys}"


class UnknownAxis(NamedArrayError, KeyError):
    """An axis-keyed term names a label no dimension carries."""

    def __init__(self, label, dimnames):
        self.label = label
        self.dimnames = list(dimnames)
        super().__init__(label)

    def __str__(self):
        return f"No dimension labelled {self.label!r} (dimensions are {self.dimnames})"


class AmbiguousAxis(NamedArrayError, IndexError):
    """Two axis-keyed terms, or one shared label, target the same dimension."""


class TypeMismatch(NamedArrayError, TypeError):
    """A key's type differs from the fixed key type of its name table."""


class DuplicateKey(NamedArrayError, ValueError):
    """A rename or rebuild would repeat a key within a name table."""


class ShapeMismatch(NamedArrayError, ValueError):
    """An assigned value cannot be broadcast to the selected positions."""
