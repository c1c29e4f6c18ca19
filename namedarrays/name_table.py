import logging
import string

import numpy as np

from .errors import DuplicateKey, TypeMismatch, UnknownName

logger = logging.getLogger(__name__)


def _as_key(key):
    """Store numpy scalars as their plain Python value so lookups hash alike."""
    if isinstance(key, np.generic):
        return key.item()
    return key


def _common_type(keys):
    types = {type(k) for k in keys}
    if len(types) > 1:
        names = sorted(t.__name__ for t in types)
        raise TypeMismatch(f"Names must share one type, got {names}")
    return types.pop() if types else None


def default_dimnames(ndim: int) -> list[str]:
    """
    Default dimension labels: "A" through "Z", then "AA", "AB", ...
    """
    labels = []
    for i in range(ndim):
        label = ""
        i += 1
        while i > 0:
            i, rem = divmod(i - 1, 26)
            label = string.ascii_uppercase[rem] + label
        labels.append(label)
    return labels


class NameTable:
    """
    Ordered mapping between the names of one dimension and their positions.

    Names in a table share a single key type. Tables built from caller
    supplied names have that type fixed; default tables ("1".."n") leave it
    unset so the first ``rebuild`` may choose any type.

    Tables produced by an index access are built with ``unique=False``: the
    caller may have selected the same name twice. Lookups on such a table
    resolve to the first occurrence.
    """

    def __init__(self, keys=(), key_type=..., unique: bool = True):
        self._keys = [_as_key(k) for k in keys]
        self._index = {}
        self.unique = unique

        if key_type is ...:
            key_type = _common_type(self._keys)
        elif key_type is not None and key_type is not object:
            for k in self._keys:
                self._check_type(k, key_type)
        self.key_type = key_type

        for pos, k in enumerate(self._keys):
            if k in self._index:
                if unique:
                    raise DuplicateKey(f"Name {k!r} appears more than once")
                continue
            self._index[k] = pos

    @classmethod
    def default(cls, n: int) -> "NameTable":
        """
        Positional names "1".."n" with an unset key type.

        Names count from one while positions count from zero, so position 0
        is named "1".
        """
        return cls([str(i) for i in range(1, n + 1)], key_type=None)

    @staticmethod
    def _check_type(key, key_type):
        if key_type is None or key_type is object:
            return
        if type(key) is not key_type:
            raise TypeMismatch(
                f"Name {key!r} has type {type(key).__name__}, "
                f"this dimension uses {key_type.__name__}"
            )

    # --- Lookup ---

    def lookup(self, key) -> int:
        key = _as_key(key)
        try:
            return self._index[key]
        except (KeyError, TypeError):
            raise UnknownName([key]) from None

    def positions(self, keys) -> list[int]:
        """Resolve each key in the caller's order; repeats are allowed."""
        keys = [_as_key(k) for k in keys]
        missing = [k for k in keys if k not in self]
        if missing:
            raise UnknownName(missing)
        return [self._index[k] for k in keys]

    def key_at(self, position: int):
        return self._keys[position]

    # --- Mutation ---

    def rename(self, old_key, new_key):
        self.rename_at(self.lookup(old_key), new_key)

    def rename_at(self, position: int, new_key):
        new_key = _as_key(new_key)
        old_key = self._keys[position]
        self._check_type(new_key, self.key_type)
        if new_key == old_key:
            return
        if new_key in self:
            raise DuplicateKey(f"Name {new_key!r} already present")

        self._keys[position] = new_key
        if self._index.get(old_key) == position:
            del self._index[old_key]
            # A derived table may still hold old_key further along.
            for pos, k in enumerate(self._keys):
                if k == old_key:
                    self._index[k] = pos
                    break
        self._index[new_key] = position
        logger.debug("renamed %r -> %r at position %d", old_key, new_key, position)

    def rebuild(self, new_keys):
        new_keys = [_as_key(k) for k in new_keys]
        if len(new_keys) != len(self._keys):
            raise ValueError(
                f"Expected {len(self._keys)} names, got {len(new_keys)}"
            )
        key_type = _common_type(new_keys)
        if key_type is not None and self.key_type not in (None, object):
            self._check_type(new_keys[0], self.key_type)

        index = {}
        for pos, k in enumerate(new_keys):
            if k in index:
                raise DuplicateKey(f"Name {k!r} appears more than once")
            index[k] = pos

        self._keys = new_keys
        self._index = index
        self.unique = True
        if self.key_type is None:
            self.key_type = key_type

    # --- Container protocol ---

    def keys(self) -> list:
        return list(self._keys)

    def items(self):
        """Yield (name, position) pairs in table order."""
        return zip(self._keys, range(len(self._keys)))

    def copy(self) -> "NameTable":
        table = NameTable.__new__(NameTable)
        table._keys = list(self._keys)
        table._index = dict(self._index)
        table.unique = self.unique
        table.key_type = self.key_type
        return table

    def __len__(self):
        return len(self._keys)

    def __iter__(self):
        return iter(self._keys)

    def __contains__(self, key):
        try:
            return _as_key(key) in self._index
        except TypeError:
            return False

    def __eq__(self, other):
        if not isinstance(other, NameTable):
            return NotImplemented
        return self._keys == other._keys

    def __repr__(self):
        return f"NameTable({self._keys!r})"
