import numbers

import numpy as np

from .errors import AmbiguousAxis, UnknownAxis, UnknownName
from .name_table import NameTable, default_dimnames
from .terms import Axis, Name, Not, Pos, ResolvedTerm


def is_integer(x) -> bool:
    """True if x is an integer (both pure Python or NumPy)."""
    return isinstance(x, numbers.Integral) and not is_bool(x)


def is_bool(x) -> bool:
    """True if x is a boolean (both pure Python or NumPy)."""
    return type(x) in (bool, np.bool_)


def is_selection(x) -> bool:
    """True if x selects several entries along one dimension."""
    if isinstance(x, (list, tuple, range)):
        return True
    return isinstance(x, np.ndarray) and x.ndim == 1


def _is_per_dim(names) -> bool:
    return isinstance(names, (list, tuple)) and all(
        entry is None or isinstance(entry, NameTable) or is_selection(entry)
        for entry in names
    )


def _bounds_error(position, dim, extent):
    return IndexError(f"index {position} is out of bounds for axis {dim} with size {extent}")


class NamedMixin:
    """
    Mixin for named dimension support.

    Subclasses provide ``shape``, the wrapped object as ``_raw`` and the two
    hooks ``_take`` and ``_wrap`` used by the read path.
    """

    def _init_names(self, names=None, dimnames=None):
        shape = self.shape
        ndim = len(shape)

        if isinstance(names, dict):
            if dimnames is not None:
                raise ValueError("Dimension labels given both as names keys and as dimnames")
            dimnames = list(names.keys())
            names = list(names.values())

        # 1. One entry per dimension, a flat list names a 1-D array
        if names is None:
            names = [None] * ndim
        elif ndim == 1 and not _is_per_dim(names):
            names = [names]
        names = list(names)
        if len(names) != ndim:
            raise ValueError(f"Expected names for {ndim} dimensions, got {len(names)}")

        # 2. Build tables, checking each one against its extent
        tables = []
        for dim, (entry, extent) in enumerate(zip(names, shape)):
            if entry is None:
                table = NameTable.default(extent)
            elif isinstance(entry, NameTable):
                table = entry.copy()
            else:
                table = NameTable(entry)
            if len(table) != extent:
                raise ValueError(
                    f"Dimension {dim} has {extent} entries but {len(table)} names"
                )
            tables.append(table)

        # 3. Dimension labels
        if dimnames is None:
            dimnames = default_dimnames(ndim)
        dimnames = list(dimnames)
        if len(dimnames) != ndim:
            raise ValueError(f"Expected {ndim} dimension labels, got {len(dimnames)}")

        self._tables = tables
        self._dimnames = dimnames

    # --- Metadata access ---

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def tables(self) -> tuple:
        return tuple(self._tables)

    @property
    def names(self) -> list[list]:
        """Names of every dimension, in table order."""
        return [table.keys() for table in self._tables]

    @property
    def dimnames(self) -> list:
        return list(self._dimnames)

    def axis_index(self, axis) -> int:
        """
        Dimension number for ``axis``: an integer counts dimensions (negative
        from the end), anything else is matched against the dimension labels.
        """
        ndim = self.ndim
        if is_integer(axis):
            if not -ndim <= axis < ndim:
                raise IndexError(f"axis {axis} is out of bounds for array of dimension {ndim}")
            return int(axis) % ndim
        if isinstance(axis, Axis):
            axis = axis.label

        matches = [dim for dim, label in enumerate(self._dimnames) if label == axis]
        if not matches:
            raise UnknownAxis(axis, self._dimnames)
        if len(matches) > 1:
            raise AmbiguousAxis(f"Label {axis!r} is shared by dimensions {matches}")
        return matches[0]

    # --- Renaming ---

    def setnames(self, axis, names):
        """Replace every name of one dimension."""
        self._tables[self.axis_index(axis)].rebuild(names)

    def setname(self, axis, old, new):
        """
        Rename one entry. ``old`` is a position when it is an integer or
        ``Pos``, otherwise (or wrapped in ``Name``) it is the current name.
        """
        dim = self.axis_index(axis)
        table = self._tables[dim]
        if isinstance(old, Name) or not (is_integer(old) or isinstance(old, Pos)):
            key = old.key if isinstance(old, Name) else old
            if key not in table:
                raise UnknownName([key], axis=self._dimnames[dim])
            table.rename(key, new)
            return

        position = old.position if isinstance(old, Pos) else old
        if not is_integer(position):
            raise IndexError(f"Pos expects integer positions, got {position!r}")
        extent = len(table)
        if not -extent <= position < extent:
            raise _bounds_error(position, dim, extent)
        table.rename_at(int(position) % extent, new)

    def setdimname(self, axis, label):
        self._dimnames[self.axis_index(axis)] = label

    def setdimnames(self, labels):
        labels = list(labels)
        if len(labels) != self.ndim:
            raise ValueError(f"Expected {self.ndim} dimension labels, got {len(labels)}")
        self._dimnames = labels

    # --- Key normalization ---

    def _normalize_key(self, key) -> tuple:
        """Turn a key into exactly one raw term per dimension."""
        ndim = self.ndim

        if isinstance(key, dict):
            return self._axis_keyed(key.items())
        if not isinstance(key, tuple):
            key = (key,)

        # Axis-keyed terms address dimensions by label, in any order
        n_axis = sum(1 for item in key if isinstance(item, Axis))
        if n_axis:
            if n_axis != len(key):
                raise IndexError("Axis-keyed terms cannot be mixed with positional terms")
            return self._axis_keyed((item.label, item.term) for item in key)

        # Expand the first ellipsis into the wildcards it stands for
        e_idx = next((i for i, item in enumerate(key) if item is Ellipsis), None)
        if e_idx is not None:
            missing = max(0, ndim - (len(key) - 1))
            key = key[:e_idx] + (slice(None),) * missing + key[e_idx + 1:]

        if len(key) > ndim:
            raise IndexError(
                f"too many indices for array: array is {ndim}-dimensional, "
                f"but {len(key)} were indexed"
            )
        return key + (slice(None),) * (ndim - len(key))

    def _axis_keyed(self, pairs) -> tuple:
        claimed = {}
        for label, term in pairs:
            dim = self.axis_index(Axis(label))
            if dim in claimed:
                raise AmbiguousAxis(f"Dimension {label!r} is addressed more than once")
            claimed[dim] = term
        return tuple(claimed.get(dim, slice(None)) for dim in range(self.ndim))

    # --- Per-dimension resolution ---

    def _lookup(self, key, dim: int) -> int:
        try:
            return self._tables[dim].lookup(key)
        except UnknownName as err:
            raise UnknownName(err.keys, axis=self._dimnames[dim]) from None

    def _translate_bound(self, bound, dim: int):
        if bound is None or is_integer(bound):
            return bound
        if isinstance(bound, Pos):
            return bound.position
        if isinstance(bound, Name):
            bound = bound.key
        return self._lookup(bound, dim)

    def _translate_slice(self, item: slice, dim: int) -> slice:
        """Helper to translate a slice, making name boundaries inclusive."""
        start = self._translate_bound(item.start, dim)
        stop = self._translate_bound(item.stop, dim)

        # A name stop includes the named entry itself
        if item.stop is not None and not is_integer(item.stop) and not isinstance(item.stop, Pos):
            step = item.step if item.step is not None else 1
            if step > 0:
                stop += 1
            else:
                # If negative step, python slices require None to include index 0
                stop = stop - 1 if stop > 0 else None

        return slice(start, stop, item.step)

    def _translate_list(self, items, dim: int) -> list[int]:
        items = list(items)
        extent = self.shape[dim]

        if items and all(is_bool(k) for k in items):
            if len(items) != extent:
                raise IndexError(
                    f"boolean index did not match indexed array along axis {dim}; "
                    f"size of axis is {extent} but size of corresponding boolean axis is {len(items)}"
                )
            return [i for i, keep in enumerate(items) if keep]

        table = self._tables[dim]
        positions, missing = [], []
        for k in items:
            if isinstance(k, Pos):
                k = k.position
            if is_integer(k):
                positions.append(int(k))
                continue
            if isinstance(k, Name):
                k = k.key
            if k in table:
                positions.append(table.lookup(k))
            else:
                missing.append(k)

        if missing:
            raise UnknownName(missing, axis=self._dimnames[dim])
        return positions

    def _checked_positions(self, term: ResolvedTerm, dim: int) -> list[int]:
        extent = self.shape[dim]
        if not isinstance(term.index, slice):
            raw = term.index if isinstance(term.index, list) else [term.index]
            for p in raw:
                if not -extent <= p < extent:
                    raise _bounds_error(p, dim, extent)
        return term.positions(extent)

    def _resolve_term(self, item, dim: int) -> ResolvedTerm:
        """Resolve the term addressing dimension ``dim``."""
        if isinstance(item, Pos):
            pos = item.position
            if isinstance(pos, slice):
                return ResolvedTerm(pos, collapse=False)
            if is_integer(pos):
                return ResolvedTerm(int(pos), collapse=True)
            if is_selection(pos) and all(is_integer(p) for p in pos):
                return ResolvedTerm([int(p) for p in pos], collapse=False)
            raise IndexError(f"Pos expects integer positions, got {pos!r}")

        if isinstance(item, Name):
            return ResolvedTerm(self._lookup(item.key, dim), collapse=True)

        if isinstance(item, Not):
            inner = self._resolve_term(item.term, dim)
            excluded = set(self._checked_positions(inner, dim))
            return ResolvedTerm(
                [p for p in range(self.shape[dim]) if p not in excluded], collapse=False
            )

        if item is None:
            raise IndexError("Adding dimensions with None is not supported on named arrays")
        if item is Ellipsis:
            raise IndexError("an index can only have a single ellipsis ('...')")
        if isinstance(item, Axis):
            raise IndexError("Axis-keyed terms cannot be mixed with positional terms")

        if isinstance(item, slice):
            return ResolvedTerm(self._translate_slice(item, dim), collapse=False)
        if is_integer(item):
            return ResolvedTerm(int(item), collapse=True)
        if is_selection(item):
            return ResolvedTerm(self._translate_list(item, dim), collapse=False)
        if isinstance(item, np.ndarray):
            if item.ndim == 0:
                return self._resolve_term(item.item(), dim)
            raise IndexError(f"Only 1-D selections are supported, got {item.ndim}-D")

        return ResolvedTerm(self._lookup(item, dim), collapse=True)

    def _resolve_key(self, key) -> list[ResolvedTerm]:
        return [self._resolve_term(item, dim) for dim, item in enumerate(self._normalize_key(key))]

    # --- Shape decision and read path ---

    def _derived_table(self, dim: int, term: ResolvedTerm) -> NameTable:
        source = self._tables[dim]
        if term.index == slice(None):
            return source.copy()

        positions = term.positions(self.shape[dim])
        table = NameTable(
            [source.key_at(p) for p in positions], key_type=source.key_type, unique=False
        )
        table.unique = source.unique and len(set(positions)) == len(positions)
        return table

    def _read(self, key):
        terms = self._resolve_key(key)

        # Ints and slices go through basic indexing; lists are taken per axis afterwards
        basic = tuple(slice(None) if isinstance(t.index, list) else t.index for t in terms)
        data = self._raw[basic]

        if all(t.collapse for t in terms):
            return data

        tables, dimnames = [], []
        axis = 0
        for dim, term in enumerate(terms):
            if term.collapse:
                continue
            if isinstance(term.index, list):
                data = self._take(data, term.index, axis)
            tables.append(self._derived_table(dim, term))
            dimnames.append(self._dimnames[dim])
            axis += 1

        return self._wrap(data, tables, dimnames)

    def __getitem__(self, key):
        return self._read(key)
