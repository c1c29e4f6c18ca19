import numpy as np
from numpy.lib.mixins import NDArrayOperatorsMixin

from .errors import ShapeMismatch
from .indexing import NamedMixin


class NamedArray(NDArrayOperatorsMixin, NamedMixin):
    """
    A numpy array whose dimensions carry name tables and labels.

    Elements can be addressed by position, by name, or both at once:

        a = NamedArray([[1, 2, 3], [4, 5, 6]],
                       names=[["one", "two"], ["a", "b", "c"]],
                       dimnames=["rows", "cols"])
        a["one", "a"]         # 1
        a["two", ["a", "c"]]  # NamedArray [4, 6] named ["a", "c"]
        a[{"cols": "b"}]      # NamedArray [2, 5] named ["one", "two"]
    """

    def __init__(self, array, names=None, dimnames=None):
        self._array = np.asarray(array)
        self._init_names(names, dimnames)

    # --- Underlying array ---

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def _raw(self):
        return self._array

    @property
    def shape(self) -> tuple:
        return self._array.shape

    @property
    def dtype(self):
        return self._array.dtype

    @property
    def size(self) -> int:
        return self._array.size

    def __len__(self):
        return len(self._array)

    def __array__(self, dtype=None, copy=None):
        if copy:
            return np.array(self._array, dtype=dtype)
        return np.asarray(self._array, dtype=dtype)

    def copy(self) -> "NamedArray":
        return NamedArray(self._array.copy(), self._tables, self._dimnames)

    # --- Read / write ---

    def _take(self, data, index, axis):
        return np.take(data, np.asarray(index, dtype=np.intp), axis=axis)

    def _wrap(self, data, tables, dimnames):
        return NamedArray(data, tables, dimnames)

    def __setitem__(self, key, value):
        terms = self._resolve_key(key)

        # Every dimension becomes an index array so selections combine orthogonally
        index, shape = [], []
        for dim, term in enumerate(terms):
            if isinstance(term.index, slice):
                sel = np.arange(self.shape[dim])[term.index]
            else:
                raw = term.index if isinstance(term.index, list) else [term.index]
                sel = np.asarray(raw, dtype=np.intp)
            index.append(sel)
            if not term.collapse:
                shape.append(len(sel))
        shape = tuple(shape)

        if isinstance(value, NamedArray):
            value = value.array
        value = np.asarray(value)
        try:
            compatible = np.broadcast_shapes(value.shape, shape) == shape
        except ValueError:
            compatible = False
        if not compatible:
            raise ShapeMismatch(
                f"Cannot assign a value of shape {value.shape} to a selection of shape {shape}"
            )

        full = tuple(len(sel) for sel in index)
        self._array[np.ix_(*index)] = np.broadcast_to(value, shape).reshape(full)

    # --- numpy passthrough ---

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        """
        Intercepts numpy operators (+, -, *, np.sin, etc). Results shaped like
        this array keep its names, anything else is returned as a plain value.
        """
        args = [x.array if isinstance(x, NamedArray) else x for x in inputs]
        out = kwargs.get("out")
        if out is not None:
            kwargs["out"] = tuple(x.array if isinstance(x, NamedArray) else x for x in out)

        result = getattr(ufunc, method)(*args, **kwargs)

        if out is not None:
            return out[0] if len(out) == 1 else out
        if isinstance(result, tuple):
            return tuple(self._rewrap(r) for r in result)
        return self._rewrap(result)

    def _rewrap(self, result):
        if isinstance(result, np.ndarray) and result.shape == self.shape:
            return NamedArray(result, self._tables, self._dimnames)
        return result

    # --- Structural transforms ---

    @property
    def T(self) -> "NamedArray":
        return self.transpose()

    def transpose(self, *axes) -> "NamedArray":
        from .transforms import transpose

        if len(axes) == 1 and isinstance(axes[0], (list, tuple)):
            axes = axes[0]
        return transpose(self, axes or None)

    def roll(self, shift, axis) -> "NamedArray":
        from .transforms import roll

        return roll(self, shift, axis)

    # --- Reductions ---

    def reduce(self, func, axis=None, name=None, **kwargs):
        from .reductions import reduce

        return reduce(self, func, axis, name, **kwargs)

    def sum(self, axis=None, **kwargs):
        return self.reduce(np.sum, axis, "sum", **kwargs)

    def prod(self, axis=None, **kwargs):
        return self.reduce(np.prod, axis, "prod", **kwargs)

    def mean(self, axis=None, **kwargs):
        return self.reduce(np.mean, axis, "mean", **kwargs)

    def min(self, axis=None, **kwargs):
        return self.reduce(np.min, axis, "min", **kwargs)

    def max(self, axis=None, **kwargs):
        return self.reduce(np.max, axis, "max", **kwargs)

    def __repr__(self):
        return (
            f"NamedArray({self._array!r}, names={self.names!r}, "
            f"dimnames={self._dimnames!r})"
        )
