import logging

from .name_table import NameTable
from .named_array import NamedArray

logger = logging.getLogger(__name__)


def reduce(array: NamedArray, func, axis=None, name: str | None = None, **kwargs):
    """
    Apply a numpy-style reduction ``func(raw, axis=..., keepdims=True)``.

    Each reduced dimension stays as a singleton whose only name combines the
    function name and the dimension label, e.g. "sum(A)". With ``axis=None``
    everything is reduced and the bare value is returned.

    :param array: The NamedArray to reduce.
    :param func: Reduction such as ``np.sum`` or ``np.mean``.
    :param axis: Dimension number, label, or a tuple of them.
    :param name: Function name used in the new labels, defaults to ``func.__name__``.
    :param kwargs: Passed on to ``func``.
    """
    if axis is None:
        return func(array.array, **kwargs)

    name = name or func.__name__
    axes = axis if isinstance(axis, tuple) else (axis,)
    dims = sorted({array.axis_index(a) for a in axes})

    # numpy.sum(named, keepdims=...) forwards the flag, reduced dimensions are always kept
    kwargs.pop("keepdims", None)
    data = func(array.array, axis=tuple(dims), keepdims=True, **kwargs)

    tables = list(array.tables)
    for d in dims:
        label = f"{name}({array.dimnames[d]})"
        tables[d] = NameTable([label])
        logger.debug("reduced dimension %d to %r", d, label)

    return NamedArray(data, tables, array.dimnames)
