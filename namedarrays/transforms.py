"""
Structural transforms and how they carry name tables along.
"""
import logging

import numpy as np

from .name_table import NameTable, default_dimnames
from .named_array import NamedArray

logger = logging.getLogger(__name__)


def _as_named(array) -> NamedArray:
    return array if isinstance(array, NamedArray) else NamedArray(array)


def concatenate(arrays, axis=0) -> NamedArray:
    """
    Join arrays along an existing dimension.

    A dimension other than ``axis`` keeps its names when every operand has
    the same table for it, and gets default names otherwise. The ``axis``
    dimension always gets default names.
    """
    arrays = [_as_named(a) for a in arrays]
    if not arrays:
        raise ValueError("need at least one array to concatenate")

    dim = arrays[0].axis_index(axis)
    data = np.concatenate([a.array for a in arrays], axis=dim)
    defaults = default_dimnames(data.ndim)

    tables, dimnames = [], []
    for d in range(data.ndim):
        operand_tables = [a.tables[d] for a in arrays]
        if d != dim and all(t == operand_tables[0] for t in operand_tables[1:]):
            tables.append(operand_tables[0])
        else:
            if d != dim:
                logger.debug("names of dimension %d differ between operands, using defaults", d)
            tables.append(NameTable.default(data.shape[d]))

        labels = [a.dimnames[d] for a in arrays]
        if all(label == labels[0] for label in labels[1:]):
            dimnames.append(labels[0])
        else:
            dimnames.append(defaults[d])

    return NamedArray(data, tables, dimnames)


def vstack(arrays) -> NamedArray:
    return concatenate(arrays, axis=0)


def hstack(arrays) -> NamedArray:
    arrays = [_as_named(a) for a in arrays]
    axis = 1 if arrays and arrays[0].ndim > 1 else 0
    return concatenate(arrays, axis=axis)


def transpose(array: NamedArray, axes=None) -> NamedArray:
    """Permute dimensions; tables and labels move with their dimensions."""
    if axes is None:
        order = list(reversed(range(array.ndim)))
    else:
        order = [array.axis_index(a) for a in axes]
    if sorted(order) != list(range(array.ndim)):
        raise ValueError(f"axes {axes!r} don't match array of dimension {array.ndim}")

    data = np.transpose(array.array, order)
    return NamedArray(
        data,
        [array.tables[d] for d in order],
        [array.dimnames[d] for d in order],
    )


def roll(array: NamedArray, shift, axis) -> NamedArray:
    """
    Circularly shift entries along ``axis`` as ``numpy.roll`` does. Names
    follow their entries to the new positions.
    """
    shifts = tuple(shift) if isinstance(shift, (list, tuple)) else (shift,)
    axes = tuple(axis) if isinstance(axis, (list, tuple)) else (axis,)
    if len(shifts) == 1 and len(axes) > 1:
        shifts = shifts * len(axes)
    if len(shifts) != len(axes):
        raise ValueError("'shift' and 'axis' should be scalars or 1D sequences of the same length")

    dims = [array.axis_index(a) for a in axes]
    data = np.roll(array.array, shifts, dims)

    # Repeated axes accumulate, as in numpy
    totals = {}
    for d, s in zip(dims, shifts):
        totals[d] = totals.get(d, 0) + int(s)

    tables = list(array.tables)
    for d, s in totals.items():
        table = tables[d]
        keys = table.keys()
        s = s % len(keys) if keys else 0
        if s:
            keys = keys[-s:] + keys[:-s]
        rolled = NameTable(keys, key_type=table.key_type, unique=False)
        rolled.unique = table.unique
        tables[d] = rolled

    return NamedArray(data, tables, array.dimnames)
