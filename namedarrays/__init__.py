from .errors import (
    AmbiguousAxis,
    DuplicateKey,
    NamedArrayError,
    ShapeMismatch,
    TypeMismatch,
    UnknownAxis,
    UnknownName,
)
from .name_table import NameTable, default_dimnames
from .named_array import NamedArray
from .reductions import reduce
from .terms import Axis, Name, Not, Pos
from .transforms import concatenate, hstack, roll, transpose, vstack

__all__ = [
    "AmbiguousAxis",
    "Axis",
    "DuplicateKey",
    "Name",
    "NameTable",
    "NamedArray",
    "NamedArrayError",
    "Not",
    "Pos",
    "ShapeMismatch",
    "TypeMismatch",
    "UnknownAxis",
    "UnknownName",
    "concatenate",
    "default_dimnames",
    "hstack",
    "reduce",
    "roll",
    "transpose",
    "vstack",
]
