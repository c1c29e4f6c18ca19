"""
Named dimensions for CVXPY expressions.

Reads resolve exactly as on NamedArray; the result is another
NamedExpression, or the bare CVXPY expression when every dimension
collapses. CVXPY expressions are immutable, so there is no write path.

A NamedExpression is itself a ``cvx.Expression`` whose only argument is the
wrapped expression, so it can be used in arithmetic, atoms, constraints and
objectives. Canonicalization replaces it with that argument.
"""
import cvxpy as cvx
import numpy as np
from cvxpy.lin_ops import lin_utils as lu
from cvxpy.reductions.dcp2cone.canonicalizers import CANON_METHODS

from .indexing import NamedMixin
from .named_array import NamedArray


class NamedExpression(cvx.Expression, NamedMixin):
    """
    Wraps a CVXPY expression (Variable, Parameter or any atom) together with
    name tables for its dimensions, delegating the Expression contract to it.
    """

    def __init__(self, expr, names=None, dimnames=None):
        self._expr = cvx.Expression.cast_to_const(expr)
        self._init_names(names, dimnames)

        super().__init__()
        self.args = [self._expr]
        self.id = lu.get_id()

    def __getattr__(self, attr):
        # Only called if 'attr' is NOT found on self; forward to the expression.
        # Private names stay local so cvxpy's per-object caches are not shared.
        if attr.startswith("_"):
            raise AttributeError(attr)
        return getattr(self._expr, attr)

    @property
    def expr(self):
        return self._expr

    @property
    def _raw(self):
        return self._expr

    def get_data(self):
        return [self._tables, self._dimnames]

    # --- Delegation ---
    def name(self): return self._expr.name()
    def is_convex(self): return self._expr.is_convex()
    def is_concave(self): return self._expr.is_concave()
    def is_linearizable_convex(self): return self._expr.is_linearizable_convex()
    def is_linearizable_concave(self): return self._expr.is_linearizable_concave()
    def is_log_log_convex(self): return self._expr.is_log_log_convex()
    def is_log_log_concave(self): return self._expr.is_log_log_concave()
    def is_nonneg(self): return self._expr.is_nonneg()
    def is_nonpos(self): return self._expr.is_nonpos()
    def is_complex(self): return self._expr.is_complex()
    def is_symmetric(self): return self._expr.is_symmetric()
    def is_quadratic(self): return self._expr.is_quadratic()
    def has_quadratic_term(self): return self._expr.has_quadratic_term()
    def is_pwl(self): return self._expr.is_pwl()
    def is_dpp(self, context="dcp"): return self._expr.is_dpp(context)
    def get_bounds(self): return self._expr.get_bounds()

    @property
    def domain(self): return self._expr.domain
    @property
    def grad(self): return self._expr.grad
    @property
    def shape(self) -> tuple: return self._expr.shape
    @property
    def is_imag(self): return self._expr.is_imag

    # --- Values ---

    def _value_impl(self):
        # Parent atoms evaluate through this, they expect the plain value
        return self._expr._value_impl()

    @property
    def value(self):
        """Current value as a NamedArray, or None before a solve."""
        value = self._expr.value
        if value is None or self.ndim == 0:
            return value
        return NamedArray(np.asarray(value), self._tables, self._dimnames)

    @value.setter
    def value(self, val):
        if isinstance(val, NamedArray):
            val = val.array
        self._expr.value = val

    # --- Named slicing ---

    def __getitem__(self, key):
        return self._read(key)

    def _take(self, data, index, axis):
        return data[(slice(None),) * axis + (list(index),)]

    def _wrap(self, data, tables, dimnames):
        return NamedExpression(data, tables, dimnames)

    def __repr__(self):
        return (
            f"NamedExpression({self._expr!r}, names={self.names!r}, "
            f"dimnames={self._dimnames!r})"
        )


# When solving, a NamedExpression is replaced by its child.
def named_canon(expr, args, **kwargs):
    return args[0], []


CANON_METHODS[NamedExpression] = named_canon


def named_variable(shape, names=None, dimnames=None, **kwargs) -> NamedExpression:
    """A ``cvx.Variable`` with named dimensions; kwargs go to the Variable."""
    return NamedExpression(cvx.Variable(shape, **kwargs), names, dimnames)


def named_parameter(shape, names=None, dimnames=None, **kwargs) -> NamedExpression:
    """A ``cvx.Parameter`` with named dimensions; kwargs go to the Parameter."""
    return NamedExpression(cvx.Parameter(shape, **kwargs), names, dimnames)
