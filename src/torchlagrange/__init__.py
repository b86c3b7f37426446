"""torchlagrange: Lagrange interpolation on [-1, 1] for PyTorch tensors.

Construction
------------
lagrange_interpolant
    Create an interpolant of degree N over a named grid.
LagrangeInterpolant
    Tensorclass holding the degree and the N+1 grid points.

Evaluation
----------
lagrange_interpolant_nodal
    Nodal (generating) polynomial W(x) = prod (x - X[i]).
lagrange_interpolant_cardinal
    i-th Lagrange cardinal polynomial.
lagrange_interpolant_cardinal_matrix
    All cardinal polynomials at once.
lagrange_interpolant_evaluate
    Interpolant of a function f.
lagrange_interpolant_barycentric_weights
    Barycentric weights of the grid.
lagrange_interpolant_barycentric_evaluate
    Interpolant of f in barycentric form.

Diagnostics
-----------
lagrange_interpolant_lebesgue_function
    Sum of absolute cardinal polynomials.
lagrange_interpolant_lebesgue_constant
    Dense-sampling estimate of the Lebesgue constant.
lagrange_interpolant_max_error
    Dense-sampling estimate of the maximum interpolation error.
lagrange_interpolant_sample_points
    Stations used by the diagnostics.

Grids
-----
See :mod:`torchlagrange.grid`.

Exceptions
----------
LagrangeError
    Base exception.
InvalidDegreeError
    Degree is not a non-negative integer.
UnknownGridKindError
    Grid kind is not registered.
IndexOutOfRangeError
    Cardinal polynomial index outside [0, N].
GridError
    Grid generator returned a malformed grid.
LagrangeWarning
    Ill-conditioned interpolation setup.
"""

from . import grid
from ._grid_error import GridError
from ._index_out_of_range_error import IndexOutOfRangeError
from ._invalid_degree_error import InvalidDegreeError
from ._lagrange_error import LagrangeError
from ._lagrange_interpolant import (
    LagrangeInterpolant,
    lagrange_interpolant,
    lagrange_interpolant_barycentric_evaluate,
    lagrange_interpolant_barycentric_weights,
    lagrange_interpolant_cardinal,
    lagrange_interpolant_cardinal_matrix,
    lagrange_interpolant_evaluate,
    lagrange_interpolant_lebesgue_constant,
    lagrange_interpolant_lebesgue_function,
    lagrange_interpolant_max_error,
    lagrange_interpolant_nodal,
    lagrange_interpolant_sample_points,
)
from ._lagrange_warning import LagrangeWarning
from ._unknown_grid_kind_error import UnknownGridKindError

__all__ = [
    "GridError",
    "IndexOutOfRangeError",
    "InvalidDegreeError",
    "LagrangeError",
    "LagrangeInterpolant",
    "LagrangeWarning",
    "UnknownGridKindError",
    "grid",
    "lagrange_interpolant",
    "lagrange_interpolant_barycentric_evaluate",
    "lagrange_interpolant_barycentric_weights",
    "lagrange_interpolant_cardinal",
    "lagrange_interpolant_cardinal_matrix",
    "lagrange_interpolant_evaluate",
    "lagrange_interpolant_lebesgue_constant",
    "lagrange_interpolant_lebesgue_function",
    "lagrange_interpolant_max_error",
    "lagrange_interpolant_nodal",
    "lagrange_interpolant_sample_points",
]

__version__ = "0.1.0"
