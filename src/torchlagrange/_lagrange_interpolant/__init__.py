from ._lagrange_interpolant import (
    LagrangeInterpolant,
    lagrange_interpolant,
)
from ._lagrange_interpolant_barycentric import (
    lagrange_interpolant_barycentric_evaluate,
    lagrange_interpolant_barycentric_weights,
)
from ._lagrange_interpolant_cardinal import (
    lagrange_interpolant_cardinal,
    lagrange_interpolant_cardinal_matrix,
)
from ._lagrange_interpolant_evaluate import lagrange_interpolant_evaluate
from ._lagrange_interpolant_lebesgue_constant import (
    lagrange_interpolant_lebesgue_constant,
    lagrange_interpolant_lebesgue_function,
)
from ._lagrange_interpolant_max_error import lagrange_interpolant_max_error
from ._lagrange_interpolant_nodal import lagrange_interpolant_nodal
from ._lagrange_interpolant_sample_points import (
    lagrange_interpolant_sample_points,
)

__all__ = [
    "LagrangeInterpolant",
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
