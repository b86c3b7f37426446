"""Lagrange interpolation on a grid of [-1, 1]."""

import numbers
import warnings
from typing import Callable, Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._invalid_degree_error import InvalidDegreeError
from .._lagrange_warning import LagrangeWarning
from ..grid import GridGenerator, grid_points
from ..grid._grid_registry import _get_grid_generator

# Beyond this degree the Lebesgue constant of the uniform grid exceeds 1e9
_UNIFORM_DEGREE_WARNING_THRESHOLD = 40


@tensorclass
class LagrangeInterpolant:
    r"""Lagrange interpolant of degree N over a grid X of N+1 points.

    The interpolant of a function f is expressed in the Lagrange form

    .. math::

        I_N^X\{f\}(x) = \sum_{i=0}^{N} f(X_i) \ell_i(x),
        \qquad
        \ell_i(x) = \prod_{j \neq i} \frac{x - X_j}{X_i - X_j}.

    Attributes
    ----------
    points : Tensor
        Grid points X, shape (N+1,), pairwise distinct, in [-1, 1].
        Treated as read-only.
    degree : int
        Polynomial degree N.
    kind : str
        Name of the grid kind the points were generated from.

    Examples
    --------
    >>> interp = lagrange_interpolant(2)
    >>> interp.points
    tensor([-1.,  0.,  1.], dtype=torch.float64)
    >>> interp.cardinal(1, 0.0)
    tensor(1., dtype=torch.float64)
    >>> interp(0.5, lambda x: x**2)
    tensor(0.2500, dtype=torch.float64)
    """

    points: Tensor
    degree: int
    kind: str

    def nodal(self, x: Tensor | float) -> Tensor:
        from ._lagrange_interpolant_nodal import lagrange_interpolant_nodal

        return lagrange_interpolant_nodal(self, x)

    def cardinal(self, i: int, x: Tensor | float) -> Tensor:
        from ._lagrange_interpolant_cardinal import (
            lagrange_interpolant_cardinal,
        )

        return lagrange_interpolant_cardinal(self, i, x)

    def cardinal_matrix(self, x: Tensor | float) -> Tensor:
        from ._lagrange_interpolant_cardinal import (
            lagrange_interpolant_cardinal_matrix,
        )

        return lagrange_interpolant_cardinal_matrix(self, x)

    def __call__(
        self,
        x: Tensor | float,
        f: Callable[[Tensor], Tensor],
    ) -> Tensor:
        from ._lagrange_interpolant_evaluate import (
            lagrange_interpolant_evaluate,
        )

        return lagrange_interpolant_evaluate(self, x, f)

    def lebesgue_constant(self, samples: int = 10000) -> Tensor:
        from ._lagrange_interpolant_lebesgue_constant import (
            lagrange_interpolant_lebesgue_constant,
        )

        return lagrange_interpolant_lebesgue_constant(self, samples=samples)

    def max_error(
        self,
        f: Callable[[Tensor], Tensor],
        samples: int = 10000,
    ) -> tuple[Tensor, Tensor]:
        from ._lagrange_interpolant_max_error import (
            lagrange_interpolant_max_error,
        )

        return lagrange_interpolant_max_error(self, f, samples=samples)


def lagrange_interpolant(
    n: int,
    kind: str | GridGenerator = "uniform",
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> LagrangeInterpolant:
    """Create a Lagrange interpolant of degree n.

    Parameters
    ----------
    n : int
        Polynomial degree. Must be at least 0. The grid has n+1 points.
    kind : str or GridGenerator, optional
        Grid kind name or generator, see
        :func:`torchlagrange.grid.grid_points`. Default is ``"uniform"``.
    dtype : torch.dtype, optional
        Data type of the grid. Defaults to float64.
    device : torch.device, optional
        Device of the grid.

    Returns
    -------
    LagrangeInterpolant
        Interpolant holding the degree and the grid points.

    Raises
    ------
    InvalidDegreeError
        If ``n`` is not an integer or is negative. Checked before any grid
        is generated.
    UnknownGridKindError
        If ``kind`` is not a registered grid kind.
    GridError
        If the grid generator returns a malformed grid.

    Warns
    -----
    LagrangeWarning
        If a uniform grid of degree greater than 40 is requested.

    Examples
    --------
    >>> interp = lagrange_interpolant(3)
    >>> interp.points
    tensor([-1.0000, -0.3333,  0.3333,  1.0000], dtype=torch.float64)
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidDegreeError(f"Degree must be an integer, got {n!r}")

    if n < 0:
        raise InvalidDegreeError(
            f"Degree must be at least 0. n={n} is invalid"
        )

    n = int(n)

    name, _ = _get_grid_generator(kind)

    if name == "uniform" and n > _UNIFORM_DEGREE_WARNING_THRESHOLD:
        warnings.warn(
            f"Uniform grid with degree {n} is severely ill-conditioned "
            "(Runge phenomenon). Consider 'chebyshev_gauss_lobatto' points.",
            LagrangeWarning,
            stacklevel=2,
        )

    points = grid_points(n, kind, dtype=dtype, device=device)

    return LagrangeInterpolant(
        points=points,
        degree=n,
        kind=name,
        batch_size=[],
    )
