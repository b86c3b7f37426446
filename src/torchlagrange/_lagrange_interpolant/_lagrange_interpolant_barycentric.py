"""Barycentric form of Lagrange interpolation.

The barycentric weights depend only on the grid, so the O(N^2) work of
the product form is paid once and each evaluation costs O(N).

References
----------
.. [1] Berrut, J.-P., & Trefethen, L. N. (2004). Barycentric Lagrange
       interpolation. SIAM Review, 46(3), 501-517.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import torch
from torch import Tensor

from ._lagrange_interpolant_evaluate import _sample

if TYPE_CHECKING:
    from ._lagrange_interpolant import LagrangeInterpolant


def lagrange_interpolant_barycentric_weights(
    interp: LagrangeInterpolant,
) -> Tensor:
    r"""Compute the barycentric weights of the grid.

    .. math::

        w_i = \frac{1}{\prod_{j \neq i} (X_i - X_j)}

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.

    Returns
    -------
    Tensor
        Weights, shape (N+1,).

    Notes
    -----
    The products are accumulated as sums of logarithms so that high degree
    grids do not underflow.
    """
    points = interp.points

    X = points.unsqueeze(1) - points.unsqueeze(0)  # X_i - X_j

    # Set diagonal to 1 to avoid log(0)
    X.fill_diagonal_(1.0)

    log_sum = torch.log(torch.abs(X)).sum(dim=1)
    sign_prod = torch.sign(X).prod(dim=1)

    return sign_prod * torch.exp(-log_sum)


def lagrange_interpolant_barycentric_evaluate(
    interp: LagrangeInterpolant,
    x: Tensor | float,
    f: Callable[[Tensor], Tensor],
) -> Tensor:
    r"""Evaluate the Lagrange interpolant of f in barycentric form.

    .. math::

        I_N^X\{f\}(x) =
        \frac{\sum_i \frac{w_i}{x - X_i} f(X_i)}
             {\sum_i \frac{w_i}{x - X_i}}

    Produces the same values as
    :func:`lagrange_interpolant_evaluate` up to rounding. At a grid point
    X[k] the result is exactly f(X[k]).

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    x : Tensor or float
        Evaluation points, any shape.
    f : Callable[[Tensor], Tensor]
        Function sampled at the grid points, called once per call.

    Returns
    -------
    Tensor
        Interpolated values, same shape as ``x``.

    Raises
    ------
    Exception
        Whatever ``f`` raises is propagated unchanged.
    """
    points = interp.points
    x = torch.as_tensor(x, dtype=points.dtype, device=points.device)

    values = _sample(f, points)

    weights = lagrange_interpolant_barycentric_weights(interp)

    difference = x.unsqueeze(-1) - points  # (*x.shape, N+1)

    exact = difference == 0

    terms = weights / torch.where(
        exact, torch.ones_like(difference), difference
    )

    result = torch.sum(terms * values, dim=-1) / torch.sum(terms, dim=-1)

    # Grid points are distinct, so at most one entry of each row is exact
    at_node = torch.sum(torch.where(exact, values, 0.0), dim=-1)

    return torch.where(torch.any(exact, dim=-1), at_node, result)
