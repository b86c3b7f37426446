from __future__ import annotations

import numbers
from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._index_out_of_range_error import IndexOutOfRangeError

if TYPE_CHECKING:
    from ._lagrange_interpolant import LagrangeInterpolant


def lagrange_interpolant_cardinal(
    interp: LagrangeInterpolant,
    i: int,
    x: Tensor | float,
) -> Tensor:
    r"""Evaluate the i-th Lagrange cardinal polynomial of the grid.

    .. math::

        \ell_i^X(x) = \prod_{j=0, j \neq i}^{N} \frac{x - X_j}{X_i - X_j},
        \qquad 0 \le i \le N

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    i : int
        Index of the grid point X[i]. Must lie in [0, N]; negative indices
        are not wrapped.
    x : Tensor or float
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        l_i(x), same shape as ``x``.

    Raises
    ------
    IndexOutOfRangeError
        If ``i`` is outside [0, N].

    Notes
    -----
    The grid points must be pairwise distinct. This is not checked here:
    coincident points give a zero denominator and non-finite values.
    """
    points = interp.points
    n = points.shape[0] - 1

    if (
        isinstance(i, bool)
        or not isinstance(i, numbers.Integral)
        or not 0 <= i <= n
    ):
        raise IndexOutOfRangeError(
            f"Cardinal polynomial index must be in [0, {n}], got {i!r}"
        )

    x = torch.as_tensor(x, dtype=points.dtype, device=points.device)

    others = torch.cat([points[:i], points[i + 1 :]])

    return torch.prod(
        (x.unsqueeze(-1) - others) / (points[i] - others),
        dim=-1,
    )


def lagrange_interpolant_cardinal_matrix(
    interp: LagrangeInterpolant,
    x: Tensor | float,
) -> Tensor:
    """Evaluate all Lagrange cardinal polynomials of the grid.

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    x : Tensor or float
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        Shape (N+1, *x.shape). Row i equals
        ``lagrange_interpolant_cardinal(interp, i, x)``.
    """
    points = interp.points
    x = torch.as_tensor(x, dtype=points.dtype, device=points.device)

    return torch.stack(
        [
            lagrange_interpolant_cardinal(interp, i, x)
            for i in range(points.shape[0])
        ]
    )
