from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import torch
from torch import Tensor

from ._lagrange_interpolant_cardinal import (
    lagrange_interpolant_cardinal_matrix,
)

if TYPE_CHECKING:
    from ._lagrange_interpolant import LagrangeInterpolant


def _sample(f: Callable[[Tensor], Tensor], x: Tensor) -> Tensor:
    """Evaluate f at x, broadcasting scalar results to the shape of x."""
    return torch.broadcast_to(
        torch.as_tensor(f(x), dtype=x.dtype, device=x.device),
        x.shape,
    )


def lagrange_interpolant_evaluate(
    interp: LagrangeInterpolant,
    x: Tensor | float,
    f: Callable[[Tensor], Tensor],
) -> Tensor:
    r"""Evaluate the Lagrange interpolant of f.

    .. math::

        I_N^X\{f\}(x) = \sum_{i=0}^{N} f(X_i) \ell_i^X(x)

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    x : Tensor or float
        Evaluation points, any shape.
    f : Callable[[Tensor], Tensor]
        Function sampled at the grid points. Called once per call with the
        tensor of grid points and must act elementwise. Values are not
        cached between calls.

    Returns
    -------
    Tensor
        Interpolated values, same shape as ``x``.

    Raises
    ------
    Exception
        Whatever ``f`` raises is propagated unchanged; no partial sum is
        computed.

    Examples
    --------
    >>> interp = lagrange_interpolant(4)
    >>> lagrange_interpolant_evaluate(interp, 0.3, lambda x: x**3 - x)
    tensor(-0.2730, dtype=torch.float64)
    """
    points = interp.points
    x = torch.as_tensor(x, dtype=points.dtype, device=points.device)

    values = _sample(f, points)

    cardinals = lagrange_interpolant_cardinal_matrix(interp, x)

    values = values.view(-1, *([1] * x.dim()))

    return torch.sum(values * cardinals, dim=0)
