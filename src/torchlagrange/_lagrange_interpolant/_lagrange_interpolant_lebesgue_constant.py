from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from ._lagrange_interpolant_cardinal import (
    lagrange_interpolant_cardinal_matrix,
)
from ._lagrange_interpolant_sample_points import (
    lagrange_interpolant_sample_points,
)

if TYPE_CHECKING:
    from ._lagrange_interpolant import LagrangeInterpolant


def lagrange_interpolant_lebesgue_function(
    interp: LagrangeInterpolant,
    x: Tensor | float,
) -> Tensor:
    r"""Evaluate the Lebesgue function of the grid.

    .. math::

        \lambda_N^X(x) = \sum_{i=0}^{N} |\ell_i^X(x)|

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    x : Tensor or float
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        Lebesgue function values, same shape as ``x``. Equal to 1 at the
        grid points.
    """
    cardinals = lagrange_interpolant_cardinal_matrix(interp, x)

    return torch.sum(torch.abs(cardinals), dim=0)


def lagrange_interpolant_lebesgue_constant(
    interp: LagrangeInterpolant,
    *,
    samples: int = 10000,
) -> Tensor:
    r"""Estimate the Lebesgue constant of the grid.

    .. math::

        \Lambda_N^X = \max_{x \in [-1, 1]} \sum_{i=0}^{N} |\ell_i^X(x)|

    The maximum is taken over ``samples`` equally spaced stations along
    [-1, 1], endpoints included, so the estimate is a lower bound of the
    true constant whose accuracy depends on the station density.

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    samples : int, optional
        Number of stations. Default is 10000.

    Returns
    -------
    Tensor
        Estimated Lebesgue constant, a 0-d tensor, at least 1.

    Notes
    -----
    The Lebesgue constant bounds the amplification of errors in the
    sampled function values by the interpolation operator:
    ||I f - f|| <= (1 + Lambda) * ||f - p*|| where p* is the best
    polynomial approximation of degree N.

    Examples
    --------
    >>> lagrange_interpolant_lebesgue_constant(lagrange_interpolant(2))
    tensor(1.2500, dtype=torch.float64)
    """
    points = interp.points

    x = lagrange_interpolant_sample_points(
        samples,
        dtype=points.dtype,
        device=points.device,
    )

    return torch.max(lagrange_interpolant_lebesgue_function(interp, x))
