from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import torch
from torch import Tensor

from ._lagrange_interpolant_evaluate import (
    _sample,
    lagrange_interpolant_evaluate,
)
from ._lagrange_interpolant_sample_points import (
    lagrange_interpolant_sample_points,
)

if TYPE_CHECKING:
    from ._lagrange_interpolant import LagrangeInterpolant


def lagrange_interpolant_max_error(
    interp: LagrangeInterpolant,
    f: Callable[[Tensor], Tensor],
    *,
    samples: int = 10000,
) -> tuple[Tensor, Tensor]:
    """Estimate the maximum interpolation error against f.

    Compares f with its interpolant at ``samples`` equally spaced stations
    along [-1, 1], endpoints included.

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    f : Callable[[Tensor], Tensor]
        Reference function, acting elementwise. Evaluated at the stations
        and at the grid points.
    samples : int, optional
        Number of stations. Default is 10000.

    Returns
    -------
    max_error : Tensor
        Largest absolute difference |f(x) - I{f}(x)| over the stations.
    x_location : Tensor
        First station where ``max_error`` occurs; -1 when every difference
        is zero.

    Raises
    ------
    Exception
        Whatever ``f`` raises is propagated immediately; a failing
        reference function invalidates the whole estimate.

    Notes
    -----
    NaN differences never replace the running maximum.

    Examples
    --------
    >>> interp = lagrange_interpolant(8, "chebyshev_gauss_lobatto")
    >>> max_error, x_location = lagrange_interpolant_max_error(
    ...     interp, torch.exp
    ... )
    """
    points = interp.points

    x = lagrange_interpolant_sample_points(
        samples,
        dtype=points.dtype,
        device=points.device,
    )

    exact = _sample(f, x)

    approximation = lagrange_interpolant_evaluate(interp, x, f)

    error = torch.abs(exact - approximation)
    error = torch.where(torch.isnan(error), torch.zeros_like(error), error)

    index = torch.argmax(error)

    return error[index], x[index]
