from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._lagrange_interpolant import LagrangeInterpolant


def lagrange_interpolant_nodal(
    interp: LagrangeInterpolant,
    x: Tensor | float,
) -> Tensor:
    r"""Evaluate the nodal (generating) polynomial of the grid.

    .. math::

        W_{N+1}^X(x) = \prod_{i=0}^{N} (x - X_i)

    W is the unique monic polynomial of degree N+1 whose zeros are the
    N+1 grid points.

    Parameters
    ----------
    interp : LagrangeInterpolant
        Interpolant providing the grid X.
    x : Tensor or float
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        W(x), same shape as ``x``.

    Examples
    --------
    >>> interp = lagrange_interpolant(2)
    >>> lagrange_interpolant_nodal(interp, 0.5)
    tensor(-0.3750, dtype=torch.float64)
    """
    points = interp.points
    x = torch.as_tensor(x, dtype=points.dtype, device=points.device)

    return torch.prod(x.unsqueeze(-1) - points, dim=-1)
