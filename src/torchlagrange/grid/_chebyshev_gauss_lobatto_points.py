import math
from typing import Optional

import torch
from torch import Tensor


def chebyshev_gauss_lobatto_points(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Compute Chebyshev-Gauss-Lobatto points.

    Returns n+1 points which are the extrema of T_n(x), including the
    endpoints -1 and 1.

    Parameters
    ----------
    n : int
        Polynomial degree.
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for the output tensor.

    Returns
    -------
    Tensor
        Points x_j = -cos(pi * j / n) for j = 0, 1, ..., n.
        Shape: (n+1,). Points are in ascending order from -1 to 1.

    Notes
    -----
    The Lebesgue constant of these points grows only logarithmically,
    (2 / pi) * log(n) + O(1), which makes them a safe default for high
    degree interpolation.
    """
    if dtype is None:
        dtype = torch.float64

    if n == 0:
        return torch.zeros(1, dtype=dtype, device=device)

    j = torch.arange(n + 1, dtype=dtype, device=device)
    x = -torch.cos(math.pi * j / n)

    # cos(pi / 2) is not exactly zero in floating point
    if n % 2 == 0:
        x[n // 2] = 0.0

    return x
