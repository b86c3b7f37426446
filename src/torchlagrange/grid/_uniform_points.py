from typing import Optional

import torch
from torch import Tensor


def uniform_points(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Compute uniformly spaced points on [-1, 1].

    Parameters
    ----------
    n : int
        Polynomial degree (n+1 points total).
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for the output tensor.

    Returns
    -------
    Tensor
        Points x_j = -1 + 2 * j / n for j = 0, 1, ..., n, in ascending
        order. Shape: (n+1,). For n = 0 the single point is the start of
        the range, -1.

    Notes
    -----
    Uniform points suffer from Runge's phenomenon for polynomial
    interpolation at high degree: the Lebesgue constant grows like
    2^n / (e * n * log(n)). Use Chebyshev or Legendre points for better
    conditioning.
    """
    if dtype is None:
        dtype = torch.float64

    return torch.linspace(-1.0, 1.0, n + 1, dtype=dtype, device=device)
