import math
from typing import Optional

import torch
from torch import Tensor


def legendre_gauss_lobatto_points(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Compute Legendre-Gauss-Lobatto points.

    Returns n+1 points which include the endpoints -1 and 1, with the
    interior points being roots of P'_n(x).

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
        Legendre-Gauss-Lobatto points in ascending order from -1 to 1.
        Shape: (n+1,).

    Notes
    -----
    The points are the roots of (1 - x^2) * P'_n(x), where P_n is the
    Legendre polynomial. Interior points are found with Newton's method on
    P'_n, seeded with Chebyshev-Gauss-Lobatto points.
    """
    if dtype is None:
        dtype = torch.float64

    if n == 0:
        return torch.zeros(1, dtype=dtype, device=device)

    if n == 1:
        return torch.tensor([-1.0, 1.0], dtype=dtype, device=device)

    j = torch.arange(1, n, dtype=dtype, device=device)
    x = -torch.cos(math.pi * j / n)

    maximum_iterations = 100
    tolerance = 1e-15

    for _ in range(maximum_iterations):
        # P_n and P_{n-1} by the three-term recurrence
        p_previous = torch.ones_like(x)
        p_current = x.clone()

        for k in range(2, n + 1):
            p_next = ((2 * k - 1) * x * p_current - (k - 1) * p_previous) / k
            p_previous = p_current
            p_current = p_next

        # (1 - x^2) P''_n - 2x P'_n + n(n+1) P_n = 0
        dp = n * (x * p_current - p_previous) / (x**2 - 1)
        ddp = (2 * x * dp - n * (n + 1) * p_current) / (1 - x**2)

        delta = dp / ddp
        x = x - delta

        if torch.max(torch.abs(delta)) < tolerance:
            break

    endpoint = torch.ones(1, dtype=dtype, device=device)

    return torch.cat([-endpoint, x, endpoint])
