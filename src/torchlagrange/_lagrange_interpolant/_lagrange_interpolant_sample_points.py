from typing import Optional

import torch
from torch import Tensor


def lagrange_interpolant_sample_points(
    samples: int = 10000,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Dense, equally spaced stations on [-1, 1] used by the diagnostics.

    Parameters
    ----------
    samples : int, optional
        Number of stations. Must be at least 2. Default is 10000.
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for the output tensor.

    Returns
    -------
    Tensor
        Stations x_j = -1 + 2 * j / (samples - 1), j = 0, ..., samples - 1.

    Raises
    ------
    ValueError
        If ``samples`` < 2.
    """
    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")

    if dtype is None:
        dtype = torch.float64

    j = torch.arange(samples, dtype=dtype, device=device)

    return -1.0 + 2.0 * j / (samples - 1)
