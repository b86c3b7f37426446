from typing import Optional

import torch
from torch import Tensor

from .._grid_error import GridError
from ._grid_registry import GridGenerator, _get_grid_generator


def grid_points(
    n: int,
    kind: str | GridGenerator = "uniform",
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Generate the n+1 points of a named grid on [-1, 1].

    Parameters
    ----------
    n : int
        Polynomial degree. The grid has n+1 points.
    kind : str or GridGenerator, optional
        Registered grid kind name (case-insensitive), an alias, or a
        generator callable. Built-in kinds are ``"uniform"``,
        ``"chebyshev_gauss_lobatto"`` and ``"legendre_gauss_lobatto"``.
        Default is ``"uniform"``.
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for the output tensor.

    Returns
    -------
    Tensor
        Grid points, shape (n+1,).

    Raises
    ------
    UnknownGridKindError
        If ``kind`` is not a registered grid kind.
    GridError
        If the generator returns a tensor that does not have shape (n+1,)
        or has points outside [-1, 1].

    Examples
    --------
    >>> grid_points(2)
    tensor([-1.,  0.,  1.], dtype=torch.float64)
    """
    if dtype is None:
        dtype = torch.float64

    name, generator = _get_grid_generator(kind)

    points = torch.as_tensor(
        generator(n, dtype=dtype, device=device),
        dtype=dtype,
        device=device,
    )

    if points.shape != (n + 1,):
        raise GridError(
            f"Grid kind '{name}' returned shape {tuple(points.shape)} "
            f"for degree {n}, expected ({n + 1},)"
        )

    if torch.any(points < -1.0) or torch.any(points > 1.0):
        raise GridError(f"Grid kind '{name}' returned points outside [-1, 1]")

    return points
