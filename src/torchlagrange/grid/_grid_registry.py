"""Registry of named grid generators."""

from typing import Iterable, Optional, Protocol

import torch
from torch import Tensor

from .._unknown_grid_kind_error import UnknownGridKindError
from ._chebyshev_gauss_lobatto_points import chebyshev_gauss_lobatto_points
from ._legendre_gauss_lobatto_points import legendre_gauss_lobatto_points
from ._uniform_points import uniform_points


class GridGenerator(Protocol):
    """Callable producing the n+1 points of a grid on [-1, 1].

    Implementations must return a tensor of shape (n+1,) whose entries are
    pairwise distinct. Cardinal polynomials divide by X[i] - X[j], so
    coincident points produce non-finite values.
    """

    def __call__(
        self,
        n: int,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Tensor: ...


# Canonical name -> generator
_GRID_KIND_REGISTRY: dict[str, GridGenerator] = {
    "uniform": uniform_points,
    "chebyshev_gauss_lobatto": chebyshev_gauss_lobatto_points,
    "legendre_gauss_lobatto": legendre_gauss_lobatto_points,
}

# Alias -> canonical name
_GRID_KIND_ALIASES: dict[str, str] = {
    "u": "uniform",
    "chebyshev": "chebyshev_gauss_lobatto",
    "cgl": "chebyshev_gauss_lobatto",
    "lgl": "legendre_gauss_lobatto",
}


def register_grid_kind(
    name: str,
    generator: GridGenerator,
    *,
    aliases: Iterable[str] = (),
    overwrite: bool = False,
) -> None:
    """Register a grid generator under a name.

    Parameters
    ----------
    name : str
        Name of the grid kind. Lookup is case-insensitive.
    generator : GridGenerator
        Callable ``generator(n, *, dtype=None, device=None)`` returning the
        n+1 grid points.
    aliases : iterable of str, optional
        Alternative names resolving to ``name``.
    overwrite : bool, optional
        Replace an existing registration instead of raising.

    Raises
    ------
    ValueError
        If ``name`` or one of ``aliases`` is already taken and
        ``overwrite`` is False, or if ``generator`` is not callable.

    Examples
    --------
    >>> def chebyshev_gauss_points(n, *, dtype=None, device=None):
    ...     k = torch.arange(n + 1, dtype=dtype, device=device)
    ...     return -torch.cos((2 * k + 1) * math.pi / (2 * (n + 1)))
    >>> register_grid_kind("chebyshev_gauss", chebyshev_gauss_points)
    >>> lagrange_interpolant(8, "chebyshev_gauss")
    """
    if not callable(generator):
        raise ValueError(f"Grid generator for '{name}' must be callable")

    name = name.lower()
    aliases = [alias.lower() for alias in aliases]

    if not overwrite:
        for key in [name, *aliases]:
            if key in _GRID_KIND_REGISTRY or key in _GRID_KIND_ALIASES:
                raise ValueError(
                    f"Grid kind '{key}' is already registered. "
                    "Pass overwrite=True to replace it."
                )

    _GRID_KIND_ALIASES.pop(name, None)
    _GRID_KIND_REGISTRY[name] = generator

    for alias in aliases:
        _GRID_KIND_REGISTRY.pop(alias, None)
        _GRID_KIND_ALIASES[alias] = name


def grid_kinds() -> list[str]:
    """Return the canonical names of all registered grid kinds."""
    return sorted(_GRID_KIND_REGISTRY.keys())


def _get_grid_generator(
    kind: str | GridGenerator,
) -> tuple[str, GridGenerator]:
    """Get grid generator and its canonical name from a name or callable.

    Raises
    ------
    UnknownGridKindError
        If ``kind`` is a string that is not a registered name or alias.
    """
    if callable(kind):
        return getattr(kind, "__name__", type(kind).__name__), kind

    key = str(kind).lower()
    key = _GRID_KIND_ALIASES.get(key, key)

    if key not in _GRID_KIND_REGISTRY:
        raise UnknownGridKindError(
            f"Unknown grid kind '{kind}'. "
            f"Available grid kinds: {grid_kinds()}. "
            "You can also pass a custom grid generator."
        )

    return key, _GRID_KIND_REGISTRY[key]
