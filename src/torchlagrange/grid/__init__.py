"""Grids of interpolation nodes on [-1, 1].

Grid Generation
---------------
grid_points
    Generate the points of a grid kind by name or generator.
uniform_points
    Equally spaced points, endpoints included.
chebyshev_gauss_lobatto_points
    Extrema of T_n, endpoints included.
legendre_gauss_lobatto_points
    Roots of (1 - x^2) P'_n, endpoints included.

Registry
--------
register_grid_kind
    Register a new grid generator under a name.
grid_kinds
    Names of all registered grid kinds.
GridGenerator
    Protocol implemented by grid generators.
"""

from ._chebyshev_gauss_lobatto_points import chebyshev_gauss_lobatto_points
from ._grid_points import grid_points
from ._grid_registry import GridGenerator, grid_kinds, register_grid_kind
from ._legendre_gauss_lobatto_points import legendre_gauss_lobatto_points
from ._uniform_points import uniform_points

__all__ = [
    "GridGenerator",
    "chebyshev_gauss_lobatto_points",
    "grid_kinds",
    "grid_points",
    "legendre_gauss_lobatto_points",
    "register_grid_kind",
    "uniform_points",
]
