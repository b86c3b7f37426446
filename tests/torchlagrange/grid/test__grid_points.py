"""Tests for grid generation and the grid kind registry."""

import math

import numpy
import pytest
import torch

from torchlagrange import GridError, UnknownGridKindError
from torchlagrange.grid import (
    chebyshev_gauss_lobatto_points,
    grid_kinds,
    grid_points,
    legendre_gauss_lobatto_points,
    register_grid_kind,
    uniform_points,
)
from torchlagrange.grid import _grid_registry


@pytest.fixture
def restore_registry():
    """Undo registrations made by a test."""
    registry = dict(_grid_registry._GRID_KIND_REGISTRY)
    aliases = dict(_grid_registry._GRID_KIND_ALIASES)

    yield

    _grid_registry._GRID_KIND_REGISTRY.clear()
    _grid_registry._GRID_KIND_REGISTRY.update(registry)
    _grid_registry._GRID_KIND_ALIASES.clear()
    _grid_registry._GRID_KIND_ALIASES.update(aliases)


def chebyshev_gauss_points(n, *, dtype=None, device=None):
    if dtype is None:
        dtype = torch.float64

    k = torch.arange(n + 1, dtype=dtype, device=device)
    return -torch.cos((2 * k + 1) * math.pi / (2 * (n + 1)))


class TestUniformPoints:
    """Tests for uniformly spaced points."""

    def test_n_0(self):
        """n=0 gives the start of the range."""
        x = uniform_points(0)
        torch.testing.assert_close(x, torch.tensor([-1.0], dtype=torch.float64))

    def test_n_2(self):
        """n=2 gives [-1, 0, 1]."""
        x = uniform_points(2)
        expected = torch.tensor([-1.0, 0.0, 1.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected)

    def test_n_3(self):
        """n=3 gives four points spanning exactly [-1, 1]."""
        x = uniform_points(3)
        assert x.shape == (4,)
        assert x[0].item() == -1.0
        assert x[-1].item() == 1.0
        torch.testing.assert_close(
            x[1:] - x[:-1],
            torch.full((3,), 2.0 / 3.0, dtype=torch.float64),
        )

    def test_ascending(self):
        """Points should be strictly increasing."""
        for n in [1, 5, 20]:
            x = uniform_points(n)
            assert torch.all(x[1:] > x[:-1])

    def test_dtype(self):
        """Default dtype is float64; explicit dtype is honored."""
        assert uniform_points(4).dtype == torch.float64
        assert uniform_points(4, dtype=torch.float32).dtype == torch.float32


class TestChebyshevGaussLobattoPoints:
    """Tests for Chebyshev-Gauss-Lobatto points."""

    def test_n_0(self):
        """n=0 gives single point at 0."""
        x = chebyshev_gauss_lobatto_points(0)
        torch.testing.assert_close(x, torch.tensor([0.0], dtype=torch.float64))

    def test_n_1(self):
        """n=1 gives endpoints."""
        x = chebyshev_gauss_lobatto_points(1)
        expected = torch.tensor([-1.0, 1.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected)

    def test_n_4(self):
        """n=4 gives -1, -sqrt(2)/2, 0, sqrt(2)/2, 1."""
        x = chebyshev_gauss_lobatto_points(4)
        s = math.sqrt(2.0) / 2.0
        expected = torch.tensor([-1.0, -s, 0.0, s, 1.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected)

    def test_symmetry(self):
        """Points should be symmetric about 0."""
        x = chebyshev_gauss_lobatto_points(8)
        torch.testing.assert_close(x, -x.flip(0), atol=1e-14, rtol=1e-14)

    def test_ascending(self):
        """Points should be strictly increasing."""
        for n in [1, 5, 20]:
            x = chebyshev_gauss_lobatto_points(n)
            assert torch.all(x[1:] > x[:-1])


class TestLegendreGaussLobattoPoints:
    """Tests for Legendre-Gauss-Lobatto points."""

    def test_n_0(self):
        """n=0 gives single point at 0."""
        x = legendre_gauss_lobatto_points(0)
        torch.testing.assert_close(x, torch.tensor([0.0], dtype=torch.float64))

    def test_n_1(self):
        """n=1 gives endpoints."""
        x = legendre_gauss_lobatto_points(1)
        expected = torch.tensor([-1.0, 1.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected)

    def test_n_4(self):
        """n=4 gives -1, -sqrt(3/7), 0, sqrt(3/7), 1."""
        x = legendre_gauss_lobatto_points(4)
        s = math.sqrt(3.0 / 7.0)
        expected = torch.tensor([-1.0, -s, 0.0, s, 1.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected, atol=1e-14, rtol=1e-14)

    @pytest.mark.parametrize("n", [2, 3, 5, 8, 12])
    def test_matches_numpy(self, n):
        """Interior points are the roots of P'_n."""
        legendre = numpy.polynomial.legendre.Legendre.basis(n)
        roots = numpy.sort(legendre.deriv().roots())

        x = legendre_gauss_lobatto_points(n)

        torch.testing.assert_close(
            x[1:-1],
            torch.from_numpy(roots),
            atol=1e-12,
            rtol=1e-12,
        )
        assert x[0].item() == -1.0
        assert x[-1].item() == 1.0


class TestGridPoints:
    """Tests for grid generation by kind."""

    def test_default_is_uniform(self):
        """The default kind is uniform."""
        torch.testing.assert_close(grid_points(5), uniform_points(5))

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("uniform", uniform_points),
            ("U", uniform_points),
            ("Uniform", uniform_points),
            ("chebyshev_gauss_lobatto", chebyshev_gauss_lobatto_points),
            ("chebyshev", chebyshev_gauss_lobatto_points),
            ("cgl", chebyshev_gauss_lobatto_points),
            ("legendre_gauss_lobatto", legendre_gauss_lobatto_points),
            ("LGL", legendre_gauss_lobatto_points),
        ],
    )
    def test_names_and_aliases(self, kind, expected):
        """Names and aliases resolve case-insensitively."""
        torch.testing.assert_close(grid_points(6, kind), expected(6))

    def test_callable_kind(self):
        """A generator callable can be passed directly."""
        x = grid_points(4, chebyshev_gauss_points)
        torch.testing.assert_close(x, chebyshev_gauss_points(4))

    def test_unknown_kind(self):
        """Unknown names raise UnknownGridKindError listing available kinds."""
        with pytest.raises(UnknownGridKindError, match="uniform"):
            grid_points(3, "nonexistent")

    def test_wrong_length(self):
        """Generators returning the wrong number of points are rejected."""

        def short(n, *, dtype=None, device=None):
            return torch.linspace(-1.0, 1.0, n, dtype=dtype, device=device)

        with pytest.raises(GridError, match="expected"):
            grid_points(3, short)

    def test_outside_interval(self):
        """Generators returning points outside [-1, 1] are rejected."""

        def wide(n, *, dtype=None, device=None):
            return torch.linspace(-2.0, 2.0, n + 1, dtype=dtype, device=device)

        with pytest.raises(GridError, match=r"\[-1, 1\]"):
            grid_points(3, wide)


class TestRegisterGridKind:
    """Tests for the grid kind registry."""

    def test_builtin_kinds(self):
        """Built-in kinds are registered under their canonical names."""
        assert grid_kinds() == [
            "chebyshev_gauss_lobatto",
            "legendre_gauss_lobatto",
            "uniform",
        ]

    def test_register(self, restore_registry):
        """Registered kinds are usable by name and alias."""
        register_grid_kind(
            "chebyshev_gauss",
            chebyshev_gauss_points,
            aliases=["CG"],
        )

        assert "chebyshev_gauss" in grid_kinds()
        torch.testing.assert_close(
            grid_points(5, "chebyshev_gauss"),
            chebyshev_gauss_points(5),
        )
        torch.testing.assert_close(
            grid_points(5, "cg"),
            chebyshev_gauss_points(5),
        )

    def test_register_duplicate(self, restore_registry):
        """Registering an existing name requires overwrite=True."""
        with pytest.raises(ValueError, match="already registered"):
            register_grid_kind("uniform", chebyshev_gauss_points)

        with pytest.raises(ValueError, match="already registered"):
            register_grid_kind(
                "chebyshev_gauss",
                chebyshev_gauss_points,
                aliases=["u"],
            )

    def test_register_overwrite(self, restore_registry):
        """overwrite=True replaces an existing kind."""
        register_grid_kind("uniform", chebyshev_gauss_points, overwrite=True)

        torch.testing.assert_close(
            grid_points(3, "uniform"),
            chebyshev_gauss_points(3),
        )

    def test_register_not_callable(self, restore_registry):
        """Generators must be callable."""
        with pytest.raises(ValueError, match="callable"):
            register_grid_kind("broken", 42)

    def test_registry_restored(self):
        """Registrations from other tests do not leak."""
        with pytest.raises(UnknownGridKindError):
            grid_points(3, "chebyshev_gauss")
