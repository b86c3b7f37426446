from ._lagrange_error import LagrangeError


class GridError(LagrangeError):
    """Raised when a grid generator returns a malformed grid.

    A grid of degree n must have shape (n + 1,) and lie in [-1, 1].
    Distinctness of the points is not checked.
    """

    pass
