from ._lagrange_error import LagrangeError


class InvalidDegreeError(LagrangeError):
    """Raised when the interpolation degree is not a non-negative integer."""

    pass
