from ._lagrange_error import LagrangeError


class IndexOutOfRangeError(LagrangeError):
    """Raised when a cardinal polynomial index lies outside [0, degree]."""

    pass
