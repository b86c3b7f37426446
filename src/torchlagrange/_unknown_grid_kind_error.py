from ._lagrange_error import LagrangeError


class UnknownGridKindError(LagrangeError):
    """Raised when a grid kind name is not registered."""

    pass
