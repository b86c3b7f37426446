class LagrangeError(Exception):
    """Base exception for Lagrange interpolation operations."""

    pass
