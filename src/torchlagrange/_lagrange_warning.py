"""Warnings for Lagrange interpolation."""


class LagrangeWarning(UserWarning):
    """Warning for numerically ill-conditioned interpolation setups."""

    pass
