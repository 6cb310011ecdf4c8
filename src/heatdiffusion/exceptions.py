"""Exceptions raised by the heat diffusion solvers."""


class InvalidParameterError(ValueError):
    """
    Raised when a simulation parameter is outside its valid range.

    The check happens before any quadrature runs, so a caller never receives a
    profile computed from invalid input.
    """
