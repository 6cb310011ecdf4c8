"""
Configuration & Solver Constants
================================
This module serves as the central registry for the numerical constants of the
solvers and the defaults of a new simulation.

Why is this file needed?
------------------------
1. Reproducibility: The quadrature resolutions and the number of Fourier modes
   are part of the accuracy contract of the solvers. Keeping them in one place
   prevents magic numbers scattered throughout the code.
2. Overrides: `SolverSettings` bundles the counts so a caller can trade
   accuracy for speed without touching the solvers.

Exports:
    CONVOLUTION_POINTS (int): Riemann subintervals of the infinite-bar convolution.
    COEFFICIENT_POINTS (int): Riemann subintervals of each Fourier coefficient integral.
    FOURIER_MODES (int): Number of eigenmodes in the finite-bar expansion.
    SolverSettings: Immutable bundle of the counts above.
"""
from __future__ import annotations

from dataclasses import dataclass

from heatdiffusion.exceptions import InvalidParameterError

# Quadrature and truncation
CONVOLUTION_POINTS: int = 200
COEFFICIENT_POINTS: int = 100
FOURIER_MODES: int = 50

# Convolution window of the infinite bar, as multiples of the bar length.
# The window reaches further right than left.
CONVOLUTION_WINDOW: tuple[float, float] = (-0.5, 1.5)

# Sampling and simulation defaults
DEFAULT_NUM_POINTS: int = 500
DEFAULT_ALPHA: float = 0.1
DEFAULT_LENGTH: float = 10.0


@dataclass(frozen=True)
class SolverSettings:
    """
    Resolution of the numerical solvers.

    The defaults reproduce the reference behaviour exactly.
    """
    convolution_points: int = CONVOLUTION_POINTS
    coefficient_points: int = COEFFICIENT_POINTS
    fourier_modes: int = FOURIER_MODES

    def __post_init__(self) -> None:
        for name in ("convolution_points", "coefficient_points", "fourier_modes"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise InvalidParameterError(
                    f"Unsupported {name}: {value!r}. '{name}' must be a positive integer."
                )


DEFAULT_SETTINGS = SolverSettings()
