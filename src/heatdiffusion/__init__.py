"""
Heat Diffusion Solvers
======================
Temperature profiles of the 1-D heat equation u_t = α u_xx on an infinite bar
(heat-kernel convolution) and on a finite bar (Fourier eigenfunction expansion).

Typical use, once per redraw tick:

    sampler = SolutionSampler()
    profile = sampler.sample(time, SimulationParameters(bar_type="finite"))
"""
from heatdiffusion.config import SolverSettings
from heatdiffusion.exceptions import InvalidParameterError
from heatdiffusion.model.parameters import (
    BarType,
    BoundaryCondition,
    InitialConditionKind,
    SimulationParameters,
)
from heatdiffusion.solvers.sampler import SampledProfile, SolutionSampler, SpatialSample

__version__ = "0.1.0"

__all__ = [
    "BarType",
    "BoundaryCondition",
    "InitialConditionKind",
    "InvalidParameterError",
    "SampledProfile",
    "SimulationParameters",
    "SolutionSampler",
    "SolverSettings",
    "SpatialSample",
]
