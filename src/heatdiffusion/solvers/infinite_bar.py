from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from heatdiffusion.analysis.initial_conditions import evaluate_initial_condition
from heatdiffusion.analysis.kernel import heat_kernel
from heatdiffusion.analysis.quadrature import left_riemann_points_weights
from heatdiffusion.config import CONVOLUTION_WINDOW
from heatdiffusion.solvers.solver import Solver

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatdiffusion.model.parameters import SimulationParameters

logger = logging.getLogger(__name__)


class InfiniteBarSolver(Solver):
    """
    Solution on the real line by convolution with the heat kernel.

    u(x, t) = ∫ f(ξ) G(x - ξ, t) dξ

    The integral is a left Riemann sum over ξ ∈ [-L/2, 1.5 L] with a fixed
    number of subintervals. There is no error estimate; the resolution is the
    accuracy contract.
    """

    def convolution_points(
        self,
        params: SimulationParameters,
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Get the sampling points and weights of the convolution integral.

        Args:
            params: Simulation parameters.

        Returns:
            A tuple containing the points ξ and the weights Δξ.
        """
        lower, upper = (factor * params.length for factor in CONVOLUTION_WINDOW)
        return left_riemann_points_weights(lower, upper, self.settings.convolution_points)

    def _solve(
        self,
        x: npt.NDArray[np.float64],
        time: float,
        params: SimulationParameters,
    ) -> npt.NDArray[np.float64]:
        xi, weights = self.convolution_points(params)
        logger.debug(
            "Convolving %s initial condition over %d points (t=%.4f, alpha=%.4f).",
            params.initial_condition, xi.size, time, params.alpha,
        )

        weighted_source = evaluate_initial_condition(xi, params) * weights
        kernel = heat_kernel(x[..., np.newaxis] - xi, time, params.alpha)
        return kernel @ weighted_source
