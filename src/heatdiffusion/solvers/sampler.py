"""
Solution Sampler
================
Entry point for the visualization layer. Once per redraw tick the caller hands
over a parameter snapshot, the current time and a point count, and receives the
temperature curve on [0, L] together with the reference overlays.

Nothing is cached: repeated calls with unchanged parameters recompute every
quadrature from scratch.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple, overload

import numpy as np

from heatdiffusion.analysis.initial_conditions import evaluate_initial_condition
from heatdiffusion.analysis.kernel import heat_kernel
from heatdiffusion.config import DEFAULT_NUM_POINTS, DEFAULT_SETTINGS, SolverSettings
from heatdiffusion.exceptions import InvalidParameterError
from heatdiffusion.model.parameters import BarType
from heatdiffusion.solvers.finite_bar import FiniteBarSolver
from heatdiffusion.solvers.infinite_bar import InfiniteBarSolver
from heatdiffusion.solvers.solver import Solver, check_time

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatdiffusion.model.parameters import SimulationParameters

logger = logging.getLogger(__name__)


class SpatialSample(NamedTuple):
    x: float
    u: float


class SampledProfile(Sequence[SpatialSample]):
    """
    Temperature curve sampled on an ascending grid.

    Behaves as a read-only sequence of `SpatialSample`; the raw arrays are
    available as `x` and `u`. The arrays are copied on construction, so the
    caller's own arrays stay writeable.
    """

    def __init__(self, x: npt.NDArray[np.float64], u: npt.NDArray[np.float64]) -> None:
        if x.shape != u.shape:
            raise ValueError(f"Shape mismatch between x {x.shape} and u {u.shape}.")
        self._x = np.array(x, dtype=np.float64)
        self._u = np.array(u, dtype=np.float64)
        self._x.flags.writeable = False
        self._u.flags.writeable = False

    @property
    def x(self) -> npt.NDArray[np.float64]:
        return self._x

    @property
    def u(self) -> npt.NDArray[np.float64]:
        return self._u

    def __len__(self) -> int:
        return self._x.size

    @overload
    def __getitem__(self, index: int) -> SpatialSample: ...

    @overload
    def __getitem__(self, index: slice) -> SampledProfile: ...

    def __getitem__(self, index: int | slice) -> SpatialSample | SampledProfile:
        if isinstance(index, slice):
            return SampledProfile(self._x[index], self._u[index])
        return SpatialSample(float(self._x[index]), float(self._u[index]))

    def __repr__(self) -> str:
        if not len(self):
            return "SampledProfile(n=0)"
        return f"SampledProfile(n={len(self)}, x=[{self._x[0]:.3g} .. {self._x[-1]:.3g}])"

    def max_abs(self) -> float:
        """Largest |u| on the grid, used to scale the plot; 0 for an all-zero curve."""
        if not len(self):
            return 0.0
        return float(np.max(np.abs(self._u)))


def check_num_points(num_points: int) -> None:
    """
    Raises:
        InvalidParameterError: If `num_points` is not an integer of at least 1.
    """
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)) or num_points < 1:
        raise InvalidParameterError(f"Invalid num_points: {num_points!r}. 'num_points' must be an integer >= 1.")


def sample_grid(params: SimulationParameters, num_points: int) -> npt.NDArray[np.float64]:
    """Equally spaced, ascending grid over [0, L] including both ends."""
    check_num_points(num_points)
    return np.linspace(0.0, params.length, int(num_points))


class SolutionSampler:
    """
    Dispatches evaluations to the solver matching the bar type.
    """

    def __init__(self, settings: SolverSettings = DEFAULT_SETTINGS) -> None:
        """
        Initialize the sampler.

        Args:
            settings: Quadrature resolutions and number of modes shared by both solvers.
        """
        self.settings = settings
        self._solvers: dict[BarType, Solver] = {
            BarType.INFINITE: InfiniteBarSolver(settings),
            BarType.FINITE: FiniteBarSolver(settings),
        }

    def solver_for(self, params: SimulationParameters) -> Solver:
        """Return the solver responsible for `params.bar_type`."""
        return self._solvers[params.bar_type]

    def sample(
        self,
        time: float,
        params: SimulationParameters,
        num_points: int = DEFAULT_NUM_POINTS,
    ) -> SampledProfile:
        """
        Sample u(x, t) on [0, L].

        Args:
            time: Elapsed time, non-negative.
            params: Simulation parameters.
            num_points: Number of grid points, at least 1.

        Raises:
            InvalidParameterError: If `time` or `num_points` is out of range.

        Returns:
            The sampled curve, `num_points` long, x ascending.
        """
        check_time(time)
        x = sample_grid(params, num_points)

        logger.debug("Sampling %s bar at t=%.4f on %d points.", params.bar_type, time, x.size)
        u = np.asarray(self.solver_for(params).solve(x, time, params), dtype=np.float64)
        return SampledProfile(x, u)

    @staticmethod
    def evaluate_initial_condition(
        x: float | npt.NDArray[np.float64],
        params: SimulationParameters,
    ) -> float | npt.NDArray[np.float64]:
        """Initial temperature f(x), the reference overlay of the raw initial condition."""
        return evaluate_initial_condition(x, params)

    @staticmethod
    def evaluate_heat_kernel(
        x: float | npt.NDArray[np.float64],
        time: float,
        params: SimulationParameters,
    ) -> float | npt.NDArray[np.float64]:
        """
        Heat kernel centred on the middle of the bar, G(x - L/2, t).

        Only meaningful as an overlay for the infinite bar at t > 0.
        """
        check_time(time)
        x_array = np.asarray(x, dtype=np.float64)
        values = heat_kernel(x_array - params.center, time, params.alpha)

        if np.isscalar(x):
            return float(values)
        return values

    def initial_condition_overlay(
        self,
        params: SimulationParameters,
        num_points: int = DEFAULT_NUM_POINTS,
    ) -> SampledProfile:
        """Initial condition sampled on the same grid as `sample`."""
        x = sample_grid(params, num_points)
        return SampledProfile(x, np.asarray(evaluate_initial_condition(x, params), dtype=np.float64))

    def kernel_overlay(
        self,
        time: float,
        params: SimulationParameters,
        num_points: int = DEFAULT_NUM_POINTS,
    ) -> SampledProfile | None:
        """
        Centred heat kernel sampled on the same grid as `sample`.

        Returns:
            The kernel curve, or None unless the bar is infinite and t > 0.
        """
        check_time(time)
        x = sample_grid(params, num_points)
        if params.bar_type != BarType.INFINITE or time == 0:
            return None
        return SampledProfile(x, self.evaluate_heat_kernel(x, time, params))
