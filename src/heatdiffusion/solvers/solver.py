from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from heatdiffusion.analysis.initial_conditions import evaluate_initial_condition
from heatdiffusion.config import DEFAULT_SETTINGS, SolverSettings
from heatdiffusion.exceptions import InvalidParameterError

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatdiffusion.model.parameters import SimulationParameters

logger = logging.getLogger(__name__)


def check_time(time: float) -> None:
    """
    Reject times the solvers cannot evaluate.

    Raises:
        InvalidParameterError: If `time` is negative, NaN or infinite.
    """
    if isinstance(time, bool) or not math.isfinite(time) or time < 0:
        raise InvalidParameterError(f"Invalid time: {time!r}. 'time' must be a non-negative finite number.")


class Solver(ABC):
    """
    Base class for the bar solvers.

    A solver holds nothing but its immutable settings. Every call to `solve`
    recomputes all quadratures from the parameters it is given.
    """

    def __init__(self, settings: SolverSettings = DEFAULT_SETTINGS) -> None:
        """
        Initialize the solver.

        Args:
            settings: Quadrature resolutions and number of modes.
        """
        self.settings = settings

    def solve(
        self,
        x: float | npt.NDArray[np.float64],
        time: float,
        params: SimulationParameters,
    ) -> float | npt.NDArray[np.float64]:
        """
        Get the temperature u(x, t).

        At t = 0 the initial condition is returned directly, without any
        quadrature.

        Args:
            x: Position(s) along the bar.
            time: Elapsed time, non-negative.
            params: Simulation parameters.

        Raises:
            InvalidParameterError: If `time` is negative or not finite.

        Returns:
            Temperature, a float for scalar `x`.
        """
        check_time(time)
        if time == 0:
            logger.debug("t=0, returning the %s initial condition without quadrature.", params.initial_condition)
            return evaluate_initial_condition(x, params)

        values = self._solve(np.asarray(x, dtype=np.float64), time, params)

        if np.isscalar(x):
            return float(values)
        return values

    @abstractmethod
    def _solve(
        self,
        x: npt.NDArray[np.float64],
        time: float,
        params: SimulationParameters,
    ) -> npt.NDArray[np.float64]:
        """Evaluate the solution at positive time."""
        pass
