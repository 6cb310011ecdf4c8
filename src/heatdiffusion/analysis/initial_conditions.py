from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from heatdiffusion.model.parameters import InitialConditionKind, SimulationParameters

if TYPE_CHECKING:
    import numpy.typing as npt


class InitialCondition(ABC):
    """
    Abstract base class for initial temperature profiles.
    """
    KIND: InitialConditionKind

    @property
    def name(self) -> str:
        """Display name of the profile."""
        return self.KIND.label

    @abstractmethod
    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        """
        Get the raw temperature profile, before any boundary post-processing.

        Args:
            x: Position(s) along the bar. Any real value is valid.
            length: Bar length L.

        Returns:
            Temperature at each position.
        """
        pass

    def evaluate(
        self,
        x: float | npt.NDArray[np.float64],
        params: SimulationParameters,
    ) -> float | npt.NDArray[np.float64]:
        """
        Get the initial temperature for the given simulation.

        For a finite bar with Dirichlet ends the profile is multiplied by
        sin(πx/L), so it already vanishes at x = 0 and x = L.

        Args:
            x: Position(s) along the bar.
            params: Simulation parameters.

        Returns:
            Temperature, a float for scalar `x`.
        """
        x_array = np.asarray(x, dtype=np.float64)
        values = self.profile(x_array, params.length)

        if params.enforces_zero_ends:
            values = values * np.sin(np.pi * x_array / params.length)

        if np.isscalar(x):
            return float(values)
        return values


class GaussianCondition(InitialCondition):
    """Single Gaussian peak centred on the bar."""
    KIND = InitialConditionKind.GAUSSIAN

    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        return np.exp(-(x - 0.5 * length) ** 2 / 0.5)


class StepCondition(InitialCondition):
    """Unit pulse of width 2 centred on the bar, open at both edges."""
    KIND = InitialConditionKind.STEP

    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        center = 0.5 * length
        return np.where((x > center - 1) & (x < center + 1), 1.0, 0.0)


class DiscontinuousStepCondition(InitialCondition):
    """Jump from 0 to 1 at the centre of the bar."""
    KIND = InitialConditionKind.STEP_DISCONTINUOUS

    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        return np.where(x >= 0.5 * length, 1.0, 0.0)


class TriangleCondition(InitialCondition):
    """Unit-height hat of half-width 1 centred on the bar."""
    KIND = InitialConditionKind.TRIANGLE

    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        center = 0.5 * length
        rising = (x >= center - 1) & (x <= center)
        falling = (x > center) & (x <= center + 1)
        return np.where(rising, x - (center - 1), np.where(falling, (center + 1) - x, 0.0))


class TwoPeaksCondition(InitialCondition):
    """Two narrow Gaussians at 30 % and 70 % of the bar."""
    KIND = InitialConditionKind.TWO_PEAKS

    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        return np.exp(-(x - 0.3 * length) ** 2 / 0.3) + np.exp(-(x - 0.7 * length) ** 2 / 0.3)


class SigmoidCondition(InitialCondition):
    """Smooth step 1 / (1 + exp(-2(x - L/2)))."""
    KIND = InitialConditionKind.SIGMOID

    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        # Same function as the logistic form, without overflow far left of the centre
        return 0.5 * (1.0 + np.tanh(x - 0.5 * length))


class ChaoticCondition(InitialCondition):
    """
    Superposition of eight harmonics with fixed amplitudes and phases.

    All wave numbers are even, so the profile repeats with period L. The sum is
    shifted and scaled by (v + 1.5) / 2, which keeps it above 0.3 everywhere.
    """
    KIND = InitialConditionKind.CHAOTIC

    # (wave number in units of π/L, amplitude, phase, use sine)
    HARMONICS: tuple[tuple[int, float, float, bool], ...] = (
        (2, 0.5, 0.0, True),
        (4, 0.3, 0.5, False),
        (6, 0.4, 1.2, True),
        (8, 0.25, -0.8, False),
        (10, 0.2, 2.1, True),
        (12, 0.15, -1.5, False),
        (16, 0.1, 0.3, True),
        (20, 0.08, -2.0, False),
    )

    def profile(self, x: npt.NDArray[np.float64], length: float) -> npt.NDArray[np.float64]:
        value = np.zeros_like(x)
        for wave_number, amplitude, phase, use_sine in self.HARMONICS:
            argument = wave_number * np.pi * x / length + phase
            value = value + amplitude * (np.sin(argument) if use_sine else np.cos(argument))
        return (value + 1.5) / 2


INITIAL_CONDITIONS: dict[InitialConditionKind, InitialCondition] = {
    condition.KIND: condition
    for condition in (
        GaussianCondition(),
        StepCondition(),
        DiscontinuousStepCondition(),
        TriangleCondition(),
        TwoPeaksCondition(),
        SigmoidCondition(),
        ChaoticCondition(),
    )
}


def get_initial_condition(kind: InitialConditionKind) -> InitialCondition:
    """Return the profile implementation for `kind`."""
    return INITIAL_CONDITIONS[InitialConditionKind(kind)]


def evaluate_initial_condition(
    x: float | npt.NDArray[np.float64],
    params: SimulationParameters,
) -> float | npt.NDArray[np.float64]:
    """
    Evaluate the initial temperature f(x) selected by `params`.

    Args:
        x: Position(s), any real value.
        params: Simulation parameters.

    Returns:
        Temperature, a float for scalar `x`.
    """
    return get_initial_condition(params.initial_condition).evaluate(x, params)
