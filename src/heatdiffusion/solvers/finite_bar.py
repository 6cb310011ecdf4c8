from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np

from heatdiffusion.analysis.initial_conditions import evaluate_initial_condition
from heatdiffusion.analysis.quadrature import left_riemann_points_weights
from heatdiffusion.model.parameters import BoundaryCondition
from heatdiffusion.solvers.solver import Solver, check_time

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatdiffusion.model.parameters import SimulationParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FourierCoefficient:
    """Coefficient of the n-th eigenfunction, n starting at 1."""
    n: int
    value: float


@dataclass(frozen=True, eq=False)
class ModalExpansion:
    """
    Truncated eigenfunction expansion of the finite-bar solution at one time.

    u(x, t) = constant + Σ c_n exp(-α λ_n² t) φ(λ_n x)

    where φ is sin for Dirichlet and mixed ends and cos for Neumann ends. The
    constant is the mean temperature for Neumann ends and zero otherwise; it
    never decays.
    """
    boundary_condition: BoundaryCondition
    alpha: float
    time: float
    constant: float
    eigenvalues: npt.NDArray[np.float64]
    weights: npt.NDArray[np.float64]

    @property
    def coefficients(self) -> list[FourierCoefficient]:
        """Undecayed coefficients c_1 .. c_N."""
        return [FourierCoefficient(n=n, value=float(c)) for n, c in enumerate(self.weights, start=1)]

    def decay(self) -> npt.NDArray[np.float64]:
        """Time factors exp(-α λ_n² t)."""
        return np.exp(-self.alpha * self.eigenvalues ** 2 * self.time)

    def amplitudes(self) -> npt.NDArray[np.float64]:
        """Mode amplitudes at the expansion time."""
        return self.weights * self.decay()

    def evaluate(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Sum the expansion at the given position(s).

        Args:
            x: Position(s) in [0, L].

        Returns:
            Temperature, a float for scalar `x`.
        """
        x_array = np.asarray(x, dtype=np.float64)
        basis = eigenfunction(self.boundary_condition)
        values = self.constant + basis(x_array[..., np.newaxis] * self.eigenvalues) @ self.amplitudes()

        if np.isscalar(x):
            return float(values)
        return values


def eigenfunction(boundary_condition: BoundaryCondition) -> Callable[[npt.NDArray[np.float64]], npt.NDArray[np.float64]]:
    """
    Get the eigenfunction family φ for the boundary condition.

    Args:
        boundary_condition: End conditions of the bar.

    Raises:
        ValueError: If the boundary condition is not supported.

    Returns:
        np.sin or np.cos, to be evaluated at λ_n x.
    """
    if boundary_condition in (BoundaryCondition.DIRICHLET, BoundaryCondition.MIXED):
        return np.sin
    elif boundary_condition == BoundaryCondition.NEUMANN:
        return np.cos
    else:
        raise ValueError(f"Unsupported boundary condition: {boundary_condition!r}.")


class FiniteBarSolver(Solver):
    """
    Solution on [0, L] by a truncated eigenfunction expansion.

    Dirichlet: λ_n = nπ/L, sine modes.
    Neumann: λ_n = nπ/L, cosine modes plus the non-decaying mean.
    Mixed (u(0) = 0, u'(L) = 0): λ_n = (n - 1/2)π/L, sine modes.

    Coefficients come from a left Riemann sum over [0, L]. They are recomputed
    on every call and never cached between time steps.
    """

    def eigenvalues(self, params: SimulationParameters) -> npt.NDArray[np.float64]:
        """
        Get λ_1 .. λ_N for the boundary condition of `params`.

        Args:
            params: Simulation parameters.

        Raises:
            ValueError: If the boundary condition is not supported.

        Returns:
            Array of the eigenvalues (wave numbers).
        """
        n = np.arange(1, self.settings.fourier_modes + 1, dtype=np.float64)
        bc = params.boundary_condition

        if bc in (BoundaryCondition.DIRICHLET, BoundaryCondition.NEUMANN):
            return n * np.pi / params.length
        elif bc == BoundaryCondition.MIXED:
            return (n - 0.5) * np.pi / params.length
        else:
            raise ValueError(f"Unsupported boundary condition: {bc!r}.")

    def _project(
        self,
        params: SimulationParameters,
        eigenvalues: npt.NDArray[np.float64],
    ) -> tuple[float, npt.NDArray[np.float64]]:
        """Project the initial condition onto the constant mode and the eigenfunctions."""
        length = params.length
        xi, weights = left_riemann_points_weights(0.0, length, self.settings.coefficient_points)
        weighted_source = evaluate_initial_condition(xi, params) * weights

        basis = eigenfunction(params.boundary_condition)
        coefficients = (2.0 / length) * (basis(np.outer(eigenvalues, xi)) @ weighted_source)

        if params.boundary_condition == BoundaryCondition.NEUMANN:
            constant = float(np.sum(weighted_source)) / length
        else:
            constant = 0.0

        logger.debug(
            "Projected %s initial condition on %d %s modes using %d points.",
            params.initial_condition, eigenvalues.size, params.boundary_condition, xi.size,
        )
        return constant, coefficients

    def coefficients(self, params: SimulationParameters) -> list[FourierCoefficient]:
        """
        Get the undecayed expansion coefficients of the initial condition.

        Args:
            params: Simulation parameters.

        Returns:
            Coefficients for n = 1 .. N.
        """
        return self.expand(0.0, params).coefficients

    def expand(self, time: float, params: SimulationParameters) -> ModalExpansion:
        """
        Build the modal expansion of the solution at `time`.

        Args:
            time: Elapsed time, non-negative.
            params: Simulation parameters.

        Raises:
            InvalidParameterError: If `time` is negative or not finite.

        Returns:
            The expansion, with freshly computed coefficients.
        """
        check_time(time)
        eigenvalues = self.eigenvalues(params)
        constant, weights = self._project(params, eigenvalues)
        return ModalExpansion(
            boundary_condition=params.boundary_condition,
            alpha=params.alpha,
            time=time,
            constant=constant,
            eigenvalues=eigenvalues,
            weights=weights,
        )

    def _solve(
        self,
        x: npt.NDArray[np.float64],
        time: float,
        params: SimulationParameters,
    ) -> npt.NDArray[np.float64]:
        return self.expand(time, params).evaluate(x)
