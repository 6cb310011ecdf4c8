from __future__ import annotations

import pytest

from heatdiffusion.model.parameters import (
    BarType,
    BoundaryCondition,
    InitialConditionKind,
    SimulationParameters,
)
from heatdiffusion.solvers.finite_bar import FiniteBarSolver
from heatdiffusion.solvers.infinite_bar import InfiniteBarSolver
from heatdiffusion.solvers.sampler import SolutionSampler


@pytest.fixture
def sampler() -> SolutionSampler:
    return SolutionSampler()


@pytest.fixture
def infinite_solver() -> InfiniteBarSolver:
    return InfiniteBarSolver()


@pytest.fixture
def finite_solver() -> FiniteBarSolver:
    return FiniteBarSolver()


@pytest.fixture
def infinite_params() -> SimulationParameters:
    return SimulationParameters(alpha=0.1, length=10.0, bar_type=BarType.INFINITE)


@pytest.fixture
def make_finite_params():
    def _make(
        boundary_condition: BoundaryCondition,
        initial_condition: InitialConditionKind = InitialConditionKind.GAUSSIAN,
    ) -> SimulationParameters:
        return SimulationParameters(
            alpha=0.1,
            length=10.0,
            bar_type=BarType.FINITE,
            initial_condition=initial_condition,
            boundary_condition=boundary_condition,
        )
    return _make
