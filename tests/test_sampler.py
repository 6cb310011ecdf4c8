import logging
import math

import numpy as np
import pytest

from heatdiffusion.exceptions import InvalidParameterError
from heatdiffusion.model.parameters import (
    BarType,
    BoundaryCondition,
    InitialConditionKind,
    SimulationParameters,
)
from heatdiffusion.solvers.finite_bar import FiniteBarSolver
from heatdiffusion.solvers.infinite_bar import InfiniteBarSolver
from heatdiffusion.solvers.sampler import SampledProfile, SolutionSampler, SpatialSample

ALL_CONFIGURATIONS = [
    (BarType.INFINITE, BoundaryCondition.DIRICHLET),
    (BarType.FINITE, BoundaryCondition.DIRICHLET),
    (BarType.FINITE, BoundaryCondition.NEUMANN),
    (BarType.FINITE, BoundaryCondition.MIXED),
]


@pytest.mark.parametrize("bar_type, bc", ALL_CONFIGURATIONS)
@pytest.mark.parametrize("kind", list(InitialConditionKind))
def test_time_zero_sample_is_initial_condition(sampler, bar_type, bc, kind):
    params = SimulationParameters(bar_type=bar_type, boundary_condition=bc, initial_condition=kind)
    profile = sampler.sample(0.0, params, 64)
    np.testing.assert_array_equal(profile.u, sampler.evaluate_initial_condition(profile.x, params))
    for point in profile:
        assert point.u == pytest.approx(sampler.evaluate_initial_condition(point.x, params), rel=1e-12, abs=1e-15)


def test_reference_scenario_finite_dirichlet_gaussian(sampler):
    params = SimulationParameters(
        alpha=0.1,
        length=10.0,
        bar_type=BarType.FINITE,
        initial_condition=InitialConditionKind.GAUSSIAN,
        boundary_condition=BoundaryCondition.DIRICHLET,
    )
    profile = sampler.sample(0.0, params, 3)
    assert profile[1].x == 5.0
    assert profile[1].u == pytest.approx(1.0)


@pytest.mark.parametrize("num_points", [1, 2, 500, 777])
def test_grid_is_ascending_over_bar(sampler, num_points):
    params = SimulationParameters(length=7.5)
    profile = sampler.sample(0.3, params, num_points)
    assert len(profile) == num_points
    assert profile.x[0] == 0.0
    if num_points > 1:
        assert profile.x[-1] == 7.5
        assert np.all(np.diff(profile.x) > 0)


def test_default_point_count(sampler):
    assert len(sampler.sample(1.0, SimulationParameters())) == 500


@pytest.mark.parametrize("bar_type, solver_type", [(BarType.INFINITE, InfiniteBarSolver), (BarType.FINITE, FiniteBarSolver)])
def test_dispatch_by_bar_type(sampler, bar_type, solver_type):
    params = SimulationParameters(bar_type=bar_type, initial_condition=InitialConditionKind.TWO_PEAKS)
    assert isinstance(sampler.solver_for(params), solver_type)

    profile = sampler.sample(0.8, params, 50)
    np.testing.assert_array_equal(profile.u, solver_type().solve(profile.x, 0.8, params))


@pytest.mark.parametrize("num_points", [0, -3, 2.5, True])
def test_rejects_invalid_point_count(sampler, num_points):
    with pytest.raises(InvalidParameterError):
        sampler.sample(1.0, SimulationParameters(), num_points)


@pytest.mark.parametrize("time", [-0.05, math.nan])
def test_rejects_invalid_time(sampler, time):
    with pytest.raises(InvalidParameterError):
        sampler.sample(time, SimulationParameters())


@pytest.mark.parametrize(
    "time, params",
    [
        (1e-200, SimulationParameters(alpha=1e-200)),
        (0.5, SimulationParameters(length=1e308)),
    ],
)
def test_rejects_unrepresentable_infinite_bar(sampler, time, params):
    with pytest.raises(InvalidParameterError):
        sampler.sample(time, params, 5)


def test_repeated_calls_recompute(sampler):
    params = SimulationParameters(bar_type=BarType.FINITE, boundary_condition=BoundaryCondition.NEUMANN)
    first = sampler.sample(2.0, params, 100)
    second = sampler.sample(2.0, params, 100)
    assert first is not second
    assert first.u is not second.u
    np.testing.assert_array_equal(first.u, second.u)


def test_heat_kernel_overlay_is_centred(sampler):
    params = SimulationParameters(alpha=0.2, length=8.0)
    peak = 1.0 / math.sqrt(4 * math.pi * 0.2 * 1.5)
    assert sampler.evaluate_heat_kernel(4.0, 1.5, params) == pytest.approx(peak)
    assert sampler.evaluate_heat_kernel(3.0, 1.5, params) == pytest.approx(sampler.evaluate_heat_kernel(5.0, 1.5, params))

    overlay = sampler.kernel_overlay(1.5, params, 101)
    assert isinstance(overlay, SampledProfile)
    assert overlay.max_abs() == pytest.approx(peak)


def test_kernel_overlay_only_for_infinite_bar_after_start(sampler):
    assert sampler.kernel_overlay(0.0, SimulationParameters()) is None
    assert sampler.kernel_overlay(1.0, SimulationParameters(bar_type=BarType.FINITE)) is None


def test_initial_condition_overlay(sampler):
    params = SimulationParameters(initial_condition=InitialConditionKind.STEP)
    overlay = sampler.initial_condition_overlay(params, 11)
    np.testing.assert_array_equal(overlay.u, [0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0])


def test_profile_behaves_as_sequence(sampler):
    profile = sampler.sample(1.0, SimulationParameters(), 5)
    samples = list(profile)
    assert all(isinstance(s, SpatialSample) for s in samples)
    assert profile[-1] == samples[-1]
    assert [s.x for s in profile[1:3]] == [samples[1].x, samples[2].x]
    assert profile.max_abs() == max(abs(s.u) for s in samples)
    with pytest.raises(ValueError):
        profile.u[0] = 1.0


def test_empty_profile_scale():
    profile = SampledProfile(np.empty(0), np.empty(0))
    assert len(profile) == 0
    assert profile.max_abs() == 0.0


def test_sampling_logs_dispatch(sampler, caplog):
    caplog.set_level(logging.DEBUG, logger="heatdiffusion")
    sampler.sample(1.0, SimulationParameters(bar_type=BarType.FINITE), 10)
    assert any("Sampling finite bar" in record.getMessage() for record in caplog.records)
    assert any("Projected" in record.getMessage() for record in caplog.records)


def test_time_zero_logs_bypass(sampler, caplog):
    caplog.set_level(logging.DEBUG, logger="heatdiffusion")
    sampler.sample(0.0, SimulationParameters(), 10)
    messages = [record.getMessage() for record in caplog.records if record.name == "heatdiffusion.solvers.solver"]
    assert messages == ["t=0, returning the gaussian initial condition without quadrature."]
    assert not any("Convolving" in record.getMessage() for record in caplog.records)


def test_profile_leaves_caller_arrays_writeable():
    x = np.linspace(0.0, 1.0, 3)
    u = np.zeros(3)
    profile = SampledProfile(x, u)
    assert x.flags.writeable and u.flags.writeable
    x[0] = 7.0
    assert profile.x[0] == 0.0
    assert not profile.x.flags.writeable
