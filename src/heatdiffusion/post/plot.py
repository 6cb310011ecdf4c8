from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

import matplotlib.pyplot as plt

from heatdiffusion.config import DEFAULT_NUM_POINTS
from heatdiffusion.solvers.sampler import SolutionSampler

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from heatdiffusion.model.parameters import SimulationParameters


def plot_profiles(
    params: SimulationParameters,
    times: Iterable[float],
    num_points: int = DEFAULT_NUM_POINTS,
    ax: Optional[Axes] = None,
    sampler: Optional[SolutionSampler] = None,
) -> Axes:
    """
    Plot the temperature profile at several times.

    The initial condition is drawn dashed in grey. For the infinite bar the
    heat kernel centred at L/2 is drawn for the last time.

    Args:
        params: Simulation parameters.
        times: Times to plot, non-negative.
        num_points: Number of grid points per curve.
        ax: Axes to draw into. A new figure is created if omitted.
        sampler: Sampler to use, a default one if omitted.

    Returns:
        The axes with the plot.
    """
    sampler = sampler or SolutionSampler()
    times = list(times)

    if ax is None:
        plt.rcParams["figure.constrained_layout.use"] = True
        _, ax = plt.subplots(figsize=(7, 5))

    initial = sampler.initial_condition_overlay(params, num_points)
    ax.plot(initial.x, initial.u, color='gray', lw=1.5, ls='--', label="Initial condition")

    for time in times:
        profile = sampler.sample(time, params, num_points)
        ax.plot(profile.x, profile.u, lw=2, label=f"t = {time:.2f}")

    if times:
        kernel = sampler.kernel_overlay(times[-1], params, num_points)
        if kernel is not None:
            ax.plot(kernel.x, kernel.u, color='#9d4edd', lw=1.5, ls=':', label="Gaussian kernel G(x-ξ,t)")

    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.minorticks_on()
    ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    ax.set_title(f"{params.bar_type.label} - {params.initial_condition.label}")
    ax.set_xlabel("Position (x)")
    ax.set_ylabel("Temperature u(x,t)")
    ax.set_xlim(0, params.length)
    ax.legend()
    return ax
