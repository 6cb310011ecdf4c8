from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from heatdiffusion.exceptions import InvalidParameterError

if TYPE_CHECKING:
    import numpy.typing as npt


def heat_kernel(
    x: float | npt.NDArray[np.float64],
    time: float,
    alpha: float,
) -> float | npt.NDArray[np.float64]:
    """
    Evaluate the Green's function of the heat equation on the real line.

    G(x, t) = exp(-x² / (4αt)) / sqrt(4παt)

    At t = 0 the kernel degenerates to 1 at the origin and 0 elsewhere. The
    solvers never reach this branch: at t = 0 they return the initial condition
    directly.

    Args:
        x: Distance from the point source.
        time: Elapsed time, non-negative.
        alpha: Thermal diffusivity, positive.

    Raises:
        InvalidParameterError: If `time` is negative, `alpha` is not positive,
            or 4αt underflows to zero.

    Returns:
        Kernel value(s), a float for scalar `x`.
    """
    if time < 0:
        raise InvalidParameterError(f"Invalid time: {time!r}. 'time' must be non-negative.")
    if alpha <= 0:
        raise InvalidParameterError(f"Invalid alpha: {alpha!r}. 'alpha' must be positive.")

    x_array = np.asarray(x, dtype=np.float64)

    if time == 0:
        values = np.where(x_array == 0.0, 1.0, 0.0)
    else:
        spread = 4.0 * alpha * time
        if spread == 0.0:
            raise InvalidParameterError(
                f"alpha * time underflows to zero (alpha={alpha!r}, time={time!r}); the kernel is not representable."
            )
        values = np.exp(-x_array ** 2 / spread) / np.sqrt(np.pi * spread)

    if np.isscalar(x):
        return float(values)
    return values
