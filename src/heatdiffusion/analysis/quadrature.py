from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from heatdiffusion.exceptions import InvalidParameterError

if TYPE_CHECKING:
    import numpy.typing as npt


def left_riemann_points_weights(
    lower: float,
    upper: float,
    n_points: int,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Generate points and weights for a left Riemann sum on [lower, upper].

    The interval is split into `n_points` equal subintervals, each sampled at its
    left end. The upper bound itself is never a sampling point.

    Args:
        lower: Lower integration bound.
        upper: Upper integration bound.
        n_points: Number of subintervals.

    Raises:
        ValueError: If `n_points` is smaller than 1.
        InvalidParameterError: If the interval width is not a finite number.

    Returns:
        A tuple containing the sampling points and weights.
    """
    if n_points < 1:
        raise ValueError(f"Unsupported number of Riemann points: {n_points}. "
                         f"'n_points' must be at least 1.")

    width = upper - lower
    if not np.isfinite(width):
        raise InvalidParameterError(f"Integration interval [{lower!r}, {upper!r}] has no finite width.")

    step = width / n_points
    points = lower + np.arange(n_points, dtype=np.float64) * step
    weights = np.full(n_points, step, dtype=np.float64)
    return points, weights
