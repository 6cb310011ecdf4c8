"""
Simulation Parameters Data Model
================================
Defines the configuration of a single evaluation: the bar, its diffusivity,
the initial temperature profile and the boundary conditions.

The visualization layer owns and edits these values; the solvers only ever
receive an immutable snapshot.
"""
from __future__ import annotations

import dataclasses
import math
import numbers
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict

from heatdiffusion.config import DEFAULT_ALPHA, DEFAULT_LENGTH
from heatdiffusion.exceptions import InvalidParameterError

__all__ = [
    "BarType",
    "BoundaryCondition",
    "InitialConditionKind",
    "InvalidParameterError",
    "SimulationParameters",
]


class BarType(StrEnum):
    INFINITE = "infinite"
    FINITE = "finite"

    @property
    def label(self) -> str:
        return _BAR_LABELS[self]

    @property
    def description(self) -> str:
        return _BAR_DESCRIPTIONS[self]


class BoundaryCondition(StrEnum):
    DIRICHLET = "dirichlet"
    NEUMANN = "neumann"
    MIXED = "mixed"

    @property
    def label(self) -> str:
        return _BC_LABELS[self]

    @property
    def description(self) -> str:
        return _BC_DESCRIPTIONS[self]


class InitialConditionKind(StrEnum):
    GAUSSIAN = "gaussian"
    STEP = "step"
    STEP_DISCONTINUOUS = "step-discontinuous"
    TRIANGLE = "triangle"
    TWO_PEAKS = "two-peaks"
    SIGMOID = "sigmoid"
    CHAOTIC = "chaotic"

    @property
    def label(self) -> str:
        return _IC_LABELS[self]


_BAR_LABELS = {
    BarType.INFINITE: "Infinite Bar (Convolution)",
    BarType.FINITE: "Finite Bar (Fourier Series)",
}

_BAR_DESCRIPTIONS = {
    BarType.INFINITE: "Solution = f(x) convolved with the Gaussian heat kernel G(x,t).",
    BarType.FINITE: "Solution = truncated eigenfunction expansion on [0, L].",
}

_BC_LABELS = {
    BoundaryCondition.DIRICHLET: "Dirichlet: u(0)=u(L)=0",
    BoundaryCondition.NEUMANN: "Neumann: du/dx(0)=du/dx(L)=0",
    BoundaryCondition.MIXED: "Mixed: u(0)=0, du/dx(L)=0",
}

_BC_DESCRIPTIONS = {
    BoundaryCondition.DIRICHLET: "Both ends fixed at zero temperature. Heat escapes at the boundaries.",
    BoundaryCondition.NEUMANN: "Both ends insulated. Total heat is conserved.",
    BoundaryCondition.MIXED: "Left end at zero, right end insulated.",
}

_IC_LABELS = {
    InitialConditionKind.GAUSSIAN: "Gaussian Peak",
    InitialConditionKind.STEP: "Step Function (pulse)",
    InitialConditionKind.STEP_DISCONTINUOUS: "Step 0→1 (discontinuous)",
    InitialConditionKind.TRIANGLE: "Triangle",
    InitialConditionKind.TWO_PEAKS: "Two Peaks",
    InitialConditionKind.SIGMOID: "Sigmoid",
    InitialConditionKind.CHAOTIC: "Chaotic (Multi-frequency)",
}


@dataclass(frozen=True)
class SimulationParameters:
    """
    Immutable snapshot of the simulation inputs.

    Attributes:
        alpha: Thermal diffusivity, must be positive.
        length: Bar length L, must be positive. Also sets the visualized window
            [0, L] of the infinite bar.
        bar_type: Infinite (convolution) or finite (eigenfunction expansion) bar.
        initial_condition: Shape of the initial temperature profile.
        boundary_condition: End conditions, used by the finite bar only.

    Raises:
        InvalidParameterError: If `alpha` or `length` is not a positive finite number.
    """
    alpha: float = DEFAULT_ALPHA
    length: float = DEFAULT_LENGTH
    bar_type: BarType = BarType.INFINITE
    initial_condition: InitialConditionKind = InitialConditionKind.GAUSSIAN
    boundary_condition: BoundaryCondition = BoundaryCondition.DIRICHLET

    def __post_init__(self) -> None:
        # Accept plain strings from the UI, store the enum members
        object.__setattr__(self, "bar_type", BarType(self.bar_type))
        object.__setattr__(self, "initial_condition", InitialConditionKind(self.initial_condition))
        object.__setattr__(self, "boundary_condition", BoundaryCondition(self.boundary_condition))

        for name in ("alpha", "length"):
            value = getattr(self, name)
            if not _is_positive_number(value):
                raise InvalidParameterError(
                    f"Invalid {name}: {value!r}. '{name}' must be a positive finite number."
                )

    @property
    def center(self) -> float:
        """Midpoint of the bar, L/2."""
        return 0.5 * self.length

    @property
    def enforces_zero_ends(self) -> bool:
        """True if the initial condition has to vanish at both ends of the bar."""
        return self.bar_type == BarType.FINITE and self.boundary_condition == BoundaryCondition.DIRICHLET

    def replace(self, **changes: Any) -> SimulationParameters:
        """Return a validated copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alpha": self.alpha,
            "length": self.length,
            "bar_type": self.bar_type.value,
            "initial_condition": self.initial_condition.value,
            "boundary_condition": self.boundary_condition.value,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> SimulationParameters:
        return SimulationParameters(
            alpha=float(data.get("alpha", DEFAULT_ALPHA)),
            length=float(data.get("length", DEFAULT_LENGTH)),
            bar_type=BarType(data.get("bar_type", BarType.INFINITE)),
            initial_condition=InitialConditionKind(data.get("initial_condition", InitialConditionKind.GAUSSIAN)),
            boundary_condition=BoundaryCondition(data.get("boundary_condition", BoundaryCondition.DIRICHLET)),
        )


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value > 0
