"""Spring-mass systems used to compare ODE integrators.

Both systems implement the OdeState protocol with derivatives
``[position, velocity]`` and provide the closed-form solution for the
initial conditions set by ``reset``, so numerical error can be measured.

The closed-form solutions are only defined in the underdamped regime
(``spring_constant > 0.25 * damping**2`` for every mode). Outside it they
return NaN samples and log a warning.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from enum import Enum

from interplab.numerics.vector import StateVector

logger = logging.getLogger(__name__)

POSITION = 0
VELOCITY = 1


def _underdamped_response(stiffness: float, damping: float, times: Sequence[float]) -> list[float]:
    """Solution of x'' = -(stiffness x + damping x') with x(0) = 1, x'(0) = 0."""
    decay = 0.5 * damping
    omega_squared = stiffness - decay * decay
    if omega_squared <= 0.0:
        logger.warning(
            "analytical solution undefined outside the underdamped regime "
            "(stiffness=%g, damping=%g)", stiffness, damping,
        )
        return [math.nan] * len(times)

    omega = math.sqrt(omega_squared)
    phase_ratio = decay / omega
    return [
        math.exp(-decay * t) * (math.cos(omega * t) + phase_ratio * math.sin(omega * t))
        for t in times
    ]


class SingleSpringMassSystem:
    """One damped mass on a spring: ``x'' = -(k x + c x')``.

    Args:
        spring_constant: Spring stiffness k.
        damping: Damping coefficient c.
    """

    def __init__(self, spring_constant: float = 1.0, damping: float = 0.0) -> None:
        self.reset(spring_constant, damping)

    def reset(self, spring_constant: float, damping: float) -> None:
        """Restore position 1 and velocity 0 with new constants."""
        self.position = 1.0
        self.velocity = 0.0
        self.spring_constant = spring_constant
        self.damping = damping

    def get_derivatives(self) -> list[float]:
        return [self.position, self.velocity]

    def get_nth_derivative(self, derivatives: Sequence[float]) -> float:
        return -(derivatives[POSITION] * self.spring_constant + derivatives[VELOCITY] * self.damping)

    def set_derivatives(self, derivatives: Sequence[float]) -> None:
        self.position = derivatives[POSITION]
        self.velocity = derivatives[VELOCITY]

    def energy(self) -> float:
        """Total mechanical energy ``0.5 v^2 + 0.5 k x^2``."""
        return 0.5 * self.velocity * self.velocity + 0.5 * self.spring_constant * self.position * self.position

    def solve_analytical(self, times: Sequence[float]) -> list[float]:
        """Closed-form position at each time, starting from reset conditions."""
        return _underdamped_response(self.spring_constant, self.damping, times)


class CoupledSpringMassSystem:
    """Two masses chained between fixed walls by three identical springs.

    Each mass feels ``-k (2 x_i - x_j) - c v_i``. Positions and velocities
    are StateVectors of length 2.
    """

    def __init__(self, spring_constant: float = 1.0, damping: float = 0.0) -> None:
        self.reset(spring_constant, damping)

    def reset(self, spring_constant: float, damping: float) -> None:
        """Restore positions (1, 0) and velocities (0, 0) with new constants."""
        self.positions = StateVector([1.0, 0.0])
        self.velocities = StateVector.zeros(2)
        self.spring_constant = spring_constant
        self.damping = damping

    def get_derivatives(self) -> list[StateVector]:
        return [self.positions, self.velocities]

    def get_nth_derivative(self, derivatives: Sequence[StateVector]) -> StateVector:
        x = derivatives[POSITION]
        v = derivatives[VELOCITY]
        k = self.spring_constant
        c = self.damping
        return StateVector([
            -k * (2.0 * x[0] - x[1]) - c * v[0],
            -k * (2.0 * x[1] - x[0]) - c * v[1],
        ])

    def set_derivatives(self, derivatives: Sequence[StateVector]) -> None:
        self.positions = derivatives[POSITION]
        self.velocities = derivatives[VELOCITY]

    def solve_analytical(self, times: Sequence[float]) -> tuple[list[float], list[float]]:
        """Closed-form positions of both masses at each time.

        The system decouples into an in-phase mode (stiffness k) and an
        anti-phase mode (stiffness 3k); from the reset conditions both modes
        start at amplitude 1 and the masses are their half sum and
        half difference.
        """
        in_phase = _underdamped_response(self.spring_constant, self.damping, times)
        anti_phase = _underdamped_response(3.0 * self.spring_constant, self.damping, times)
        first = [0.5 * (q0 + q1) for q0, q1 in zip(in_phase, anti_phase)]
        second = [0.5 * (q0 - q1) for q0, q1 in zip(in_phase, anti_phase)]
        return first, second


class OdeSystem(Enum):
    """Demonstration systems available to ODE experiments."""

    SINGLE_SPRING_MASS = "single_spring_mass"
    COUPLED_SPRING_MASS = "coupled_spring_mass"
