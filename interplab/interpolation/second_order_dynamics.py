"""Second-order dynamics tracker.

Follows a target with a spring-damper response described by three
intuitive parameters:

- frequency: natural frequency of the response, in Hz.
- damping: 0 oscillates forever, 1 is critically damped, >1 is sluggish.
- initial_response: <0 anticipates (undershoots) the target, 0 eases in,
  1 reacts immediately, >1 overshoots.

These map onto the constants of ``y + k1 y' + k2 y'' = x + k3 x'``, which is
integrated with semi-implicit Euler. k2 is raised per step to keep the
integration stable and jitter free for any step size.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SecondOrderDynamics(Generic[T]):
    """Critically damped second-order tracker over floats or vectors.

    Args:
        frequency: Natural frequency in Hz. Must be positive.
        damping: Damping ratio.
        initial_response: Response to a change in target.
        start_value: Initial value; the previous target starts here too.
    """

    def __init__(
        self,
        frequency: float = 1.0,
        damping: float = 1.0,
        initial_response: float = 0.0,
        start_value: T = 0.0,
    ) -> None:
        self._k1 = 0.0
        self._k2 = 0.0
        self._k3 = 0.0
        self.set_dynamics_constants(frequency, damping, initial_response)
        self.set_value(start_value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def velocity(self) -> T:
        return self._velocity

    @property
    def constants(self) -> tuple[float, float, float]:
        """The (k1, k2, k3) dynamics constants."""
        return self._k1, self._k2, self._k3

    def set_value(self, value: T) -> None:
        """Re-seed the tracker at ``value`` with zero velocity."""
        self._prev_target = value
        self._value = value
        self._velocity = value * 0.0

    def set_dynamics_constants(self, frequency: float, damping: float, initial_response: float) -> None:
        """Recompute k1, k2, k3 without disturbing the current value.

        Raises:
            ValueError: If frequency is not positive.
        """
        if frequency <= 0.0:
            raise ValueError(f"frequency must be positive, got {frequency}")

        pi_freq = math.pi * frequency
        two_pi_freq = 2.0 * pi_freq

        self._k1 = damping / pi_freq
        self._k2 = 1.0 / (two_pi_freq * two_pi_freq)
        self._k3 = initial_response * damping / two_pi_freq
        logger.debug(
            "dynamics constants k1=%.6g k2=%.6g k3=%.6g (f=%g, z=%g, r=%g)",
            self._k1, self._k2, self._k3, frequency, damping, initial_response,
        )

    def update(
        self,
        target: T,
        delta_time: float,
        clamp_velocity: Callable[[T], T] | None = None,
    ) -> T:
        """Advance by ``delta_time`` toward ``target`` and return the new value.

        Args:
            target: Value to follow.
            delta_time: Step size in seconds; must be positive.
            clamp_velocity: Optional hook returning a limited velocity,
                applied after the velocity update.
        """
        # backward difference estimate of the target's velocity
        target_velocity = (target - self._prev_target) / delta_time
        self._prev_target = target

        k1_dt = self._k1 * delta_time
        stable_k2 = max(self._k2, delta_time * delta_time * 0.5 + k1_dt * 0.5, k1_dt)

        acceleration = (target + target_velocity * self._k3 - self._value - self._velocity * self._k1) / stable_k2
        self._velocity = self._velocity + acceleration * delta_time
        if clamp_velocity is not None:
            self._velocity = clamp_velocity(self._velocity)
        self._value = self._value + self._velocity * delta_time
        return self._value
