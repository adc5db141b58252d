"""Critically damped smoothing toward a moving target."""

from __future__ import annotations

# Smooth times below this snap straight to the target.
SMOOTH_TIME_EPSILON = 1.0e-6


class SmoothValue:
    """Critically damped spring filter parametrised by a smooth time.

    The exponential ``exp(-x)`` is approximated by the rational
    ``1 / (1 + x + 0.48 x^2 + 0.235 x^3)``, and the value is clamped to the
    target whenever an update would carry it past the target.

    Args:
        start_value: Initial value. Velocity starts at zero.
    """

    def __init__(self, start_value: float = 0.0) -> None:
        self._value = start_value
        self._velocity = 0.0

    @property
    def value(self) -> float:
        return self._value

    @property
    def velocity(self) -> float:
        return self._velocity

    def update(self, target: float, smooth_time: float, delta_time: float) -> float:
        """Advance by ``delta_time`` toward ``target`` and return the new value."""
        if smooth_time < SMOOTH_TIME_EPSILON:
            self._velocity = 0.0
            self._value = target
            return self._value

        omega = 2.0 / smooth_time
        x = omega * delta_time
        x2 = x * x
        decay = 1.0 / (1.0 + x + 0.48 * x2 + 0.235 * x2 * x)

        previous = self._value
        diff = previous - target
        temp = (self._velocity + omega * diff) * delta_time
        self._velocity = (self._velocity - omega * temp) * decay

        next_value = target + (diff + temp) * decay
        if (target - previous > 0.0) == (next_value > target):
            next_value = target
            self._velocity = (target - previous) / delta_time if delta_time > 0.0 else 0.0
        self._value = next_value
        return self._value
