"""Exponential decay filters.

Each filter holds one value and moves it toward a target on every update.
The value may be a float or any type supporting ``+``, ``-`` and scalar
``*`` (e.g. StateVector).

- FixedExponentialDecay: retains a fixed fraction per update, so the result
  depends on the update rate.
- IndependentExponentialDecay: retains ``scale_per_second ** delta_time``,
  giving the same result for any step size over the same duration.
- NormalisedExponentialDecay: independent decay parametrised by a damping
  multiplier on a fixed base scale.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

# Frequencies / scales at or below this convert to zero.
CONVERSION_EPSILON = 1.0e-6

DEFAULT_NORMALISED_SCALE_PER_SECOND = 0.01


def scale_per_second_to_frequency(scale_per_second: float) -> float:
    """Return ``1 / scale_per_second``, or 0.0 when the scale is ~zero."""
    return 1.0 / scale_per_second if scale_per_second > CONVERSION_EPSILON else 0.0


def frequency_to_scale_per_second(frequency: float) -> float:
    """Return ``1 / frequency``, or 0.0 when the frequency is ~zero."""
    return 1.0 / frequency if frequency > CONVERSION_EPSILON else 0.0


class FixedExponentialDecay(Generic[T]):
    """Frame-rate dependent decay: ``value = target + (value - target) * factor``.

    Args:
        start_value: Initial value.
    """

    def __init__(self, start_value: T = 0.0) -> None:
        self._value = start_value

    @property
    def value(self) -> T:
        return self._value

    def update(self, target: T, decay_factor: float, delta_time: float) -> T:
        """Move toward target, retaining ``decay_factor`` of the gap.

        ``delta_time`` is accepted for interface parity and ignored.
        """
        self._value = target + (self._value - target) * decay_factor
        return self._value


class IndependentExponentialDecay(Generic[T]):
    """Frame-rate independent decay.

    ``scale_per_second`` is the fraction of the gap to the target left after
    one second.
    """

    def __init__(self, start_value: T = 0.0) -> None:
        self._value = start_value

    @property
    def value(self) -> T:
        return self._value

    def update(self, target: T, scale_per_second: float, delta_time: float) -> T:
        self._value = target + (self._value - target) * (scale_per_second ** delta_time)
        return self._value


class NormalisedExponentialDecay(Generic[T]):
    """Frame-rate independent decay driven by a damping multiplier."""

    def __init__(self, start_value: T = 0.0) -> None:
        self._value = start_value

    @property
    def value(self) -> T:
        return self._value

    def update(
        self,
        target: T,
        damping: float,
        delta_time: float,
        scale_per_second: float = DEFAULT_NORMALISED_SCALE_PER_SECOND,
    ) -> T:
        self._value = target + (self._value - target) * (scale_per_second ** (delta_time * damping))
        return self._value
