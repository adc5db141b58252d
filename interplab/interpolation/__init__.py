"""Smoothing and decay filters that move a value toward a target."""

from interplab.interpolation.exponential_decay import (
    FixedExponentialDecay,
    IndependentExponentialDecay,
    NormalisedExponentialDecay,
    frequency_to_scale_per_second,
    scale_per_second_to_frequency,
)
from interplab.interpolation.second_order_dynamics import SecondOrderDynamics
from interplab.interpolation.smooth_value import SmoothValue

__all__ = [
    "FixedExponentialDecay",
    "IndependentExponentialDecay",
    "NormalisedExponentialDecay",
    "SecondOrderDynamics",
    "SmoothValue",
    "frequency_to_scale_per_second",
    "scale_per_second_to_frequency",
]
