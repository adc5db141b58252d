"""Static step-response runs of the smoothing filters.

Each run samples before updating, so the first sample is the start value
at t = 0 and the run covers ``SamplingConfig.num_samples`` samples.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from interplab.experiments.config import (
    DecayExperiment,
    DynamicsExperiment,
    SmoothValueExperiment,
)
from interplab.experiments.trajectory import Trajectory
from interplab.interpolation.exponential_decay import (
    FixedExponentialDecay,
    IndependentExponentialDecay,
    NormalisedExponentialDecay,
    frequency_to_scale_per_second,
)
from interplab.interpolation.second_order_dynamics import SecondOrderDynamics
from interplab.interpolation.smooth_value import SmoothValue

logger = logging.getLogger(__name__)


def run_decay_experiment(config: DecayExperiment | None = None) -> Trajectory:
    """Run fixed, independent and normalised decays toward one target.

    Returns:
        Trajectory with series 'target', 'fixed', 'independent', 'normalised'.
    """
    config = config or DecayExperiment()
    sampling = config.sampling
    dt = sampling.delta_time

    scale_per_second = config.scale_per_second
    if config.frequency is not None:
        scale_per_second = frequency_to_scale_per_second(config.frequency)

    fixed = FixedExponentialDecay(config.start_value)
    independent = IndependentExponentialDecay(config.start_value)
    normalised = NormalisedExponentialDecay(config.start_value)

    trajectory = Trajectory(["target", "fixed", "independent", "normalised"])
    for i in range(sampling.num_samples):
        trajectory.add_sample(
            i * dt,
            target=config.target,
            fixed=fixed.value,
            independent=independent.value,
            normalised=normalised.value,
        )
        fixed.update(config.target, config.decay_factor, dt)
        independent.update(config.target, scale_per_second, dt)
        normalised.update(config.target, config.damping, dt)

    logger.debug("decay experiment: %d samples, scale_per_second=%g", len(trajectory), scale_per_second)
    return trajectory


def run_smooth_value_experiment(config: SmoothValueExperiment | None = None) -> Trajectory:
    """Run SmoothValue toward a fixed target.

    Returns:
        Trajectory with series 'target', 'value', 'velocity'.
    """
    config = config or SmoothValueExperiment()
    sampling = config.sampling
    dt = sampling.delta_time

    smooth = SmoothValue(config.start_value)
    trajectory = Trajectory(["target", "value", "velocity"])
    for i in range(sampling.num_samples):
        trajectory.add_sample(i * dt, target=config.target, value=smooth.value, velocity=smooth.velocity)
        smooth.update(config.target, config.smooth_time, dt)
    return trajectory


def make_velocity_clamp(max_speed: float) -> Callable[[float], float]:
    """Return a clamp hook limiting velocity to [-max_speed, max_speed]."""

    def clamp(velocity: float) -> float:
        return min(max(velocity, -max_speed), max_speed)

    return clamp


def run_dynamics_experiment(config: DynamicsExperiment | None = None) -> Trajectory:
    """Run SecondOrderDynamics as a step response.

    Returns:
        Trajectory with series 'target', 'value', 'velocity'.
    """
    config = config or DynamicsExperiment()
    sampling = config.sampling
    dt = sampling.delta_time

    dynamics = SecondOrderDynamics(
        config.frequency, config.damping, config.initial_response, config.start_value
    )
    clamp = make_velocity_clamp(config.max_speed) if config.max_speed is not None else None

    trajectory = Trajectory(["target", "value", "velocity"])
    for i in range(sampling.num_samples):
        trajectory.add_sample(i * dt, target=config.target, value=dynamics.value, velocity=dynamics.velocity)
        dynamics.update(config.target, dt, clamp)

    logger.debug(
        "dynamics experiment: f=%g z=%g r=%g, final value %g",
        config.frequency, config.damping, config.initial_response, trajectory.final("value"),
    )
    return trajectory
