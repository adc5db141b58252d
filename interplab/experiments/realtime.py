"""Fixed-rate sampling of a filter advanced by variable frame times.

A render loop calls ``advance(frame_time)`` with whatever time elapsed since
the last frame. The sampler steps the model in fixed ``1 / fps``
increments, as many as the accumulated time allows, and records one sample
after each step.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from interplab.experiments.trajectory import Trajectory

logger = logging.getLogger(__name__)

StepFn = Callable[[float], dict[str, float]]


class RealtimeSampler:
    """Accumulates frame time and advances a model at a fixed rate.

    Args:
        fps: Fixed step rate. Must be positive.
        step: Called with the fixed step size; advances the model and
            returns the values to record, keyed by series name.
        names: Series names the step function returns.

    Example:
        >>> from interplab.interpolation import SecondOrderDynamics
        >>> dynamics = SecondOrderDynamics()
        >>> sampler = RealtimeSampler(
        ...     10.0,
        ...     lambda dt: {"value": dynamics.update(1.0, dt)},
        ...     ["value"],
        ... )
        >>> sampler.advance(0.25)
        2
    """

    def __init__(self, fps: float, step: StepFn, names: Iterable[str]) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._sample_duration = 1.0 / fps
        self._step = step
        self._names = list(names)
        self.reset()

    @property
    def trajectory(self) -> Trajectory:
        return self._trajectory

    @property
    def current_time(self) -> float:
        return self._current_time

    def reset(self) -> None:
        """Clear recorded samples and rewind the clocks to zero."""
        self._current_time = 0.0
        self._prev_sample_time = 0.0
        self._trajectory = Trajectory(self._names)

    def advance(self, frame_time: float) -> int:
        """Add ``frame_time`` seconds and take every step now due.

        Returns:
            Number of fixed steps taken.
        """
        self._current_time += frame_time
        steps = 0
        while self._current_time - self._prev_sample_time >= self._sample_duration:
            self._prev_sample_time += self._sample_duration
            values = self._step(self._sample_duration)
            self._trajectory.add_sample(self._prev_sample_time, **values)
            steps += 1
        if steps > 1:
            logger.debug("realtime sampler caught up %d steps at t=%.4f", steps, self._current_time)
        return steps
