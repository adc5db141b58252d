"""Parameter sets for experiments.

Each experiment is configured by a frozen dataclass whose defaults match
the interactive testbed. Invalid values raise ValueError at construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from interplab.numerics.ode import OdeMethod


def _require_positive(name: str, value: float) -> None:
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class SamplingConfig:
    """Duration and rate of a static sampling run.

    Attributes:
        duration_s: Length of the run in seconds.
        fps: Samples (and updates) per second.
    """

    duration_s: float = 10.0
    fps: float = 60.0

    def __post_init__(self) -> None:
        _require_positive("duration_s", self.duration_s)
        _require_positive("fps", self.fps)

    @property
    def delta_time(self) -> float:
        return 1.0 / self.fps

    @property
    def num_samples(self) -> int:
        """Samples needed to cover the duration, including t = 0."""
        return 1 + math.ceil(self.duration_s * self.fps)


@dataclass(frozen=True)
class DecayExperiment:
    """Side-by-side run of the three exponential decays.

    When ``frequency`` is set it overrides ``scale_per_second`` for the
    independent decay (``scale = 1 / frequency``).
    """

    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    start_value: float = 1.0
    target: float = 0.0
    decay_factor: float = 0.926
    scale_per_second: float = 0.01
    frequency: float | None = None
    damping: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.decay_factor <= 1.0:
            raise ValueError(f"decay_factor must be in [0, 1], got {self.decay_factor}")
        if self.scale_per_second < 0.0:
            raise ValueError(f"scale_per_second must be non-negative, got {self.scale_per_second}")


@dataclass(frozen=True)
class SmoothValueExperiment:
    sampling: SamplingConfig = field(default_factory=lambda: SamplingConfig(duration_s=1.0))
    start_value: float = 0.0
    target: float = 1.0
    smooth_time: float = 1.0

    def __post_init__(self) -> None:
        if self.smooth_time < 0.0:
            raise ValueError(f"smooth_time must be non-negative, got {self.smooth_time}")


@dataclass(frozen=True)
class DynamicsExperiment:
    """Second-order dynamics step response.

    Attributes:
        max_speed: When set, velocity is clamped to [-max_speed, max_speed].
    """

    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    start_value: float = 0.0
    target: float = 1.0
    frequency: float = 1.0
    damping: float = 1.0
    initial_response: float = 0.0
    max_speed: float | None = None

    def __post_init__(self) -> None:
        _require_positive("frequency", self.frequency)
        if self.max_speed is not None:
            _require_positive("max_speed", self.max_speed)


@dataclass(frozen=True)
class OdeExperiment:
    """Integrator comparison on the spring-mass systems.

    Attributes:
        analytical_fps: Rate of the closed-form reference samples.
        methods: Integration methods to run, in order.
    """

    sampling: SamplingConfig = field(default_factory=lambda: SamplingConfig(duration_s=60.0))
    spring_constant: float = 1.0
    damping: float = 0.1
    analytical_fps: float = 120.0
    methods: tuple[OdeMethod, ...] = tuple(OdeMethod)

    def __post_init__(self) -> None:
        _require_positive("spring_constant", self.spring_constant)
        _require_positive("analytical_fps", self.analytical_fps)
        if self.damping < 0.0:
            raise ValueError(f"damping must be non-negative, got {self.damping}")
        if not self.methods:
            raise ValueError("At least one method is required")

    @property
    def analytical_sampling(self) -> SamplingConfig:
        return SamplingConfig(duration_s=self.sampling.duration_s, fps=self.analytical_fps)


@dataclass(frozen=True)
class HermiteControlNodes:
    """Four (key, value) nodes describing one editable Hermite segment.

    ``start`` and ``end`` are the segment endpoints; each handle sets the
    tangent at its endpoint through its slope.
    """

    start: tuple[float, float] = (0.0, -0.1)
    start_handle: tuple[float, float] = (0.2, 0.1)
    end_handle: tuple[float, float] = (0.8, -0.1)
    end: tuple[float, float] = (1.0, 0.1)
    num_samples: int = 100

    def __post_init__(self) -> None:
        if self.num_samples < 2:
            raise ValueError(f"num_samples must be at least 2, got {self.num_samples}")
