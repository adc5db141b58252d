"""Unit tests for the filter step-response experiments."""

import pytest

from interplab.experiments.config import (
    DecayExperiment,
    DynamicsExperiment,
    SamplingConfig,
    SmoothValueExperiment,
)
from interplab.experiments.interpolation import (
    make_velocity_clamp,
    run_decay_experiment,
    run_dynamics_experiment,
    run_smooth_value_experiment,
)


class TestDecayExperiment:
    """Tests for run_decay_experiment."""

    def test_series_and_length(self):
        """One sample per tick, target and three decays."""
        trajectory = run_decay_experiment()
        assert trajectory.names == ["target", "fixed", "independent", "normalised"]
        assert len(trajectory) == 601

    def test_first_sample_is_start_value(self):
        """Sampling happens before the first update."""
        trajectory = run_decay_experiment(DecayExperiment(start_value=3.0, target=1.0))
        assert trajectory.times()[0] == 0.0
        for name in ("fixed", "independent", "normalised"):
            assert trajectory.series(name)[0] == 3.0

    def test_fixed_decay_is_geometric(self):
        """Sample n of the fixed decay is factor ** n."""
        trajectory = run_decay_experiment(DecayExperiment(decay_factor=0.5))
        assert trajectory.series("fixed")[5] == pytest.approx(0.5**5)

    def test_independent_leaves_scale_after_one_second(self):
        """At t = 1 s the independent gap is scale_per_second."""
        trajectory = run_decay_experiment(DecayExperiment(scale_per_second=0.2))
        assert trajectory.times()[60] == pytest.approx(1.0)
        assert trajectory.series("independent")[60] == pytest.approx(0.2)

    def test_frequency_overrides_scale(self):
        """frequency=4 means a scale of 0.25 per second."""
        trajectory = run_decay_experiment(DecayExperiment(frequency=4.0))
        assert trajectory.series("independent")[60] == pytest.approx(0.25)

    def test_normalised_with_unit_damping_matches_default_scale(self):
        """Normalised decay at damping 1 uses the 0.01 base scale."""
        trajectory = run_decay_experiment(DecayExperiment(scale_per_second=0.01, damping=1.0))
        assert trajectory.series("normalised") == pytest.approx(trajectory.series("independent"))

    def test_rate_independence_across_fps(self):
        """Independent decay at t = 1 s is the same at 30 and 120 fps."""
        slow = run_decay_experiment(DecayExperiment(sampling=SamplingConfig(1.0, 30.0)))
        fast = run_decay_experiment(DecayExperiment(sampling=SamplingConfig(1.0, 120.0)))
        assert slow.final("independent") == pytest.approx(fast.final("independent"))
        assert slow.final("fixed") != pytest.approx(fast.final("fixed"))


class TestSmoothValueExperiment:
    """Tests for run_smooth_value_experiment."""

    def test_rises_toward_target(self):
        """Value rises monotonically from rest without passing the target."""
        trajectory = run_smooth_value_experiment(SmoothValueExperiment(smooth_time=0.2))
        values = trajectory.series("value")
        assert values[0] == 0.0
        assert trajectory.series("velocity")[0] == 0.0
        assert all(b >= a for a, b in zip(values, values[1:]))
        assert values[-1] <= 1.0
        assert values[-1] == pytest.approx(1.0, abs=0.01)


class TestDynamicsExperiment:
    """Tests for run_dynamics_experiment."""

    def test_step_response_converges(self):
        """Default critically damped response reaches the target."""
        trajectory = run_dynamics_experiment()
        assert trajectory.series("value")[0] == 0.0
        assert trajectory.final("value") == pytest.approx(1.0, abs=1e-3)

    def test_max_speed_clamps_velocity(self):
        """Recorded velocity never exceeds max_speed."""
        trajectory = run_dynamics_experiment(DynamicsExperiment(frequency=3.0, max_speed=0.2))
        assert max(abs(v) for v in trajectory.series("velocity")) <= 0.2

    def test_make_velocity_clamp(self):
        """The clamp hook limits both directions."""
        clamp = make_velocity_clamp(1.5)
        assert clamp(3.0) == 1.5
        assert clamp(-3.0) == -1.5
        assert clamp(0.5) == 0.5
