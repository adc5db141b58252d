"""Tests for matplotlib rendering of experiment results.

Plots are written to test_output/ for visual inspection.
"""

from matplotlib.figure import Figure

from interplab.experiments.config import DynamicsExperiment, OdeExperiment, SamplingConfig
from interplab.experiments.hermite import analyse_segment
from interplab.experiments.interpolation import run_decay_experiment, run_dynamics_experiment
from interplab.experiments.ode import run_ode_experiment
from interplab.experiments.plotting import (
    plot_hermite_analysis,
    plot_ode_comparison,
    plot_trajectory,
)
from interplab.numerics.ode import OdeMethod
from interplab.systems.spring_mass import OdeSystem


class TestPlotting:
    """Figures are built and saved for each experiment kind."""

    def test_plot_decay_trajectory(self, test_output_dir):
        """All decay series on one axes, saved as PNG."""
        path = test_output_dir / "decay.png"
        fig = plot_trajectory(run_decay_experiment(), path)
        assert isinstance(fig, Figure)
        assert len(fig.axes[0].lines) == 4
        assert path.exists()

    def test_plot_subset_without_saving(self):
        """names selects series; no path means nothing written."""
        trajectory = run_dynamics_experiment(DynamicsExperiment(damping=0.3))
        fig = plot_trajectory(trajectory, names=["target", "value"], title="dynamics")
        ax = fig.axes[0]
        assert [line.get_label() for line in ax.lines] == ["target", "value"]
        assert ax.get_title() == "dynamics"

    def test_plot_ode_comparison(self, test_output_dir):
        """Analytical reference plus one line per method and mass."""
        config = OdeExperiment(
            sampling=SamplingConfig(duration_s=20.0),
            methods=(OdeMethod.EXPLICIT_EULER, OdeMethod.EXPLICIT_RK4),
        )
        comparison = run_ode_experiment(config, OdeSystem.COUPLED_SPRING_MASS)
        path = test_output_dir / "ode_coupled.png"
        fig = plot_ode_comparison(comparison, path)
        assert len(fig.axes[0].lines) == 2 + 4
        assert path.exists()

    def test_plot_hermite_analysis(self, test_output_dir):
        """Segment curve with turning and crossing markers."""
        path = test_output_dir / "hermite.png"
        fig = plot_hermite_analysis(analyse_segment(), path)
        # curve, two turning markers, crossing markers
        assert len(fig.axes[0].lines) >= 4
        assert path.exists()
