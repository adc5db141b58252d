"""Sample generation for the numeric core.

Runs the filters, integrators and Hermite analysis over configurable
parameter sets and returns Trajectory objects ready to plot or export.
"""

from interplab.experiments.config import (
    DecayExperiment,
    DynamicsExperiment,
    HermiteControlNodes,
    OdeExperiment,
    SamplingConfig,
    SmoothValueExperiment,
)
from interplab.experiments.hermite import HermiteAnalysis, analyse_segment, handle_tangent
from interplab.experiments.interpolation import (
    make_velocity_clamp,
    run_decay_experiment,
    run_dynamics_experiment,
    run_smooth_value_experiment,
)
from interplab.experiments.ode import OdeComparison, run_ode_experiment
from interplab.experiments.plotting import (
    plot_hermite_analysis,
    plot_ode_comparison,
    plot_trajectory,
)
from interplab.experiments.realtime import RealtimeSampler
from interplab.experiments.trajectory import Trajectory

__all__ = [
    "DecayExperiment",
    "DynamicsExperiment",
    "HermiteAnalysis",
    "HermiteControlNodes",
    "OdeComparison",
    "OdeExperiment",
    "RealtimeSampler",
    "SamplingConfig",
    "SmoothValueExperiment",
    "Trajectory",
    "analyse_segment",
    "handle_tangent",
    "make_velocity_clamp",
    "plot_hermite_analysis",
    "plot_ode_comparison",
    "plot_trajectory",
    "run_decay_experiment",
    "run_dynamics_experiment",
    "run_ode_experiment",
    "run_smooth_value_experiment",
]
