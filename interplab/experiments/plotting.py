"""Matplotlib rendering of experiment results.

Figures are built with the object-oriented API (no pyplot state), so they
render headless and can be embedded by any GUI backend.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from matplotlib.figure import Figure

from interplab.experiments.hermite import HermiteAnalysis
from interplab.experiments.ode import OdeComparison
from interplab.experiments.trajectory import Trajectory

logger = logging.getLogger(__name__)

DEFAULT_FIGSIZE = (10, 5)
DEFAULT_DPI = 150


def _save(fig: Figure, path: str | Path | None) -> None:
    if path is None:
        return
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=DEFAULT_DPI)
    logger.info("saved plot to %s", path)


def plot_trajectory(
    trajectory: Trajectory,
    path: str | Path | None = None,
    title: str = "[Target / Value] vs [Time]",
    names: Iterable[str] | None = None,
) -> Figure:
    """Plot each series (or just ``names``) against time.

    Args:
        trajectory: Samples to plot.
        path: When given, the figure is also saved there as an image.
        title: Axes title.
        names: Subset of series to draw; all series by default.

    Returns:
        The matplotlib Figure.
    """
    fig = Figure(figsize=DEFAULT_FIGSIZE)
    ax = fig.add_subplot()
    times = trajectory.times()
    for name in names or trajectory.names:
        ax.plot(times, trajectory.series(name), label=name)
    ax.set_title(title)
    ax.set_xlabel("time (s)")
    ax.set_ylabel("value")
    ax.grid(True)
    ax.legend(loc="best")
    fig.tight_layout()
    _save(fig, path)
    return fig


def plot_ode_comparison(comparison: OdeComparison, path: str | Path | None = None) -> Figure:
    """Overlay every integrated method on the closed-form solution."""
    fig = Figure(figsize=DEFAULT_FIGSIZE)
    ax = fig.add_subplot()

    analytical = comparison.analytical
    for name in analytical.names:
        ax.plot(analytical.times(), analytical.series(name), color="navy", linewidth=2, label=name)

    method_times = comparison.methods.times()
    for name in comparison.methods.names:
        ax.plot(method_times, comparison.methods.series(name), linewidth=1, label=name)

    ax.set_title(f"Position vs time: {comparison.system.value}")
    ax.set_xlabel("time (s)")
    ax.set_ylabel("position")
    ax.grid(True)
    ax.legend(loc="lower center", ncol=3, fontsize="small")
    fig.tight_layout()
    _save(fig, path)
    return fig


def plot_hermite_analysis(analysis: HermiteAnalysis, path: str | Path | None = None) -> Figure:
    """Plot the sampled segment with its turning and crossing points marked."""
    fig = Figure(figsize=DEFAULT_FIGSIZE)
    ax = fig.add_subplot()

    ax.plot(analysis.curve.times(), analysis.curve.series("value"), label="segment")
    for point in analysis.turning_points:
        ax.annotate(point.type.value, (point.key, point.value), textcoords="offset points", xytext=(0, 10))
        ax.plot([point.key], [point.value], "o", color="orange")
    if analysis.crossing_keys:
        ax.plot(analysis.crossing_keys, [0.0] * len(analysis.crossing_keys), "x", color="red", label="crossings")

    ax.axhline(0.0, color="grey", linewidth=0.5)
    ax.set_title("Cubic Hermite segment")
    ax.set_xlabel("key")
    ax.set_ylabel("value")
    ax.grid(True)
    ax.legend(loc="best")
    fig.tight_layout()
    _save(fig, path)
    return fig
