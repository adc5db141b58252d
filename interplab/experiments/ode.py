"""Integrator comparison runs on the spring-mass systems.

Every selected method integrates a freshly reset system over the same
time grid; the closed-form solution is sampled on its own, finer grid.
Coupled-system series carry a ``_0`` / ``_1`` suffix per mass.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from interplab.experiments.config import OdeExperiment
from interplab.experiments.trajectory import Trajectory
from interplab.numerics.ode import OdeMethod
from interplab.systems.spring_mass import (
    CoupledSpringMassSystem,
    OdeSystem,
    SingleSpringMassSystem,
)

logger = logging.getLogger(__name__)


def _series_names(system: OdeSystem, name: str) -> list[str]:
    if system is OdeSystem.SINGLE_SPRING_MASS:
        return [name]
    return [f"{name}_0", f"{name}_1"]


def _make_system(system: OdeSystem, config: OdeExperiment):
    if system is OdeSystem.SINGLE_SPRING_MASS:
        return SingleSpringMassSystem(config.spring_constant, config.damping)
    return CoupledSpringMassSystem(config.spring_constant, config.damping)


def _positions(system_kind: OdeSystem, system) -> list[float]:
    if system_kind is OdeSystem.SINGLE_SPRING_MASS:
        return [system.position]
    return list(system.positions)


def _analytical(system_kind: OdeSystem, system, times: list[float]) -> list[list[float]]:
    if system_kind is OdeSystem.SINGLE_SPRING_MASS:
        return [system.solve_analytical(times)]
    return list(system.solve_analytical(times))


@dataclass
class OdeComparison:
    """Result of an integrator comparison run.

    Attributes:
        system: Which system was integrated.
        methods: Numerical positions, one series per method (and mass).
        analytical: Closed-form positions on the analytical grid.
    """

    system: OdeSystem
    config: OdeExperiment
    methods: Trajectory
    analytical: Trajectory

    def method_series(self, method: OdeMethod) -> list[list[float]]:
        """Position series of one method, one list per mass."""
        return [self.methods.series(name) for name in _series_names(self.system, method.value)]

    def max_error(self, method: OdeMethod) -> float:
        """Largest absolute deviation from the closed form on the method's grid.

        NaN when the closed form is undefined for the configured constants.
        """
        reference_system = _make_system(self.system, self.config)
        reference = _analytical(self.system, reference_system, self.methods.times())
        worst = 0.0
        for numeric, exact in zip(self.method_series(method), reference):
            for x, y in zip(numeric, exact):
                if math.isnan(y):
                    return math.nan
                worst = max(worst, abs(x - y))
        return worst


def run_ode_experiment(
    config: OdeExperiment | None = None,
    system: OdeSystem = OdeSystem.SINGLE_SPRING_MASS,
) -> OdeComparison:
    """Integrate ``system`` with every configured method.

    Args:
        config: Experiment parameters; defaults to OdeExperiment().
        system: Which spring-mass system to integrate.

    Returns:
        OdeComparison holding numerical and analytical trajectories.
    """
    config = config or OdeExperiment()

    analytical_sampling = config.analytical_sampling
    analytical_times = [i * analytical_sampling.delta_time for i in range(analytical_sampling.num_samples)]
    analytical_names = _series_names(system, "analytical")
    analytical = Trajectory(analytical_names)
    analytical_values = _analytical(system, _make_system(system, config), analytical_times)
    for i, t in enumerate(analytical_times):
        analytical.add_sample(t, **{name: series[i] for name, series in zip(analytical_names, analytical_values)})

    sampling = config.sampling
    dt = sampling.delta_time
    names_by_method = {method: _series_names(system, method.value) for method in config.methods}
    samples: dict[str, list[float]] = {}
    for method, names in names_by_method.items():
        state = _make_system(system, config)
        integrate = method.integrator
        series = [[] for _ in names]
        for _ in range(sampling.num_samples):
            for values, position in zip(series, _positions(system, state)):
                values.append(position)
            integrate(state, dt)
        samples.update(zip(names, series))

    methods = Trajectory(samples)
    for i in range(sampling.num_samples):
        methods.add_sample(i * dt, **{name: values[i] for name, values in samples.items()})

    logger.info(
        "ode experiment: %s, %d methods, %d samples (k=%g, c=%g)",
        system.value, len(config.methods), sampling.num_samples, config.spring_constant, config.damping,
    )
    return OdeComparison(system=system, config=config, methods=methods, analytical=analytical)
