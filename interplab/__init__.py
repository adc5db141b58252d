"""interplab: numerical core of an interpolation and numerical-methods testbed.

Smoothing filters, root finding, fixed-step ODE integrators and cubic
Hermite segment analysis, plus experiment runners that turn them into
plottable trajectories.
"""

import logging

from interplab.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_file_logging,
    enable_json_logging,
    enable_timed_file_logging,
    set_level,
    set_module_level,
    trace_solvers,
)

# Silent unless the application attaches a handler
logging.getLogger("interplab").addHandler(logging.NullHandler())

from interplab.interpolation import (
    FixedExponentialDecay,
    IndependentExponentialDecay,
    NormalisedExponentialDecay,
    SecondOrderDynamics,
    SmoothValue,
)
from interplab.numerics import (
    INTEGRATORS,
    OdeMethod,
    OdeState,
    RootError,
    RootResult,
    StateVector,
    cubic,
    newton_raphson,
    quadratic,
    secant,
)
from interplab.splines import (
    TurningPoint,
    TurningPointType,
    evaluate_segment,
    evaluate_segment_derivative,
    find_segment_crossing_points,
    find_segment_turning_points,
)
from interplab.systems import CoupledSpringMassSystem, OdeSystem, SingleSpringMassSystem

__version__ = "0.1.0"

__all__ = [
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "enable_timed_file_logging",
    "set_level",
    "set_module_level",
    "trace_solvers",
    # Filters
    "FixedExponentialDecay",
    "IndependentExponentialDecay",
    "NormalisedExponentialDecay",
    "SecondOrderDynamics",
    "SmoothValue",
    # Numerics
    "INTEGRATORS",
    "OdeMethod",
    "OdeState",
    "RootError",
    "RootResult",
    "StateVector",
    "cubic",
    "newton_raphson",
    "quadratic",
    "secant",
    # Splines
    "TurningPoint",
    "TurningPointType",
    "evaluate_segment",
    "evaluate_segment_derivative",
    "find_segment_crossing_points",
    "find_segment_turning_points",
    # Systems
    "CoupledSpringMassSystem",
    "OdeSystem",
    "SingleSpringMassSystem",
]
