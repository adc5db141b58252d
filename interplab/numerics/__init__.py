"""Numerical methods: root finding and fixed-step ODE integration.

Pure Python implementations of:
- Root finding (Newton-Raphson, Secant, closed-form quadratic, cubic)
- ODE integration (Euler variants, midpoint, RK4, Velocity Verlet, Ruth4)
"""

from interplab.numerics.ode import (
    INTEGRATORS,
    OdeMethod,
    OdeState,
    explicit_euler,
    explicit_midpoint,
    explicit_rk4,
    ruth4,
    semi_implicit_euler,
    velocity_verlet,
)
from interplab.numerics.root_finding import (
    RootError,
    RootResult,
    cubic,
    newton_raphson,
    quadratic,
    secant,
)
from interplab.numerics.vector import StateVector

__all__ = [
    "INTEGRATORS",
    "OdeMethod",
    "OdeState",
    "RootError",
    "RootResult",
    "StateVector",
    "cubic",
    "explicit_euler",
    "explicit_midpoint",
    "explicit_rk4",
    "newton_raphson",
    "quadratic",
    "ruth4",
    "secant",
    "semi_implicit_euler",
    "velocity_verlet",
]
