"""Fixed-step integrators for N-th order ordinary differential equations.

A simulated system exposes its state as a sequence of derivative levels
(position, velocity, ... up to order N) and a function returning the N-th
derivative for any such sequence. Integrators are stateless free functions
that read the derivatives, advance them by one step and write them back.

Available methods:
- explicit_euler: first order, fully explicit
- semi_implicit_euler: first order, symplectic
- explicit_midpoint: second order Runge-Kutta
- explicit_rk4: classic fourth order Runge-Kutta
- velocity_verlet: second order symplectic (second-order systems only)
- ruth4: fourth order symplectic (second-order systems only)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

_TWO_TO_THIRD = 2.0 ** (1.0 / 3.0)
_RUTH_RATIO = 1.0 / (2.0 - _TWO_TO_THIRD)
RUTH4_POSITION_COEFFICIENTS = (
    0.5 * _RUTH_RATIO,
    0.5 * (1.0 - _TWO_TO_THIRD) * _RUTH_RATIO,
    0.5 * (1.0 - _TWO_TO_THIRD) * _RUTH_RATIO,
    0.5 * _RUTH_RATIO,
)
RUTH4_VELOCITY_COEFFICIENTS = (0.0, _RUTH_RATIO, -_TWO_TO_THIRD * _RUTH_RATIO, _RUTH_RATIO)


@runtime_checkable
class OdeState(Protocol[T]):
    """Capability contract for a system that can be integrated.

    Index ``i`` of the derivative sequence holds the i-th derivative of the
    state. The highest derivative (index N) is never stored; it is computed
    on demand from the lower levels.
    """

    def get_derivatives(self) -> list[T]:
        """Return a fresh list of the current derivatives, index 0..N-1."""
        ...

    def get_nth_derivative(self, derivatives: Sequence[T]) -> T:
        """Return the N-th derivative for the given derivative levels.

        Must depend only on ``derivatives`` (and the system's constants),
        not on the committed state, since integrators evaluate it at trial
        points.
        """
        ...

    def set_derivatives(self, derivatives: Sequence[T]) -> None:
        """Commit the derivatives produced by a step."""
        ...


def _require_second_order(derivatives: Sequence[Any], method: str) -> None:
    if len(derivatives) != 2:
        raise ValueError(f"{method} requires a second-order state, got order {len(derivatives)}")


def _rates(state: OdeState, derivatives: Sequence[T]) -> list[T]:
    """Time derivative of each level: the next level up, then the N-th derivative."""
    return [*derivatives[1:], state.get_nth_derivative(derivatives)]


def explicit_euler(state: OdeState, step_size: float) -> None:
    """Advance every level by its current rate.

    Args:
        state: System to advance in place.
        step_size: Time step.
    """
    derivatives = state.get_derivatives()
    rates = _rates(state, derivatives)
    state.set_derivatives([d + r * step_size for d, r in zip(derivatives, rates)])


def semi_implicit_euler(state: OdeState, step_size: float) -> None:
    """Update the highest level first and propagate the new values downward."""
    derivatives = state.get_derivatives()
    n = len(derivatives)
    derivatives[n - 1] = derivatives[n - 1] + state.get_nth_derivative(derivatives) * step_size
    for i in range(n - 2, -1, -1):
        derivatives[i] = derivatives[i] + derivatives[i + 1] * step_size
    state.set_derivatives(derivatives)


def explicit_midpoint(state: OdeState, step_size: float) -> None:
    """Second order Runge-Kutta step using the rates at the half step.

    Args:
        state: System to advance in place.
        step_size: Time step.
    """
    derivatives = state.get_derivatives()
    half_step = 0.5 * step_size

    k1 = _rates(state, derivatives)
    midpoint = [d + k * half_step for d, k in zip(derivatives, k1)]
    k2 = _rates(state, midpoint)

    state.set_derivatives([d + k * step_size for d, k in zip(derivatives, k2)])


def explicit_rk4(state: OdeState, step_size: float) -> None:
    """Classic fourth order Runge-Kutta step.

    The four rate evaluations are weighted 1, 2, 2, 1.

    Args:
        state: System to advance in place.
        step_size: Time step.
    """
    derivatives = state.get_derivatives()
    half_step = 0.5 * step_size

    k1 = _rates(state, derivatives)
    k2 = _rates(state, [d + k * half_step for d, k in zip(derivatives, k1)])
    k3 = _rates(state, [d + k * half_step for d, k in zip(derivatives, k2)])
    k4 = _rates(state, [d + k * step_size for d, k in zip(derivatives, k3)])

    sixth_step = step_size / 6.0
    state.set_derivatives([
        d + (a + b * 2.0 + c * 2.0 + e) * sixth_step
        for d, a, b, c, e in zip(derivatives, k1, k2, k3, k4)
    ])


def velocity_verlet(state: OdeState, step_size: float) -> None:
    """Velocity Verlet step for a position and velocity state.

    Args:
        state: Second-order system to advance in place.
        step_size: Time step.

    Raises:
        ValueError: If the state is not second order.
    """
    derivatives = state.get_derivatives()
    _require_second_order(derivatives, "velocity_verlet")
    position, velocity = derivatives

    a0 = state.get_nth_derivative(derivatives)
    position = position + velocity * step_size + a0 * (step_size * step_size * 0.5)

    a1 = state.get_nth_derivative([position, velocity])
    velocity = velocity + (a0 + a1) * (step_size * 0.5)

    state.set_derivatives([position, velocity])


def ruth4(state: OdeState, step_size: float) -> None:
    """Fourth order symplectic step (Forest-Ruth coefficients)."""
    derivatives = state.get_derivatives()
    _require_second_order(derivatives, "ruth4")
    position, velocity = derivatives
    c = RUTH4_POSITION_COEFFICIENTS
    d = RUTH4_VELOCITY_COEFFICIENTS

    position = position + velocity * (c[0] * step_size)
    for i in range(1, 4):
        acceleration = state.get_nth_derivative([position, velocity])
        velocity = velocity + acceleration * (d[i] * step_size)
        position = position + velocity * (c[i] * step_size)

    state.set_derivatives([position, velocity])


class OdeMethod(Enum):
    """Integration schemes selectable by name."""

    EXPLICIT_EULER = "explicit_euler"
    EXPLICIT_MIDPOINT = "explicit_midpoint"
    EXPLICIT_RK4 = "explicit_rk4"
    SEMI_IMPLICIT_EULER = "semi_implicit_euler"
    VELOCITY_VERLET = "velocity_verlet"
    RUTH4 = "ruth4"

    @property
    def label(self) -> str:
        return _METHOD_LABELS[self]

    @property
    def integrator(self) -> Callable[[OdeState, float], None]:
        return INTEGRATORS[self]


_METHOD_LABELS = {
    OdeMethod.EXPLICIT_EULER: "Explicit Euler",
    OdeMethod.EXPLICIT_MIDPOINT: "Explicit Midpoint",
    OdeMethod.EXPLICIT_RK4: "Explicit RK4",
    OdeMethod.SEMI_IMPLICIT_EULER: "Semi-Implicit Euler",
    OdeMethod.VELOCITY_VERLET: "Velocity Verlet",
    OdeMethod.RUTH4: "Ruth 4",
}

INTEGRATORS: dict[OdeMethod, Callable[[OdeState, float], None]] = {
    OdeMethod.EXPLICIT_EULER: explicit_euler,
    OdeMethod.EXPLICIT_MIDPOINT: explicit_midpoint,
    OdeMethod.EXPLICIT_RK4: explicit_rk4,
    OdeMethod.SEMI_IMPLICIT_EULER: semi_implicit_euler,
    OdeMethod.VELOCITY_VERLET: velocity_verlet,
    OdeMethod.RUTH4: ruth4,
}
