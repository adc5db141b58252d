"""Root finding algorithms.

Provides iterative solvers (Newton-Raphson, Secant) and closed-form
polynomial solvers (quadratic, cubic via deflation). Solvers never raise
for numerical failures; they return a RootResult whose error mask says
what went wrong and whose values hold whatever estimate is usable.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntFlag

logger = logging.getLogger(__name__)

# Divisors smaller than this are treated as zero.
ZERO_DIVISOR_EPSILON = 1.0e-7


class RootError(IntFlag):
    """Additive error mask reported by the solvers."""

    NONE = 0
    ZERO_DIVISOR = 1 << 0
    MAX_ITERATIONS_REACHED = 1 << 1


@dataclass
class RootResult:
    """Fixed-capacity set of roots plus an error mask.

    Attributes:
        capacity: Maximum number of values this result can hold.
        values: Roots found, in the order the solver produced them.
        error: Bitwise-OR of every error encountered.
    """

    capacity: int
    values: list[float] = field(default_factory=list)
    error: RootError = RootError.NONE

    @property
    def is_valid(self) -> bool:
        """True when no error bit is set."""
        return self.error == RootError.NONE

    @property
    def count(self) -> int:
        return len(self.values)

    def add_value(self, value: float) -> None:
        """Append a root.

        Raises:
            ValueError: If the result is already at capacity.
        """
        if len(self.values) >= self.capacity:
            raise ValueError(f"RootResult capacity {self.capacity} exceeded")
        self.values.append(value)

    def add_error(self, error: RootError) -> None:
        self.error |= error


def newton_raphson(
    x: float,
    g: Callable[[float], float],
    dg: Callable[[float], float],
    tolerance: float,
    max_iterations: int,
) -> RootResult:
    """Find a root of g starting from x using Newton-Raphson iteration.

    Args:
        x: Initial guess.
        g: Function to find the root of.
        dg: Derivative of g.
        tolerance: Converged once the step size drops below this.
        max_iterations: Iteration budget.

    Returns:
        RootResult with capacity 1. ZERO_DIVISOR with no value when the
        derivative vanishes; MAX_ITERATIONS_REACHED with the last estimate
        when the budget runs out.
    """
    result = RootResult(capacity=1)
    y = x
    for _ in range(max_iterations):
        y_prev = y
        divisor = dg(y)
        if abs(divisor) < ZERO_DIVISOR_EPSILON:
            logger.debug("newton_raphson: derivative %.3e near zero at y=%r", divisor, y)
            result.add_error(RootError.ZERO_DIVISOR)
            return result

        y -= g(y) / divisor

        if abs(y - y_prev) < tolerance:
            result.add_value(y)
            return result

    logger.debug("newton_raphson: no convergence after %d iterations (y=%r)", max_iterations, y)
    result.add_value(y)
    result.add_error(RootError.MAX_ITERATIONS_REACHED)
    return result


def secant(
    x0: float,
    x1: float,
    g: Callable[[float], float],
    tolerance: float,
    max_iterations: int,
) -> RootResult:
    """Find a root of g using the secant method seeded with x0 and x1.

    Same contract as newton_raphson, with the derivative replaced by the
    divided difference of the two most recent estimates.
    """
    result = RootResult(capacity=1)
    y0 = x0
    y1 = x1
    y2 = (y0 + y1) * 0.5
    for _ in range(max_iterations):
        divisor = g(y1) - g(y0)
        if abs(divisor) < ZERO_DIVISOR_EPSILON:
            logger.debug("secant: divided difference %.3e near zero", divisor)
            result.add_error(RootError.ZERO_DIVISOR)
            return result

        y2 = y1 - g(y1) * (y1 - y0) / divisor
        if abs(y1 - y0) < tolerance:
            result.add_value(y2)
            return result

        y0 = y1
        y1 = y2

    logger.debug("secant: no convergence after %d iterations (y=%r)", max_iterations, y2)
    result.add_value(y2)
    result.add_error(RootError.MAX_ITERATIONS_REACHED)
    return result


def quadratic(a: float, b: float, c: float) -> RootResult:
    """Solve a*t^2 + b*t + c = 0 in closed form.

    A negative discriminant is a valid result with no values. A repeated
    root yields one value; otherwise two values, larger root first.
    """
    result = RootResult(capacity=2)
    if abs(a) < ZERO_DIVISOR_EPSILON:
        result.add_error(RootError.ZERO_DIVISOR)
        return result

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return result

    scale = 1.0 / (2.0 * a)
    if discriminant < ZERO_DIVISOR_EPSILON:
        result.add_value(-b * scale)
        return result

    discriminant_root = math.sqrt(discriminant)
    r0 = (-b + discriminant_root) * scale
    r1 = (-b - discriminant_root) * scale
    result.add_value(max(r0, r1))
    result.add_value(min(r0, r1))
    return result


def cubic(
    a: float,
    b: float,
    c: float,
    d: float,
    x: float,
    tolerance: float,
    max_iterations: int,
) -> RootResult:
    """Solve a*t^3 + b*t^2 + c*t + d = 0.

    One root is found by Newton-Raphson from ``x``; the cubic is then
    deflated by that root (factor theorem) and the remaining quadratic is
    solved in closed form. Error masks of both stages are merged.

    Args:
        a, b, c, d: Polynomial coefficients.
        x: Seed for the Newton-Raphson stage.
        tolerance: Newton-Raphson step tolerance.
        max_iterations: Newton-Raphson iteration budget.

    Returns:
        RootResult with capacity 3: the iterated root first, then up to
        two roots of the deflated quadratic.
    """
    result = RootResult(capacity=3)

    def g(t: float) -> float:
        return ((a * t + b) * t + c) * t + d

    def dg(t: float) -> float:
        return (3.0 * a * t + 2.0 * b) * t + c

    first = newton_raphson(x, g, dg, tolerance, max_iterations)
    result.add_error(first.error)
    if not first.values:
        return result

    root = first.values[0]
    result.add_value(root)

    # synthetic division by (t - root)
    af = a
    bf = a * root + b
    cf = bf * root + c

    remaining = quadratic(af, bf, cf)
    result.add_error(remaining.error)
    for value in remaining.values:
        result.add_value(value)
    return result
