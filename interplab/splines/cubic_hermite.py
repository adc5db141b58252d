"""Analysis of a single cubic Hermite segment.

A segment is described by endpoint values ``p = (p0, p1)`` and endpoint
tangents ``m = (m0, m1)`` at parameters 0 and 1. In power form the segment is

    f(t) = a t^3 + b t^2 + c t + d

with a = 2p0 + m0 - 2p1 + m1, b = -3p0 + 3p1 - 2m0 - m1, c = m0, d = p0.
Turning points are the roots of f' (a quadratic); crossing points are the
roots of f (a cubic). Only roots in [0, 1] are reported.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from interplab.numerics.root_finding import RootError, RootResult, cubic, quadratic

logger = logging.getLogger(__name__)

# Second derivatives within this of zero classify as inflections.
TURNING_TOLERANCE = 1.0e-7

CROSSING_SEEDS = (0.5, 0.0, 1.0)
CROSSING_TOLERANCE = 1.0e-3
CROSSING_MAX_ITERATIONS = 100


class TurningPointType(Enum):
    """Classification of a turning point by the sign of f''."""

    MAXIMUM = "maximum"
    MINIMUM = "minimum"
    INFLECTION = "inflection"


@dataclass
class TurningPoint:
    """A point where the segment's derivative is zero.

    Attributes:
        key: Location of the point. Parametric ``t`` as returned by
            find_segment_turning_points; callers may remap it.
        value: Segment value at the point.
        type: Maximum, minimum or inflection.
    """

    key: float
    value: float
    type: TurningPointType


def _coefficients(p: Sequence[float], m: Sequence[float]) -> tuple[float, float, float, float]:
    a = 2.0 * p[0] + m[0] - 2.0 * p[1] + m[1]
    b = -3.0 * p[0] + 3.0 * p[1] - 2.0 * m[0] - m[1]
    return a, b, m[0], p[0]


def evaluate_segment(p: Sequence[float], m: Sequence[float], t: float) -> float:
    """Evaluate the segment at ``t``. Values outside [0, 1] extrapolate."""
    t2 = t * t
    t3 = t2 * t
    return (
        p[0] * (2.0 * t3 - 3.0 * t2 + 1.0)
        + m[0] * (t3 - 2.0 * t2 + t)
        + p[1] * (-2.0 * t3 + 3.0 * t2)
        + m[1] * (t3 - t2)
    )


def evaluate_segment_derivative(p: Sequence[float], m: Sequence[float], t: float) -> float:
    """Evaluate df/dt of the segment at ``t``."""
    t2 = t * t
    return (
        p[0] * (6.0 * t2 - 6.0 * t)
        + m[0] * (3.0 * t2 - 4.0 * t + 1.0)
        + p[1] * (-6.0 * t2 + 6.0 * t)
        + m[1] * (3.0 * t2 - 2.0 * t)
    )


def find_segment_turning_points(
    p: Sequence[float], m: Sequence[float]
) -> tuple[list[TurningPoint], RootError]:
    """Locate and classify the turning points of the segment in [0, 1].

    Returns:
        Tuple of (turning_points, error_mask). The error mask is the
        quadratic solver's, unchanged; a degenerate (non-quadratic)
        derivative reports ZERO_DIVISOR and no points.
    """
    a, b, _, _ = _coefficients(p, m)
    # f'(t) = qa t^2 + qb t + qc
    qa = 3.0 * a
    qb = 2.0 * b
    qc = m[0]

    roots = quadratic(qa, qb, qc)

    turning_points = []
    for root in roots.values:
        if not 0.0 <= root <= 1.0:
            continue
        second_derivative = 2.0 * qa * root + qb
        if second_derivative < -TURNING_TOLERANCE:
            kind = TurningPointType.MAXIMUM
        elif second_derivative > TURNING_TOLERANCE:
            kind = TurningPointType.MINIMUM
        else:
            kind = TurningPointType.INFLECTION
        turning_points.append(TurningPoint(root, evaluate_segment(p, m, root), kind))

    return turning_points, roots.error


def find_segment_crossing_points(
    p: Sequence[float], m: Sequence[float]
) -> tuple[list[float], RootError]:
    """Locate parameters in [0, 1] where the segment crosses zero.

    The cubic solver is retried from each seed in CROSSING_SEEDS until one
    attempt returns an error-free result; the last attempt is used if none
    does.

    Returns:
        Tuple of (crossing_parameters, error_mask) for the attempt used.
    """
    a, b, c, d = _coefficients(p, m)

    roots: RootResult | None = None
    for seed in CROSSING_SEEDS:
        roots = cubic(a, b, c, d, seed, CROSSING_TOLERANCE, CROSSING_MAX_ITERATIONS)
        if roots.is_valid:
            break
        logger.debug("crossing search from seed %.1f failed: %r", seed, roots.error)

    crossings = [root for root in roots.values if 0.0 <= root <= 1.0]
    return crossings, roots.error
