"""Cubic Hermite segment evaluation and root analysis."""

from interplab.splines.cubic_hermite import (
    TurningPoint,
    TurningPointType,
    evaluate_segment,
    evaluate_segment_derivative,
    find_segment_crossing_points,
    find_segment_turning_points,
)

__all__ = [
    "TurningPoint",
    "TurningPointType",
    "evaluate_segment",
    "evaluate_segment_derivative",
    "find_segment_crossing_points",
    "find_segment_turning_points",
]
