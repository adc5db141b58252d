"""Hermite segment analysis driven by editable control nodes.

Control nodes live in (key, value) space. The segment's parameter t in
[0, 1] maps linearly onto the key range between the two endpoints, and
turning and crossing points are reported in key space.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from interplab.experiments.config import HermiteControlNodes
from interplab.experiments.trajectory import Trajectory
from interplab.numerics.root_finding import RootError
from interplab.splines.cubic_hermite import (
    TurningPoint,
    evaluate_segment,
    find_segment_crossing_points,
    find_segment_turning_points,
)

logger = logging.getLogger(__name__)

KEY_EPSILON = 1.0e-6
# Tangent used when a handle sits vertically above its endpoint.
MAX_TANGENT = 1.0 / KEY_EPSILON


def handle_tangent(endpoint: tuple[float, float], handle: tuple[float, float]) -> float:
    """Slope from an endpoint to its handle, MAX_TANGENT when vertical."""
    key_range = handle[0] - endpoint[0]
    if abs(key_range) > KEY_EPSILON:
        return (handle[1] - endpoint[1]) / key_range
    return MAX_TANGENT


@dataclass
class HermiteAnalysis:
    """Sampled curve and root analysis of one segment.

    Attributes:
        values: Endpoint values (p0, p1).
        tangents: Endpoint tangents (m0, m1).
        curve: Samples with key as the time axis and series 'value'.
            Empty when the key range is degenerate.
        turning_points: Turning points with keys in key space.
        turning_error: Error mask from the turning point search.
        crossing_keys: Keys where the curve crosses zero.
        crossing_error: Error mask from the crossing search.
    """

    values: tuple[float, float]
    tangents: tuple[float, float]
    curve: Trajectory
    turning_points: list[TurningPoint]
    turning_error: RootError
    crossing_keys: list[float]
    crossing_error: RootError


def analyse_segment(nodes: HermiteControlNodes | None = None) -> HermiteAnalysis:
    """Sample the segment described by ``nodes`` and locate its roots."""
    nodes = nodes or HermiteControlNodes()

    key0, key1 = nodes.start[0], nodes.end[0]
    values = (nodes.start[1], nodes.end[1])
    tangents = (
        handle_tangent(nodes.start, nodes.start_handle),
        handle_tangent(nodes.end, nodes.end_handle),
    )

    key_range = key1 - key0
    curve = Trajectory(["value"])
    if abs(key_range) > KEY_EPSILON:
        key_step = key_range / (nodes.num_samples - 1)
        for i in range(nodes.num_samples):
            key = key0 + i * key_step
            curve.add_sample(key, value=evaluate_segment(values, tangents, (key - key0) / key_range))
    else:
        logger.debug("degenerate key range %g, curve not sampled", key_range)

    turning_points, turning_error = find_segment_turning_points(values, tangents)
    for point in turning_points:
        point.key = key0 + key_range * point.key

    crossings, crossing_error = find_segment_crossing_points(values, tangents)
    crossing_keys = [key0 + key_range * t for t in crossings]

    return HermiteAnalysis(
        values=values,
        tangents=tangents,
        curve=curve,
        turning_points=turning_points,
        turning_error=turning_error,
        crossing_keys=crossing_keys,
        crossing_error=crossing_error,
    )
