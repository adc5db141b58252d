"""Unit tests for Hermite segment analysis in key space."""

import math

import pytest

from interplab.experiments.config import HermiteControlNodes
from interplab.experiments.hermite import MAX_TANGENT, analyse_segment, handle_tangent
from interplab.numerics.root_finding import RootError
from interplab.splines.cubic_hermite import TurningPointType

HALF_SPREAD = math.sqrt(0.125)


class TestHandleTangent:
    """Tests for handle_tangent."""

    def test_slope(self):
        """Tangent is rise over run from endpoint to handle."""
        assert handle_tangent((0.0, 0.0), (0.5, 1.0)) == pytest.approx(2.0)

    def test_handle_behind_endpoint(self):
        """Handles on either side give the same slope convention."""
        assert handle_tangent((1.0, 0.1), (0.8, -0.1)) == pytest.approx(1.0)

    def test_vertical_handle(self):
        """A handle directly above its endpoint gives MAX_TANGENT."""
        assert handle_tangent((0.0, 0.0), (0.0, 1.0)) == MAX_TANGENT


class TestAnalyseSegment:
    """Tests for analyse_segment."""

    def test_default_nodes(self):
        """The default S-curve: two turning points, three crossings."""
        analysis = analyse_segment()

        assert analysis.values == (-0.1, 0.1)
        assert analysis.tangents == pytest.approx((1.0, 1.0))

        assert len(analysis.curve) == 100
        assert analysis.curve.times()[0] == 0.0
        assert analysis.curve.times()[-1] == pytest.approx(1.0)
        assert analysis.curve.series("value")[0] == pytest.approx(-0.1)
        assert analysis.curve.series("value")[-1] == pytest.approx(0.1)

        assert analysis.turning_error == RootError.NONE
        assert [p.type for p in analysis.turning_points] == [
            TurningPointType.MINIMUM,
            TurningPointType.MAXIMUM,
        ]

        assert analysis.crossing_error == RootError.NONE
        assert sorted(analysis.crossing_keys) == pytest.approx(
            [0.5 - HALF_SPREAD, 0.5, 0.5 + HALF_SPREAD], abs=1e-6
        )

    def test_keys_mapped_into_key_range(self):
        """Parametric results are scaled and offset by the endpoint keys."""
        nodes = HermiteControlNodes(
            start=(2.0, -0.1),
            start_handle=(2.4, 0.3),
            end_handle=(3.6, -0.3),
            end=(4.0, 0.1),
            num_samples=5,
        )
        analysis = analyse_segment(nodes)

        assert analysis.curve.times() == pytest.approx([2.0, 2.5, 3.0, 3.5, 4.0])
        assert sorted(analysis.crossing_keys) == pytest.approx(
            [3.0 - 2.0 * HALF_SPREAD, 3.0, 3.0 + 2.0 * HALF_SPREAD], abs=1e-6
        )
        for point in analysis.turning_points:
            assert 2.0 <= point.key <= 4.0

    def test_degenerate_key_range(self):
        """Coincident endpoint keys leave the curve unsampled."""
        nodes = HermiteControlNodes(start=(0.5, -1.0), end=(0.5, 1.0))
        analysis = analyse_segment(nodes)
        assert len(analysis.curve) == 0
        assert analysis.curve.names == ["value"]

    def test_flat_segment_reports_errors(self):
        """A constant segment has no turning points and a degenerate solve."""
        nodes = HermiteControlNodes(
            start=(0.0, 1.0), start_handle=(0.3, 1.0), end_handle=(0.7, 1.0), end=(1.0, 1.0)
        )
        analysis = analyse_segment(nodes)
        assert analysis.turning_points == []
        assert analysis.turning_error == RootError.ZERO_DIVISOR
        assert analysis.crossing_keys == []
        assert analysis.crossing_error != RootError.NONE
