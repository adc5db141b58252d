"""Unit tests for StateVector."""

import pytest

from interplab.numerics.vector import StateVector


class TestStateVector:
    """Tests for StateVector arithmetic."""

    def test_addition_and_subtraction(self):
        """Elementwise + and -."""
        a = StateVector([1.0, 2.0])
        b = StateVector([0.5, -1.0])
        assert a + b == StateVector([1.5, 1.0])
        assert a - b == StateVector([0.5, 3.0])

    def test_scalar_multiplication_both_sides(self):
        """v * s and s * v give the same result."""
        v = StateVector([1.0, -2.0])
        assert v * 2.0 == StateVector([2.0, -4.0])
        assert 2.0 * v == StateVector([2.0, -4.0])

    def test_division_and_negation(self):
        """Scalar division and unary minus."""
        v = StateVector([2.0, 4.0])
        assert v / 2.0 == StateVector([1.0, 2.0])
        assert -v == StateVector([-2.0, -4.0])

    def test_size_mismatch_raises(self):
        """Vectors of different lengths cannot be combined."""
        with pytest.raises(ValueError, match="size mismatch"):
            StateVector([1.0]) + StateVector([1.0, 2.0])

    def test_adding_float_is_unsupported(self):
        """Only vector + vector is defined."""
        with pytest.raises(TypeError):
            StateVector([1.0]) + 1.0

    def test_sequence_behaviour(self):
        """Indexing, iteration and len."""
        v = StateVector([3.0, 4.0, 5.0])
        assert v[1] == 4.0
        assert list(v) == [3.0, 4.0, 5.0]
        assert len(v) == 3

    def test_zeros_and_components_are_floats(self):
        """zeros() builds an all-zero vector; ints are coerced to float."""
        assert StateVector.zeros(3) == StateVector([0.0, 0.0, 0.0])
        assert all(isinstance(c, float) for c in StateVector([1, 2]))

    def test_hashable_and_repr(self):
        """Equal vectors hash equally; repr lists the components."""
        assert hash(StateVector([1.0, 2.0])) == hash(StateVector([1.0, 2.0]))
        assert repr(StateVector([1.0, 2.0])) == "StateVector(1.0, 2.0)"

    def test_immutable(self):
        """Components cannot be reassigned."""
        v = StateVector([1.0])
        with pytest.raises(TypeError):
            v[0] = 2.0
