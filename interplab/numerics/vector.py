"""Fixed-length numeric vector used as a state value.

Integrators and filters only need scalar multiplication and elementwise
addition from their value type. Floats already provide that; StateVector
provides it for multi-component states such as the positions of a coupled
spring chain.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload


class StateVector:
    """Immutable vector of floats supporting the arithmetic integrators need.

    Args:
        components: The vector components.

    Example:
        >>> StateVector([1.0, 2.0]) * 2.0 + StateVector([0.5, 0.5])
        StateVector(2.5, 4.5)
    """

    __slots__ = ("_data",)

    def __init__(self, components: Iterable[float]) -> None:
        self._data = tuple(float(c) for c in components)

    @classmethod
    def zeros(cls, size: int) -> StateVector:
        """Vector of ``size`` zero components."""
        return cls([0.0] * size)

    def _check_size(self, other: StateVector) -> None:
        if len(other._data) != len(self._data):
            raise ValueError(
                f"StateVector size mismatch: {len(self._data)} != {len(other._data)}"
            )

    def __add__(self, other: StateVector) -> StateVector:
        if not isinstance(other, StateVector):
            return NotImplemented
        self._check_size(other)
        return StateVector(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: StateVector) -> StateVector:
        if not isinstance(other, StateVector):
            return NotImplemented
        self._check_size(other)
        return StateVector(a - b for a, b in zip(self._data, other._data))

    def __neg__(self) -> StateVector:
        return StateVector(-a for a in self._data)

    def __mul__(self, scalar: float) -> StateVector:
        if isinstance(scalar, StateVector):
            return NotImplemented
        return StateVector(a * scalar for a in self._data)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> StateVector:
        if isinstance(scalar, StateVector):
            return NotImplemented
        return StateVector(a / scalar for a in self._data)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[float, ...]: ...

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateVector):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"StateVector({', '.join(repr(c) for c in self._data)})"
