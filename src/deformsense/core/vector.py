"""Immutable deformation vectors and their calculus.

A :class:`Vector` wraps a read-only 1-D ``float64`` array. Magnitude is the
Euclidean norm; direction is the unit vector (all zeros for a zero vector, so
a sensor at rest never raises); the dot product compares *directions*, which
makes it an angular similarity bounded to ``[-1, 1]``.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import ArrayLike

Number = Union[float, np.floating]


def _to_1d_array(values: ArrayLike) -> np.ndarray:
    """Convert input to a read-only 1D float64 numpy array."""
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"vector must be 1-D, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


class Vector:
    """Fixed-dimension numeric vector."""

    __slots__ = ("_values",)

    def __init__(self, values: ArrayLike) -> None:
        self._values = _to_1d_array(values)

    @classmethod
    def from_raw(cls, raw: Sequence[int]) -> "Vector":
        """
        Scale and invert a raw frame into a deformation vector.

        Each raw byte ``r`` becomes ``(255 - r) / 255`` so larger components
        mean more deformation.
        """
        arr = np.asarray(raw, dtype=np.float64).reshape(-1)
        return cls((255.0 - arr) / 255.0)

    @property
    def dim(self) -> int:
        return int(self._values.shape[0])

    def component(self, index: int) -> float:
        return float(self._values[index])

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the components."""
        return self._values.copy()

    def to_list(self) -> list[float]:
        return self._values.tolist()

    def magnitude(self) -> float:
        if self._values.size == 0:
            return 0.0
        return float(np.sqrt(np.dot(self._values, self._values)))

    def direction(self) -> np.ndarray:
        """
        Return the unit direction as a new array.

        A zero vector has no direction; zeros are returned instead.
        """
        mag = self.magnitude()
        if mag == 0.0:
            return np.zeros_like(self._values)
        return self._values / mag

    def dot(self, other: "Vector | ArrayLike") -> float:
        """
        Dot product of the two unit directions.

        Vectors of different dimension are not comparable and score 0.
        """
        if not isinstance(other, Vector):
            other = Vector(other)
        if other.dim != self.dim:
            return 0.0
        return float(np.dot(self.direction(), other.direction()))

    def __len__(self) -> int:
        return self.dim

    def __iter__(self):
        return iter(self._values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        return hash(self._values.tobytes())

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"


def magnitude(values: ArrayLike) -> Number:
    """Euclidean norm of a plain sequence."""
    return Vector(values).magnitude()


def direction(values: ArrayLike) -> np.ndarray:
    """Unit direction of a plain sequence (zeros for a zero vector)."""
    return Vector(values).direction()


def dot(one: ArrayLike, other: ArrayLike) -> Number:
    """Directional dot product of two plain sequences (0 on dimension mismatch)."""
    return Vector(one).dot(Vector(other))


EMPTY_VECTOR = Vector(())

__all__ = ["Vector", "EMPTY_VECTOR", "magnitude", "direction", "dot"]
