"""Sliding-window statistics over the five most recent vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.ringbuffer import RingBuffer
from ..core.topology import ELECTRODE_COUNT, is_shield_dim, subvector
from ..core.vector import Vector

WINDOW_SIZE = 5

# Five-point stencil weights for slots 0..4 (newest first); the centre slot is unused.
STENCIL_WEIGHTS: Tuple[float, ...] = (-1.0, 8.0, 0.0, -8.0, 1.0)
STENCIL_DIVISOR = 12.0

Slot = Optional[float]

_NO_ELECTRODES: Tuple[float, ...] = (0.0,) * ELECTRODE_COUNT


def electrode_magnitudes(vector: Vector) -> Tuple[float, ...]:
    """Magnitude of each electrode's 7-pair subvector; zeros unless shield-sized."""
    if not is_shield_dim(vector.dim):
        return _NO_ELECTRODES
    values = vector.to_list()
    return tuple(Vector(subvector(values, e)).magnitude() for e in range(ELECTRODE_COUNT))


def _valid(magnitudes: Sequence[Slot]) -> Optional[np.ndarray]:
    valid = [m for m in magnitudes if m is not None]
    if not valid:
        return None
    return np.asarray(valid, dtype=np.float64)


def moving_average(magnitudes: Sequence[Slot]) -> float:
    """
    Mean over the valid (non-``None``) slots, 0 when there are none.

    Accumulated as offsets from the first valid slot, so a constant window
    averages to exactly that constant.
    """
    arr = _valid(magnitudes)
    if arr is None:
        return 0.0
    ref = arr[0]
    return float(ref + np.mean(arr - ref))


def moving_stdev(magnitudes: Sequence[Slot]) -> float:
    """Population standard deviation over the valid slots, 0 when there are none."""
    arr = _valid(magnitudes)
    if arr is None:
        return 0.0
    deviations = arr - moving_average(magnitudes)
    return float(np.sqrt(np.mean(np.square(deviations))))


def five_point_derivative(magnitudes: Sequence[Slot]) -> float:
    """
    Five-point stencil estimate of the first derivative per cycle.

    ``magnitudes`` are ordered newest first. All five slots must be valid,
    otherwise the estimate is 0.
    """
    if len(magnitudes) < WINDOW_SIZE:
        return 0.0
    slots = magnitudes[:WINDOW_SIZE]
    if any(m is None for m in slots):
        return 0.0
    total = sum(w * m for w, m in zip(STENCIL_WEIGHTS, slots) if w != 0.0)
    return total / STENCIL_DIVISOR


@dataclass(frozen=True)
class WindowSample:
    """One pushed vector with its magnitudes computed once at push time."""

    vector: Vector
    magnitude: float
    electrodes: Tuple[float, ...]


class SlidingWindow:
    """
    Ring of the last :data:`WINDOW_SIZE` vectors, exposed as newest-first slots.

    Slot 0 is the most recent push. Slots that have not been filled yet during
    warm-up read as ``None``.
    """

    def __init__(self) -> None:
        self._buffer: RingBuffer[WindowSample] = RingBuffer(WINDOW_SIZE)

    def push(self, vector: Vector) -> WindowSample:
        sample = WindowSample(vector, vector.magnitude(), electrode_magnitudes(vector))
        self._buffer.append(sample)
        return sample

    def clear(self) -> None:
        self._buffer.clear()

    @property
    def valid_count(self) -> int:
        return len(self._buffer)

    def is_full(self) -> bool:
        return self._buffer.is_full()

    def slots(self) -> List[Optional[Vector]]:
        """Return the window as ``WINDOW_SIZE`` newest-first vectors (``None`` for gaps)."""
        items: List[Optional[Vector]] = [s.vector for s in self._buffer.newest_first()]
        items.extend([None] * (WINDOW_SIZE - len(items)))
        return items

    def magnitudes(self, electrode: Optional[int] = None) -> List[Slot]:
        """Whole-vector or per-electrode magnitudes per slot."""
        if electrode is None:
            values: List[Slot] = [s.magnitude for s in self._buffer.newest_first()]
        else:
            values = [s.electrodes[electrode] for s in self._buffer.newest_first()]
        values.extend([None] * (WINDOW_SIZE - len(values)))
        return values

    def average(self, electrode: Optional[int] = None) -> float:
        return moving_average(self.magnitudes(electrode))

    def stdev(self, electrode: Optional[int] = None) -> float:
        return moving_stdev(self.magnitudes(electrode))

    def derivative(self, electrode: Optional[int] = None) -> float:
        return five_point_derivative(self.magnitudes(electrode))


__all__ = [
    "WINDOW_SIZE",
    "STENCIL_WEIGHTS",
    "SlidingWindow",
    "WindowSample",
    "electrode_magnitudes",
    "moving_average",
    "moving_stdev",
    "five_point_derivative",
]
