"""
Signal engine for the multi-electrode deformation sensor.

One :class:`SignalEngine` per physical sensor. The host drives it once per
cycle with :meth:`SignalEngine.tick`, handing over whatever bytes the
transport had available; every other method is a read of the state left by
the most recent tick (plus the explicit form-recording calls).

Per tick:

1. feed the bytes to the :class:`~deformsense.core.frame_decoder.FrameDecoder`
   and keep the newest completed frame,
2. scale and invert the frame into a :class:`~deformsense.core.vector.Vector`,
3. update the magnitude and the running maxima (per electrode in shield mode),
4. push the vector into the five-slot sliding window.

Nothing here raises for signal conditions: before the first frame, with an
empty frame, or outside shield mode every feature reads as a neutral zero.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .analysis.transforms import TransformSet, invert, normalize, root, square
from .analysis.window import SlidingWindow, WindowSample
from .config.runtime import EngineConfig
from .core.frame_decoder import FrameDecoder, RawFrame
from .core.topology import ELECTRODE_COUNT, SHIELD_DIM, check_electrode, subvector
from .core.vector import EMPTY_VECTOR, Vector
from .forms.store import FormStore, FormView
from .tools.debug import debug_enabled, time_block

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@dataclass(frozen=True)
class EngineSnapshot:
    """Self-consistent copy of every feature as of one tick."""

    running: bool
    shield: bool
    dim: int
    raw: RawFrame
    vector: Tuple[float, ...]
    magnitude: float
    maximum: float
    average: float
    stdev: float
    derivative: float
    transforms: TransformSet
    # Per-electrode arrays are empty outside shield mode.
    electrode_magnitudes: Tuple[float, ...] = ()
    electrode_maxima: Tuple[float, ...] = ()
    electrode_averages: Tuple[float, ...] = ()
    electrode_stdevs: Tuple[float, ...] = ()
    electrode_derivatives: Tuple[float, ...] = ()
    electrode_norms: Tuple[float, ...] = ()


class SignalEngine:
    """Owns the decoder, current frame and vector, trackers, window, and forms."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = (config or EngineConfig()).sanitized()
        self._timing = self._config.debug_timing or debug_enabled()
        self._lock = threading.RLock()

        self._decoder = FrameDecoder()
        self._raw: RawFrame = ()
        self._vector: Vector = EMPTY_VECTOR
        self._window = SlidingWindow()
        self._mag = 0.0
        self._max = 0.0
        self._submag = np.zeros(ELECTRODE_COUNT, dtype=np.float64)
        self._submax = np.zeros(ELECTRODE_COUNT, dtype=np.float64)
        self._forms = FormStore()
        self._ticks = 0

    # ------------------------------------------------------------- properties
    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def decoder(self) -> FrameDecoder:
        return self._decoder

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def running(self) -> bool:
        """True once a non-empty frame is current."""
        return len(self._raw) > 0

    @property
    def shield(self) -> bool:
        """True while the current frame has the 28 values of the 8-electrode shield."""
        return len(self._raw) == SHIELD_DIM

    # ------------------------------------------------------------------- tick
    def tick(self, new_bytes: bytes | bytearray | memoryview = b"") -> bool:
        """
        Run one processing cycle on the newly available bytes.

        Returns True when the bytes completed at least one frame.
        """
        with self._lock, time_block("tick", enabled=self._timing):
            self._ticks += 1
            frame = self._decoder.feed_latest(new_bytes) if new_bytes else None
            if frame is not None:
                self._accept_frame(frame)

            if not self.running:
                return frame is not None
            if frame is None and not self._config.sample_on_idle:
                return False

            self._update_trackers(self._window.push(self._vector))
            return frame is not None

    def _accept_frame(self, frame: RawFrame) -> None:
        previous_dim = len(self._raw)
        was_shield = self.shield
        self._raw = frame
        self._vector = Vector.from_raw(frame)
        if len(frame) != previous_dim:
            logger.info("Frame dimension changed: %d -> %d", previous_dim, len(frame))
            if self.shield != was_shield:
                logger.info("Shield mode %s", "entered" if self.shield else "left")

    def _update_trackers(self, sample: WindowSample) -> None:
        self._mag = sample.magnitude
        if self._mag > self._max:
            self._max = self._mag
        if self.shield:
            self._submag[:] = sample.electrodes
            np.maximum(self._submax, self._submag, out=self._submax)

    # ------------------------------------------------------------------ reset
    def reset_trackers(self) -> None:
        """Reset the running maxima (whole-vector and per electrode)."""
        with self._lock:
            self._max = 0.0
            self._submax[:] = 0.0
            logger.info("Magnitude trackers reset")

    def reset(self) -> None:
        """Return to the not-running state; recorded forms are kept."""
        with self._lock:
            self._decoder.reset()
            self._raw = ()
            self._vector = EMPTY_VECTOR
            self._window.clear()
            self._mag = 0.0
            self._submag[:] = 0.0
            self._ticks = 0
            self.reset_trackers()

    # ---------------------------------------------------------- vector queries
    def dim(self) -> int:
        return len(self._raw)

    def raw_frame(self, electrode: Optional[int] = None) -> Tuple[int, ...]:
        with self._lock:
            if electrode is None:
                return self._raw
            e = check_electrode(electrode)
            if not self.shield:
                return (0,)
            return subvector(self._raw, e)

    def vector(self, electrode: Optional[int] = None) -> np.ndarray:
        with self._lock:
            return self._current(electrode).as_array()

    def magnitude(self, electrode: Optional[int] = None) -> float:
        with self._lock:
            if electrode is None:
                return self._mag if self.running else 0.0
            e = check_electrode(electrode)
            return float(self._submag[e]) if self.shield else 0.0

    def direction(self, electrode: Optional[int] = None) -> np.ndarray:
        with self._lock:
            return self._current(electrode).direction()

    def _current(self, electrode: Optional[int]) -> Vector:
        if electrode is None:
            return self._vector
        e = check_electrode(electrode)
        if not self.shield:
            return Vector((0.0,))
        return Vector(subvector(self._vector.to_list(), e))

    # ----------------------------------------------------- time-series queries
    def maximum(self, electrode: Optional[int] = None) -> float:
        with self._lock:
            if electrode is None:
                return self._max
            e = check_electrode(electrode)
            return float(self._submax[e]) if self.shield else 0.0

    def average(self, electrode: Optional[int] = None) -> float:
        with self._lock:
            if not self._window_active(electrode):
                return 0.0
            return self._window.average(electrode)

    def stdev(self, electrode: Optional[int] = None) -> float:
        with self._lock:
            if not self._window_active(electrode):
                return 0.0
            return self._window.stdev(electrode)

    def derivative(self, electrode: Optional[int] = None) -> float:
        with self._lock:
            if not self._window_active(electrode):
                return 0.0
            return self._window.derivative(electrode)

    def _window_active(self, electrode: Optional[int]) -> bool:
        if electrode is None:
            return self.running
        check_electrode(electrode)
        return self.shield

    # --------------------------------------------------------- transformations
    def norm(self, electrode: Optional[int] = None) -> float:
        with self._lock:
            if not self._window_active(electrode):
                return 0.0
            return normalize(self.average(electrode), self.maximum(electrode))

    def invert(self, electrode: Optional[int] = None) -> float:
        return invert(self.norm(electrode))

    def square(self, electrode: Optional[int] = None) -> float:
        return square(self.norm(electrode))

    def root(self, electrode: Optional[int] = None) -> float:
        return root(self.norm(electrode))

    def transforms(self, electrode: Optional[int] = None) -> TransformSet:
        n = self.norm(electrode)
        return TransformSet(norm=n, invert=invert(n), square=square(n), root=root(n))

    # -------------------------------------------------------- form recognition
    def record(self, label: Optional[str] = None) -> Optional[FormView]:
        """
        Record the current direction under ``label``, replacing earlier samples.

        Does nothing (returns ``None``) before the first frame.
        """
        with self._lock:
            if not self.running:
                return None
            return self._forms.record(self._resolve_label(label), self._vector).view()

    def add_sample(self, label: Optional[str] = None) -> Optional[FormView]:
        """Append the current direction to ``label`` for multi-template recognition."""
        with self._lock:
            if not self.running:
                return None
            return self._forms.add(self._resolve_label(label), self._vector).view()

    def recognize(self, label: Optional[str] = None) -> float:
        """Best fit between the current direction and the samples under ``label``."""
        with self._lock:
            return self._forms.recognize(self._resolve_label(label), self._vector)

    def list_forms(self) -> List[FormView]:
        """Return read-only copies of the stored forms in recording order."""
        with self._lock:
            return [form.view() for form in self._forms]

    def form(self, label: Optional[str] = None) -> Optional[FormView]:
        with self._lock:
            found = self._forms.get(self._resolve_label(label))
            return None if found is None else found.view()

    def form_labels(self) -> List[str]:
        with self._lock:
            return self._forms.labels()

    def remove_form(self, label: Optional[str] = None) -> bool:
        with self._lock:
            return self._forms.remove(self._resolve_label(label))

    def clear_forms(self) -> None:
        with self._lock:
            self._forms.clear()

    def _resolve_label(self, label: Optional[str]) -> str:
        return self._config.default_label if label is None else str(label)

    # ---------------------------------------------------------------- snapshot
    def snapshot(self) -> EngineSnapshot:
        """Return every feature in one consistent, immutable view."""
        with self._lock:
            per_electrode: dict[str, Tuple[float, ...]] = {}
            if self.shield:
                electrodes = range(ELECTRODE_COUNT)
                per_electrode = {
                    "electrode_magnitudes": tuple(self.magnitude(e) for e in electrodes),
                    "electrode_maxima": tuple(self.maximum(e) for e in electrodes),
                    "electrode_averages": tuple(self.average(e) for e in electrodes),
                    "electrode_stdevs": tuple(self.stdev(e) for e in electrodes),
                    "electrode_derivatives": tuple(self.derivative(e) for e in electrodes),
                    "electrode_norms": tuple(self.norm(e) for e in electrodes),
                }
            return EngineSnapshot(
                running=self.running,
                shield=self.shield,
                dim=self.dim(),
                raw=self._raw,
                vector=tuple(self._vector.to_list()),
                magnitude=self.magnitude(),
                maximum=self.maximum(),
                average=self.average(),
                stdev=self.stdev(),
                derivative=self.derivative(),
                transforms=self.transforms(),
                **per_electrode,
            )


__all__ = ["VERSION", "EngineSnapshot", "SignalEngine"]
