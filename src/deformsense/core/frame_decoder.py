"""
Zero-delimited frame decoder for the raw resistance stream.

The device sends one byte per electrode pair and separates measurement cycles
with a single ``0`` byte (pull-up resistors keep real readings above zero)::

    ... noise ... 00 | r0 r1 ... rN | 00 | r0 r1 ... rN | 00 ...

Bytes before the first ``0`` are discarded. Every later ``0`` closes the
current frame and opens the next one, so frames are back-to-back. State
persists across :meth:`FrameDecoder.feed` calls, so chunks may be split at
any byte boundary.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DELIMITER = 0

RawFrame = Tuple[int, ...]
ByteChunk = Union[bytes, bytearray, memoryview, Iterable[int]]


class DecoderState(enum.Enum):
    AWAITING_SYNC = "awaiting_sync"
    ACCUMULATING = "accumulating"


class FrameDecoder:
    """Byte-at-a-time state machine turning a byte stream into raw frames."""

    def __init__(self) -> None:
        self._state = DecoderState.AWAITING_SYNC
        self._buffer = bytearray()
        self._frames_decoded = 0
        self._bytes_discarded = 0

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def synchronized(self) -> bool:
        return self._state is DecoderState.ACCUMULATING

    @property
    def frames_decoded(self) -> int:
        """Number of complete frames emitted since construction or :meth:`reset`."""
        return self._frames_decoded

    @property
    def bytes_discarded(self) -> int:
        """Number of pre-sync bytes dropped while waiting for the first delimiter."""
        return self._bytes_discarded

    @property
    def pending(self) -> int:
        """Number of bytes accumulated for the frame currently in progress."""
        return len(self._buffer)

    def reset(self) -> None:
        self._state = DecoderState.AWAITING_SYNC
        self._buffer.clear()
        self._frames_decoded = 0
        self._bytes_discarded = 0

    def feed(self, chunk: ByteChunk) -> List[RawFrame]:
        """
        Consume ``chunk`` and return every frame it completed, oldest first.

        Integer items are masked to ``0..255``; an empty list means no frame
        was closed by this chunk.
        """
        frames: List[RawFrame] = []
        discarded = 0
        for item in chunk:
            value = int(item) & 0xFF
            if self._state is DecoderState.AWAITING_SYNC:
                if value == DELIMITER:
                    self._state = DecoderState.ACCUMULATING
                    self._buffer.clear()
                    logger.debug("Frame sync acquired after %d discarded bytes",
                                 self._bytes_discarded + discarded)
                else:
                    discarded += 1
                continue

            if value == DELIMITER:
                frames.append(tuple(self._buffer))
                self._buffer.clear()
            else:
                self._buffer.append(value)

        self._bytes_discarded += discarded
        self._frames_decoded += len(frames)
        return frames

    def feed_latest(self, chunk: ByteChunk) -> Optional[RawFrame]:
        """Consume ``chunk`` and return only the most recent completed frame, if any."""
        frames = self.feed(chunk)
        if not frames:
            return None
        return frames[-1]


__all__ = ["DELIMITER", "DecoderState", "FrameDecoder", "RawFrame"]
