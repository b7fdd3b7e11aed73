"""
Glue between a polled byte transport and :class:`SignalEngine`.

The engine never opens or closes a port. Anything with pyserial's polling
surface (an ``in_waiting`` count and ``read(size)``) can be handed to
:func:`poll_source` once per host cycle; the caller owns its lifecycle.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Protocol

from .engine import SignalEngine

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Non-blocking byte transport, e.g. an open ``serial.Serial``."""

    @property
    def in_waiting(self) -> int:  # pragma: no cover - protocol
        ...

    def read(self, size: int = 1) -> bytes:  # pragma: no cover - protocol
        ...


def poll_source(
    engine: SignalEngine,
    source: Optional[ByteSource],
    *,
    max_bytes: Optional[int] = None,
) -> int:
    """
    Read whatever ``source`` has buffered and run one engine tick on it.

    The tick always runs, so a missing or failing source leaves the engine
    cycling on its last frame. Returns the number of bytes handed over.
    """
    limit = engine.config.max_poll_bytes if max_bytes is None else max(1, int(max_bytes))
    data = b""
    if source is not None:
        try:
            available = int(source.in_waiting)
            if available > 0:
                data = source.read(min(available, limit))
        except OSError as exc:
            # pyserial's SerialException derives from OSError
            logger.warning("Failed to read from byte source: %s", exc)
            data = b""
    engine.tick(data)
    return len(data)


def iter_chunks(data: bytes, chunk_size: int) -> Iterator[bytes]:
    """Yield fixed-size chunks from a captured byte stream for replay."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size}")

    for start in range(0, len(data), chunk_size):
        yield data[start : start + chunk_size]


def replay(engine: SignalEngine, data: bytes, chunk_size: int) -> int:
    """Feed a captured stream through ``engine`` one chunk per tick; returns ticks run."""
    count = 0
    for chunk in iter_chunks(data, chunk_size):
        engine.tick(chunk)
        count += 1
    return count


__all__ = ["ByteSource", "poll_source", "iter_chunks", "replay"]
