"""Minimal helpers for opt-in debug/instrumentation hooks."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Callable, Iterator

logger = logging.getLogger(__name__)


def debug_enabled() -> bool:
    """Return True when lightweight instrumentation should run."""
    return os.getenv("DEFORMSENSE_DEBUG", "").lower() in {"1", "true", "yes", "on"}


@contextmanager
def time_block(
    label: str,
    *,
    enabled: bool | None = None,
    emitter: Callable[[str], None] | None = None,
) -> Iterator[None]:
    """
    Context manager that emits elapsed time when debugging is enabled.

    The overhead is essentially a couple of perf_counter() calls when disabled.
    """
    if enabled is None:
        enabled = debug_enabled()
    if not enabled:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        target = emitter or logger.debug
        target(f"{label} took {elapsed_ms:.3f} ms")
