"""Range-mapping transforms applied to the moving average."""

from __future__ import annotations

import math
from dataclasses import dataclass


def normalize(average: float, maximum: float) -> float:
    """
    Scale ``average`` by the historical ``maximum``.

    Not clamped: an average that briefly exceeds a stale maximum yields a
    value above 1. A non-positive maximum yields 0.
    """
    if maximum <= 0.0:
        return 0.0
    return float(average) / float(maximum)


def invert(norm: float) -> float:
    return 1.0 - norm


def square(norm: float) -> float:
    return norm * norm


def root(norm: float) -> float:
    if norm <= 0.0:
        return 0.0
    return math.sqrt(norm)


@dataclass(frozen=True)
class TransformSet:
    """All transforms of one normalized signal."""

    norm: float = 0.0
    invert: float = 1.0
    square: float = 0.0
    root: float = 0.0


def transform_all(average: float, maximum: float) -> TransformSet:
    n = normalize(average, maximum)
    return TransformSet(norm=n, invert=invert(n), square=square(n), root=root(n))


__all__ = ["normalize", "invert", "square", "root", "TransformSet", "transform_all"]
