"""Signal analysis utilities (sliding-window statistics and transforms).

This package gathers pure helpers that operate on deformation vectors and
their magnitudes. Modules such as :mod:`window` and :mod:`transforms` stay
free of stream and threading concerns so they can be reused in scripts,
automated tests, or the engine alike.
"""

from .transforms import TransformSet, invert, normalize, root, square, transform_all
from .window import (
    STENCIL_WEIGHTS,
    WINDOW_SIZE,
    SlidingWindow,
    WindowSample,
    electrode_magnitudes,
    five_point_derivative,
    moving_average,
    moving_stdev,
)

__all__ = [
    "TransformSet",
    "normalize",
    "invert",
    "square",
    "root",
    "transform_all",
    "WINDOW_SIZE",
    "STENCIL_WEIGHTS",
    "SlidingWindow",
    "WindowSample",
    "electrode_magnitudes",
    "moving_average",
    "moving_stdev",
    "five_point_derivative",
]
