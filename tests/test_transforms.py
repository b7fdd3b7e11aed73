from __future__ import annotations

import math

import pytest

from deformsense.analysis.transforms import (
    TransformSet,
    invert,
    normalize,
    root,
    square,
    transform_all,
)


def test_normalize_divides_by_maximum() -> None:
    assert normalize(0.5, 2.0) == pytest.approx(0.25)


def test_normalize_guards_zero_maximum() -> None:
    assert normalize(0.5, 0.0) == 0.0


def test_normalize_is_not_clamped() -> None:
    assert normalize(1.2, 1.0) == pytest.approx(1.2)


def test_derived_transforms() -> None:
    n = 0.36
    assert invert(n) + n == pytest.approx(1.0)
    assert square(n) == pytest.approx(n * n)
    assert root(n) == pytest.approx(math.sqrt(n))
    assert root(-0.1) == 0.0


def test_transform_all_bundles_every_transform() -> None:
    result = transform_all(1.0, 4.0)
    assert result == TransformSet(norm=0.25, invert=0.75, square=0.0625, root=0.5)
    assert transform_all(1.0, 0.0) == TransformSet()
