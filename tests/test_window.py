from __future__ import annotations

import pytest

from deformsense.analysis.window import (
    WINDOW_SIZE,
    SlidingWindow,
    WindowSample,
    electrode_magnitudes,
    five_point_derivative,
    moving_average,
    moving_stdev,
)
from deformsense.core.vector import Vector


def test_derivative_uses_outer_slots_of_five_point_stencil() -> None:
    # (-1*1 + 8*2 - 8*4 + 1*5) / 12, centre slot unused
    assert five_point_derivative([1.0, 2.0, 3.0, 4.0, 5.0]) == pytest.approx(-1.0)
    assert five_point_derivative([1.0, 2.0, 99.0, 4.0, 5.0]) == pytest.approx(-1.0)


def test_derivative_requires_full_window() -> None:
    assert five_point_derivative([1.0, 2.0, 3.0, 4.0, None]) == 0.0
    assert five_point_derivative([1.0, 2.0]) == 0.0


def test_constant_signal_has_zero_stdev() -> None:
    mags = [0.7] * WINDOW_SIZE
    assert moving_average(mags) == pytest.approx(0.7)
    assert moving_stdev(mags) == pytest.approx(0.0, abs=1e-12)


def test_statistics_skip_empty_slots() -> None:
    mags = [2.0, 4.0, None, None, None]
    assert moving_average(mags) == pytest.approx(3.0)
    assert moving_stdev(mags) == pytest.approx(1.0)
    assert moving_average([None] * WINDOW_SIZE) == 0.0
    assert moving_stdev([]) == 0.0


def test_window_slots_are_newest_first_and_evict_oldest() -> None:
    window = SlidingWindow()
    for value in range(1, 7):
        window.push(Vector([float(value)]))

    assert window.is_full()
    assert window.magnitudes() == pytest.approx([6.0, 5.0, 4.0, 3.0, 2.0])


def test_window_pads_missing_slots_during_warm_up() -> None:
    window = SlidingWindow()
    window.push(Vector([3.0, 4.0]))

    assert window.valid_count == 1
    assert window.magnitudes() == [pytest.approx(5.0), None, None, None, None]
    assert window.derivative() == 0.0
    assert window.average() == pytest.approx(5.0)


def test_per_electrode_magnitudes_need_shield_vectors() -> None:
    window = SlidingWindow()
    window.push(Vector([0.5] * 28))
    window.push(Vector([0.5] * 3))

    mags = window.magnitudes(electrode=2)
    assert mags[0] == 0.0
    assert mags[1] == pytest.approx((7 * 0.25) ** 0.5)


def test_constant_average_is_exact() -> None:
    # 0.1 summed five times is not 0.5 in binary floating point
    for value in (0.1, 0.7, 1.0 / 3.0, 0.5291502622129182):
        assert moving_average([value] * WINDOW_SIZE) == value


def test_push_caches_magnitudes_per_sample() -> None:
    window = SlidingWindow()
    vec = Vector([0.2] * 28)
    sample = window.push(vec)

    assert isinstance(sample, WindowSample)
    assert sample.vector is vec
    assert sample.magnitude == vec.magnitude()
    assert sample.electrodes == electrode_magnitudes(vec)
    assert window.magnitudes()[0] == sample.magnitude
    assert window.magnitudes(3)[0] == sample.electrodes[3]


def test_electrode_magnitudes_are_zero_for_other_dimensions() -> None:
    assert electrode_magnitudes(Vector([0.5, 0.5])) == (0.0,) * 8
