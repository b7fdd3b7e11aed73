from __future__ import annotations

import pytest

from deformsense.core.ringbuffer import RingBuffer


def test_ring_buffer_overwrites_oldest() -> None:
    buf: RingBuffer[int] = RingBuffer(3)
    for value in range(5):
        buf.append(value)

    assert list(buf) == [2, 3, 4]
    assert buf.newest_first() == [4, 3, 2]
    assert len(buf) == 3
    assert buf.is_full()


def test_ring_buffer_fills_before_wrapping() -> None:
    buf: RingBuffer[int] = RingBuffer(3)
    buf.append(7)
    buf.append(8)

    assert not buf.is_full()
    assert list(buf) == [7, 8]
    assert buf.newest_first() == [8, 7]


def test_ring_buffer_requires_positive_capacity() -> None:
    with pytest.raises(ValueError):
        RingBuffer(0)


def test_clear_empties_buffer() -> None:
    buf: RingBuffer[int] = RingBuffer(2)
    buf.append(1)
    buf.clear()
    assert len(buf) == 0
    assert buf.newest_first() == []
