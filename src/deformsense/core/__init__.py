"""Core building blocks: byte framing, vectors, and the shield topology.

This package sits between the serial byte stream and the signal engine by
turning zero-delimited bytes into raw frames, raw frames into immutable
deformation vectors, and 28-value shield frames into per-electrode views.
"""

# Data structures shared by the engine
from .ringbuffer import RingBuffer
from .vector import EMPTY_VECTOR, Vector, direction, dot, magnitude

# Stream framing and topology
from .frame_decoder import DELIMITER, DecoderState, FrameDecoder, RawFrame
from .topology import (
    ELECTRODE_COUNT,
    PAIR_LABELS,
    SHIELD_DIM,
    SUBVECTOR_MAP,
    SUBVECTOR_SIZE,
    electrode_pairs,
    is_shield_dim,
    subvector,
)

__all__ = [
    "RingBuffer",
    "Vector",
    "EMPTY_VECTOR",
    "magnitude",
    "direction",
    "dot",
    "DELIMITER",
    "DecoderState",
    "FrameDecoder",
    "RawFrame",
    "ELECTRODE_COUNT",
    "PAIR_LABELS",
    "SHIELD_DIM",
    "SUBVECTOR_MAP",
    "SUBVECTOR_SIZE",
    "electrode_pairs",
    "is_shield_dim",
    "subvector",
]
