"""Fixed 8-electrode / 28-pair topology of the sensing shield.

Every unordered pair of the eight electrodes yields one resistance reading,
so a shield frame carries C(8, 2) = 28 values ordered ``0-1, 0-2, ..., 6-7``.
``SUBVECTOR_MAP[e]`` lists the seven frame indices whose pair involves
electrode ``e``; each index therefore appears in exactly two rows.
"""

from __future__ import annotations

from itertools import combinations
from typing import Sequence, Tuple, TypeVar

ELECTRODE_COUNT = 8
SUBVECTOR_SIZE = ELECTRODE_COUNT - 1
SHIELD_DIM = ELECTRODE_COUNT * SUBVECTOR_SIZE // 2

T = TypeVar("T")

_PAIRS: Tuple[Tuple[int, int], ...] = tuple(combinations(range(ELECTRODE_COUNT), 2))

PAIR_LABELS: Tuple[str, ...] = tuple(f"{a}-{b}" for a, b in _PAIRS)

SUBVECTOR_MAP: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(index for index, pair in enumerate(_PAIRS) if electrode in pair)
    for electrode in range(ELECTRODE_COUNT)
)


def is_shield_dim(dim: int) -> bool:
    """Return True when a frame of ``dim`` values comes from the 8-electrode shield."""
    return dim == SHIELD_DIM


def check_electrode(electrode: int) -> int:
    """Validate an electrode id, raising ``IndexError`` outside ``0..7``."""
    e = int(electrode)
    if e < 0 or e >= ELECTRODE_COUNT:
        raise IndexError(f"electrode must be in 0..{ELECTRODE_COUNT - 1}, got {electrode}")
    return e


def electrode_pairs(electrode: int) -> Tuple[str, ...]:
    """Return the pair labels involving ``electrode`` in subvector order."""
    return tuple(PAIR_LABELS[i] for i in SUBVECTOR_MAP[check_electrode(electrode)])


def subvector(values: Sequence[T], electrode: int) -> Tuple[T, ...]:
    """
    Pick the seven components of a 28-value frame that involve ``electrode``.

    Returns an empty tuple when ``values`` is not shield-sized so callers can
    substitute their own neutral value.
    """
    indices = SUBVECTOR_MAP[check_electrode(electrode)]
    if not is_shield_dim(len(values)):
        return ()
    return tuple(values[i] for i in indices)


__all__ = [
    "ELECTRODE_COUNT",
    "SUBVECTOR_SIZE",
    "SHIELD_DIM",
    "PAIR_LABELS",
    "SUBVECTOR_MAP",
    "is_shield_dim",
    "check_electrode",
    "electrode_pairs",
    "subvector",
]
