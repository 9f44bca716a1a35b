"""
Discretized circles sampled around a candidate pixel.

Offsets are (drow, dcol) pairs of a Bresenham circle, starting at (0, +r) and
walking clockwise in image coordinates (rows grow downwards).
"""

from __future__ import annotations
from typing import Any, Dict, List

import numpy as np

RING3_OFFSETS = np.array([
    [0, 3], [1, 3], [2, 2], [3, 1],
    [3, 0], [3, -1], [2, -2], [1, -3],
    [0, -3], [-1, -3], [-2, -2], [-3, -1],
    [-3, 0], [-3, 1], [-2, 2], [-1, 3],
], dtype=np.intp)

RING4_OFFSETS = np.array([
    [0, 4], [1, 4], [2, 3], [3, 2],
    [4, 1], [4, 0], [4, -1], [3, -2],
    [2, -3], [1, -4], [0, -4], [-1, -4],
    [-2, -3], [-3, -2], [-4, -1], [-4, 0],
    [-4, 1], [-3, 2], [-2, 3], [-1, 4],
], dtype=np.intp)

RING_OFFSETS: Dict[int, np.ndarray] = {3: RING3_OFFSETS, 4: RING4_OFFSETS}
for _tbl in RING_OFFSETS.values():
    _tbl.setflags(write=False)


def ring_offsets(radius: int) -> np.ndarray:
    """Offset table for the ring of `radius`; KeyError for radii without one."""
    try:
        return RING_OFFSETS[int(radius)]
    except KeyError:
        raise KeyError(f"no ring table for radius {radius}; available: {sorted(RING_OFFSETS)}") from None


def sample_ring(surface: Any, row: int, col: int, offsets: np.ndarray) -> List[int]:
    """
    Timestamps at (row, col) + offset for each offset, in table order.

    No bounds checking: the caller must keep (row, col) at least the ring
    radius away from every edge. Negative indices would silently wrap.
    """
    vals = surface[offsets[:, 0] + int(row), offsets[:, 1] + int(col)]
    return [int(v) for v in vals]


__all__ = ["RING3_OFFSETS", "RING4_OFFSETS", "RING_OFFSETS", "ring_offsets", "sample_ring"]
