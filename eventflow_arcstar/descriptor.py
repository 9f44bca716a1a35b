"""
Normalized appearance descriptor for a confirmed corner.

Each ring is read starting at its own freshest element, so the descriptor is
anchored to the corner's orientation rather than to the image axes.
"""

from __future__ import annotations
from typing import Optional, Sequence

import numpy as np


def build_descriptor(
    c3_vals: Sequence[int],
    c3_idx: int,
    c3_val: int,
    c4_vals: Sequence[int],
    c4_idx: int,
    c4_val: int,
) -> Optional[np.ndarray]:
    """
    36 float32 values: 16 for ring 3 then 20 for ring 4, each computed as
    1 - (freshest - v) / freshest against the newest timestamp of both rings.

    Returns None when both rings are empty (freshest == 0); there is no scale
    to normalize against.
    """
    freshest = float(max(c3_val, c4_val))
    if freshest <= 0.0:
        return None
    c3 = np.roll(np.asarray(c3_vals, dtype=np.float64), -int(c3_idx))
    c4 = np.roll(np.asarray(c4_vals, dtype=np.float64), -int(c4_idx))
    vals = np.concatenate((c3, c4))
    return (1.0 - (freshest - vals) / freshest).astype(np.float32)


__all__ = ["build_descriptor"]
