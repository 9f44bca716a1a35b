"""
SAE event record plus the spatial and appearance comparisons used when
matching corner events downstream.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

import numpy as np

from .errors import DescriptorError

# 16 values from the radius-3 ring followed by 20 from the radius-4 ring
DESCRIPTOR_LEN = 36


@dataclass(frozen=True)
class Event:
    """
    A single change event at pixel (row, col).

    Equality and hashing only consider row, col, polarity and timestamp; two
    events at the same place and time are the same event whether or not a
    descriptor has been computed for one of them.
    """
    row: int
    col: int
    polarity: int = 0
    timestamp: int = 0
    descriptor: Optional[np.ndarray] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.descriptor is not None:
            desc = np.array(self.descriptor, dtype=np.float32).reshape(-1)
            if desc.shape != (DESCRIPTOR_LEN,):
                raise DescriptorError(
                    f"descriptor must hold {DESCRIPTOR_LEN} values, got {desc.size}"
                )
            desc.setflags(write=False)
            object.__setattr__(self, "descriptor", desc)

    def with_descriptor(self, descriptor: Optional[Sequence[float]]) -> "Event":
        """Copy of this event carrying `descriptor` (None clears it)."""
        return replace(self, descriptor=descriptor)

    def spatial_dist_2(self, other: "Event") -> int:
        return spatial_dist_2(self, other)

    def rectilinear_dist(self, other: "Event") -> int:
        return rectilinear_dist(self, other)

    def likeness(self, other: "Event") -> float:
        return likeness(self, other)


def spatial_dist_2(a: Event, b: Event) -> int:
    """Square of the pixel distance between two events."""
    drow = int(a.row) - int(b.row)
    dcol = int(a.col) - int(b.col)
    return drow * drow + dcol * dcol


def rectilinear_dist(a: Event, b: Event) -> int:
    """Manhattan (city block) pixel distance between two events."""
    return abs(int(a.row) - int(b.row)) + abs(int(a.col) - int(b.col))


def likeness(a: Event, b: Event) -> float:
    """
    Histogram-intersection similarity of two event descriptors, in [0, 1].

    Returns 0.0 when either event has no descriptor, and also when both
    descriptors are all zero (nothing to intersect).
    """
    if a.descriptor is None or b.descriptor is None:
        return 0.0
    da = a.descriptor
    db = b.descriptor
    max_total = max(float(da.sum()), float(db.sum()))
    if max_total <= 0.0:
        return 0.0
    return float(np.minimum(da, db).sum()) / max_total


__all__ = ["DESCRIPTOR_LEN", "Event", "spatial_dist_2", "rectilinear_dist", "likeness"]
