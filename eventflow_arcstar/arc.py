"""
Arc* expansion over a circular sequence of SAE timestamps.

Arc* (Alzugaray & Chli, "Asynchronous Corner Detection and Tracking for Event
Cameras in Real Time", RA-L 2018) grows a segment from the newest element of a
ring, always extending towards whichever neighbour is fresher, and reports how
long the contiguous run of fresh elements is. A corner shows up as a short
fresh arc (or a short stale one, when the corner opens the other way).
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple


def find_freshest(values: Sequence[int]) -> Tuple[int, int]:
    """
    Index and value of the newest timestamp in the ring.

    Only strictly greater values replace the current best, so ties resolve to
    the lowest index. An all-zero ring returns (0, 0).
    """
    newest_idx = 0
    newest_val = 0
    for i, val in enumerate(values):
        if val > newest_val:
            newest_val = val
            newest_idx = i
    return newest_idx, newest_val


def expand_arc(values: Sequence[int], min_arc: int, freshest_idx: int) -> int:
    """
    Length of the arc containing the freshest timestamps in `values`.

    Two cursors leave `freshest_idx` clockwise and counter-clockwise. The first
    `min_arc - 1` expansions are unconditional and establish the oldest value
    of the segment; afterwards a step only extends the recorded length when the
    candidate is not older than the segment so far.
    """
    n = len(values)
    cw_idx = (freshest_idx + 1) % n
    ccw_idx = (freshest_idx + n - 1) % n

    cw_val = values[cw_idx]
    ccw_val = values[ccw_idx]
    cw_oldest = cw_val
    ccw_oldest = ccw_val
    segment_oldest = math.inf

    for _ in range(1, min_arc):
        if cw_val > ccw_val:
            segment_oldest = min(segment_oldest, cw_oldest)
            cw_idx = (cw_idx + 1) % n
            cw_val = values[cw_idx]
            cw_oldest = min(cw_oldest, cw_val)
        else:
            segment_oldest = min(segment_oldest, ccw_oldest)
            ccw_idx = (ccw_idx + n - 1) % n
            ccw_val = values[ccw_idx]
            ccw_oldest = min(ccw_oldest, ccw_val)

    arc_len = min_arc
    for step in range(min_arc, n):
        if cw_val > ccw_val:
            if cw_val >= segment_oldest:
                arc_len = step + 1
                segment_oldest = min(segment_oldest, cw_oldest)
            cw_idx = (cw_idx + 1) % n
            cw_val = values[cw_idx]
            cw_oldest = min(cw_oldest, cw_val)
        else:
            if ccw_val >= segment_oldest:
                arc_len = step + 1
                segment_oldest = min(segment_oldest, ccw_oldest)
            ccw_idx = (ccw_idx + n - 1) % n
            ccw_val = values[ccw_idx]
            ccw_oldest = min(ccw_oldest, ccw_val)

    return arc_len


def is_arc_valid(length: int, ring_size: int, min_arc: int, max_arc: int) -> bool:
    """
    Whether a fresh arc of `length` elements is corner shaped.

    Short fresh arcs qualify directly. Long ones qualify when their complement
    (the stale part of the ring) is itself between min_arc and max_arc long.
    """
    return length <= max_arc or (ring_size - max_arc <= length <= ring_size - min_arc)


__all__ = ["find_freshest", "expand_arc", "is_arc_valid"]
