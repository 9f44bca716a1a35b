"""
Arc* corner classification for single SAE events.

Decision procedure per event, stopping at the first failure:
- reject pixels closer than `border` to any edge of the surface
- sample the radius-3 ring, expand its freshest arc, check the arc length
- sample the radius-4 ring, expand its freshest arc, check the arc length
- build the 36-value descriptor and accept

Nothing is cached between calls and neither the surface nor the input event is
modified. Callers sharing a surface across threads must hand over a snapshot
(see surface.snapshot); the detector takes no locks.
"""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

import numpy as np

from .arc import expand_arc, find_freshest, is_arc_valid
from .config import DEFAULT_CONFIG, ArcStarConfig
from .descriptor import build_descriptor
from .errors import VisionError
from .events import DESCRIPTOR_LEN, Event
from .rings import sample_ring
from .surface import as_surface

_log = logging.getLogger("eventflow.arcstar.detector")


class Stage(enum.Enum):
    REJECTED_BORDER = "rejected_border"
    REJECTED_RING3 = "rejected_ring3"
    REJECTED_RING4 = "rejected_ring4"
    REJECTED_DESCRIPTOR = "rejected_descriptor"
    ACCEPTED = "accepted"


@dataclass(frozen=True)
class Classification:
    stage: Stage
    ring3_arc: Optional[int] = None
    ring4_arc: Optional[int] = None
    descriptor: Optional[np.ndarray] = field(default=None, compare=False)

    @property
    def is_corner(self) -> bool:
        return self.stage is Stage.ACCEPTED


def is_border(row: int, col: int, shape: Tuple[int, int], margin: int = 4) -> bool:
    """True when (row, col) is closer than `margin` to an edge or outside `shape`."""
    nrows, ncols = shape
    return row < margin or col < margin or row >= nrows - margin or col >= ncols - margin


def classify_point(surface: np.ndarray, row: int, col: int, config: ArcStarConfig = DEFAULT_CONFIG) -> Classification:
    """Run the decision procedure for pixel (row, col) of a 2D numpy surface."""
    row = int(row); col = int(col)
    if is_border(row, col, surface.shape, config.border):
        return Classification(Stage.REJECTED_BORDER)

    r3 = config.ring3
    c3_vals = sample_ring(surface, row, col, r3.offsets)
    c3_idx, c3_val = find_freshest(c3_vals)
    c3_arc = expand_arc(c3_vals, r3.min_arc, c3_idx)
    if not is_arc_valid(c3_arc, r3.size, r3.min_arc, r3.max_arc):
        return Classification(Stage.REJECTED_RING3, ring3_arc=c3_arc)

    r4 = config.ring4
    c4_vals = sample_ring(surface, row, col, r4.offsets)
    c4_idx, c4_val = find_freshest(c4_vals)
    c4_arc = expand_arc(c4_vals, r4.min_arc, c4_idx)
    if not is_arc_valid(c4_arc, r4.size, r4.min_arc, r4.max_arc):
        return Classification(Stage.REJECTED_RING4, ring3_arc=c3_arc, ring4_arc=c4_arc)

    desc = build_descriptor(c3_vals, c3_idx, c3_val, c4_vals, c4_idx, c4_val)
    if desc is None:
        return Classification(Stage.REJECTED_DESCRIPTOR, ring3_arc=c3_arc, ring4_arc=c4_arc)
    return Classification(Stage.ACCEPTED, ring3_arc=c3_arc, ring4_arc=c4_arc, descriptor=desc)


def classify(surface: Any, event: Event, config: Optional[ArcStarConfig] = None) -> Classification:
    """Stage reached by `event` on `surface`; raises SurfaceError for non-2D or non-integer surfaces."""
    cfg = config or DEFAULT_CONFIG
    sae = as_surface(surface, margin=cfg.border, warn_small=False)
    return classify_point(sae, event.row, event.col, cfg)


def detect_and_compute(surface: Any, event: Event, config: Optional[ArcStarConfig] = None) -> Optional[Event]:
    """
    Detect whether `event` is a corner on `surface` and compute its descriptor.

    Returns a copy of the event carrying the descriptor when it is a corner,
    otherwise None. Events within `config.border` pixels of an edge (including
    any outside the surface) are never corners.
    Raises SurfaceError when `surface` is not a 2D integer array.
    """
    result = classify(surface, event, config)
    if not result.is_corner:
        return None
    return event.with_descriptor(result.descriptor)


def is_corner(surface: Any, event: Event, config: Optional[ArcStarConfig] = None) -> bool:
    """Whether `event` is a corner on `surface`, without keeping the descriptor."""
    return classify(surface, event, config).is_corner


def detect_corners_arrays(
    surface: Any,
    rows: Any,
    cols: Any,
    polarity: Any = None,
    ts: Any = None,
    config: Optional[ArcStarConfig] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Columnar variant: classify N events against the same surface snapshot.

    Returns (keepmask, descriptors) where keepmask is bool (N,) and descriptors
    is float32 (N, 36) with zero rows for rejected events. polarity and ts are
    accepted for symmetry with the event arrays used elsewhere in eventflow and
    only checked for length; classification depends on position alone.
    Length mismatches raise VisionError.
    """
    cfg = config or DEFAULT_CONFIG
    sae = as_surface(surface, margin=cfg.border)
    r = np.asarray(rows, dtype=np.int64).reshape(-1)
    c = np.asarray(cols, dtype=np.int64).reshape(-1)
    n = r.shape[0]
    if c.shape[0] != n:
        raise VisionError(f"rows/cols length mismatch: {n} vs {c.shape[0]}")
    for name, extra in (("polarity", polarity), ("ts", ts)):
        if extra is not None and np.asarray(extra).reshape(-1).shape[0] != n:
            raise VisionError(f"{name} length must match rows ({n})")

    keep = np.zeros((n,), dtype=bool)
    descs = np.zeros((n, DESCRIPTOR_LEN), dtype=np.float32)
    for i, (row, col) in enumerate(zip(r.tolist(), c.tolist())):
        res = classify_point(sae, row, col, cfg)
        if res.is_corner:
            keep[i] = True
            descs[i] = res.descriptor
    _log.debug(f"arcstar batch: {int(keep.sum())}/{n} events classified as corners")
    return keep, descs


__all__ = [
    "Stage",
    "Classification",
    "is_border",
    "classify_point",
    "classify",
    "detect_and_compute",
    "is_corner",
    "detect_corners_arrays",
]
