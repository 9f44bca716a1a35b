"""
Read-only views of a Surface of Active Events (SAE).

The SAE is a matrix of timestamps, one per pixel, holding the time of the most
recent change event at that pixel (0 when none has been seen yet). Writers own
the array and its update policy; this package only ever reads it.
"""

from __future__ import annotations
import logging
from typing import Any

import numpy as np

from .errors import SurfaceError

_log = logging.getLogger("eventflow.arcstar.surface")


def as_surface(surface: Any, margin: int = 4, validate: bool = False, warn_small: bool = True) -> np.ndarray:
    """
    Return `surface` as a 2D integer numpy array without copying when possible.

    - Raises SurfaceError if the input is not two-dimensional or not integral.
    - validate=True additionally rejects negative timestamps (O(rows*cols)).
    - A surface with no pixel at least `margin` away from every edge is
      accepted, but every event on it will be rejected as border; a warning is
      logged so the caller notices (warn_small=False silences it for per-event
      callers).
    """
    arr = np.asarray(surface)
    if arr.ndim != 2:
        raise SurfaceError(f"surface must be 2D (rows, cols), got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise SurfaceError(f"surface must hold integer timestamps, got dtype {arr.dtype}")
    if validate and arr.size and np.issubdtype(arr.dtype, np.signedinteger) and int(arr.min()) < 0:
        raise SurfaceError("surface timestamps must be >= 0")
    rows, cols = arr.shape
    if warn_small and (rows <= 2 * margin or cols <= 2 * margin):
        _log.warning(
            f"surface {rows}x{cols} has no pixel {margin} px from every edge; all events will be rejected as border"
        )
    return arr


def snapshot(surface: Any) -> np.ndarray:
    """
    Frozen copy of `surface` for handing to worker threads.

    The copy owns its memory, so later writes to the source surface never reach
    it; the copy itself is marked non-writable.
    """
    snap = np.array(surface, copy=True)
    snap.setflags(write=False)
    return snap


__all__ = ["as_surface", "snapshot"]
