from __future__ import annotations
from .events import DESCRIPTOR_LEN, Event, spatial_dist_2, rectilinear_dist, likeness
from .config import RingSpec, ArcStarConfig, DEFAULT_CONFIG
from .detector import Stage, Classification, classify, detect_and_compute, detect_corners_arrays, is_corner
from .surface import as_surface, snapshot
from .errors import VisionError
__all__ = [
    "DESCRIPTOR_LEN", "Event", "spatial_dist_2", "rectilinear_dist", "likeness",
    "RingSpec", "ArcStarConfig", "DEFAULT_CONFIG",
    "Stage", "Classification", "classify", "detect_and_compute", "detect_corners_arrays", "is_corner",
    "as_surface", "snapshot", "VisionError",
]
