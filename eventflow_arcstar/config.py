"""
Detector parameters.

Defaults are the published Arc* settings: a 16-pixel ring of radius 3 with
arcs of 3..6 elements and a 20-pixel ring of radius 4 with arcs of 4..8.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from .errors import ConfigError
from .events import DESCRIPTOR_LEN
from .rings import RING_OFFSETS, ring_offsets


@dataclass(frozen=True)
class RingSpec:
    radius: int
    min_arc: int
    max_arc: int

    @property
    def offsets(self) -> np.ndarray:
        return ring_offsets(self.radius)

    @property
    def size(self) -> int:
        return len(self.offsets)

    def validate(self) -> None:
        if self.radius not in RING_OFFSETS:
            raise ConfigError(f"ring radius must be one of {sorted(RING_OFFSETS)}, got {self.radius}")
        if self.min_arc < 1:
            raise ConfigError(f"ring {self.radius}: min_arc must be >= 1")
        if self.max_arc < self.min_arc:
            raise ConfigError(f"ring {self.radius}: max_arc must be >= min_arc")
        if self.max_arc >= self.size:
            raise ConfigError(f"ring {self.radius}: max_arc must be < ring size {self.size}")


@dataclass(frozen=True)
class ArcStarConfig:
    ring3: RingSpec = field(default_factory=lambda: RingSpec(3, 3, 6))
    ring4: RingSpec = field(default_factory=lambda: RingSpec(4, 4, 8))
    border: int = 4

    def __post_init__(self):
        self.ring3.validate()
        self.ring4.validate()
        if self.ring3.size + self.ring4.size != DESCRIPTOR_LEN:
            raise ConfigError(
                f"rings of radius {self.ring3.radius} and {self.ring4.radius} do not make a {DESCRIPTOR_LEN}-value descriptor"
            )
        reach = max(self.ring3.radius, self.ring4.radius)
        if self.border < reach:
            raise ConfigError(f"border must be >= {reach} (largest ring radius), got {self.border}")

    @classmethod
    def from_params(cls, params: Optional[Dict[str, Any]] = None) -> "ArcStarConfig":
        """
        Build a config from a flat params dict, e.g.
        {"border": 5, "ring3_max_arc": 5}. Missing keys keep their defaults.
        """
        p = params or {}
        known = {"border", "ring3_min_arc", "ring3_max_arc", "ring4_min_arc", "ring4_max_arc"}
        unknown = set(p) - known
        if unknown:
            raise ConfigError(f"unknown arcstar params: {sorted(unknown)}")
        try:
            ring3 = RingSpec(3, int(p.get("ring3_min_arc", 3)), int(p.get("ring3_max_arc", 6)))
            ring4 = RingSpec(4, int(p.get("ring4_min_arc", 4)), int(p.get("ring4_max_arc", 8)))
            border = int(p.get("border", 4))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid arcstar params: {e}") from e
        return cls(ring3=ring3, ring4=ring4, border=border)


DEFAULT_CONFIG = ArcStarConfig()

__all__ = ["RingSpec", "ArcStarConfig", "DEFAULT_CONFIG"]
