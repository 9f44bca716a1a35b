"""
Canonical exception types for eventflow-arcstar.

The detection kernel itself never raises for events inside the surface; these
types cover the validation done at the package boundary (surfaces, event
descriptors, detector parameters). Catch VisionError to handle all of them.
"""

from __future__ import annotations


class VisionError(Exception):
    """Vision module domain error (e.g., invalid surface, descriptor, ring parameters)."""


class SurfaceError(VisionError):
    """Timestamp surface is not a 2D grid of non-negative timestamps."""


class DescriptorError(VisionError):
    """Descriptor attached to an event does not have the expected length."""


class ConfigError(VisionError):
    """Inconsistent ring or border parameters."""


__all__ = ["VisionError", "SurfaceError", "DescriptorError", "ConfigError"]
