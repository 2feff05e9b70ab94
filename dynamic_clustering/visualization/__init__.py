"""Visualization utilities for cluster scenes."""

from .colors import PersistentColorMap, hex_to_rgb
from .ellipses import add_component_ellipses, covariance_ellipse

__all__ = [
    "PersistentColorMap",
    "hex_to_rgb",
    "add_component_ellipses",
    "covariance_ellipse",
]
