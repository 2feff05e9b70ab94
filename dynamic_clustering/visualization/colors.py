"""Persistent colour mapping for cluster labels."""

from __future__ import annotations

from typing import Hashable, Sequence, Tuple

import pandas as pd
import plotly.express as px
from matplotlib import colors as mcolors

from ..scene import PENDING

PENDING_COLOR = "#000000"
UNCLUSTERED_COLOR = "#268BD2"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert a hex colour string (e.g. ``'#1f77b4'``) to ``(R, G, B)``."""
    try:
        rgb_float = mcolors.to_rgb(hex_color)
        return tuple(int(round(c * 255)) for c in rgb_float)
    except ValueError:
        return (0, 0, 0)


class PersistentColorMap:
    """Assigns stable colours to cluster labels across repeated fits.

    New labels take the next colour in the Plotly qualitative palette.
    ``PENDING`` is always black and unclustered (``None``) points blue.
    """

    _PALETTE = px.colors.qualitative.Plotly + px.colors.qualitative.Safe

    def __init__(self) -> None:
        self._map: dict[Hashable, str] = {}

    @property
    def mapping(self) -> dict[Hashable, str]:
        """Return a copy of the current label -> colour mapping."""
        return dict(self._map)

    def color_for(self, label: Hashable) -> str:
        if label is None:
            return UNCLUSTERED_COLOR
        if label == PENDING:
            return PENDING_COLOR
        if label not in self._map:
            self._map[label] = self._PALETTE[len(self._map) % len(self._PALETTE)]
        return self._map[label]

    def __call__(self, labels: Sequence[Hashable]) -> list[str]:
        """Map each label in *labels* to its colour."""
        series = pd.Series(list(labels), dtype=object)
        return series.map(self.color_for).tolist()

    def reset(self) -> None:
        self._map.clear()
