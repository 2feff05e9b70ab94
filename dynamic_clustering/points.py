"""Append-only store of user-added 2-D points."""

from __future__ import annotations

from typing import Iterator, NamedTuple, Tuple

import numpy as np


class Point(NamedTuple):
    """A single clicked coordinate."""

    x: float
    y: float


class PointStore:
    """Ordered collection of points for one session.

    Index order is arrival order.  Points are never reordered or removed
    except by :meth:`reset`, which empties the store.
    """

    def __init__(self) -> None:
        self._points: list[Point] = []

    def append(self, point: Point) -> None:
        self._points.append(Point(float(point[0]), float(point[1])))

    def reset(self) -> None:
        self._points = []

    def size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._points))

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    @property
    def points(self) -> Tuple[Point, ...]:
        """Return an immutable copy of the stored points."""
        return tuple(self._points)

    def prefix(self, n: int) -> Tuple[Point, ...]:
        """Return the first *n* points in arrival order."""
        return tuple(self._points[:n])

    def as_array(self) -> np.ndarray:
        """Return the points as an ``(n, 2)`` float array."""
        if not self._points:
            return np.empty((0, 2), dtype=float)
        return np.asarray(self._points, dtype=float)
