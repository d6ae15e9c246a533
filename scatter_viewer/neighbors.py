"""Brute-force nearest-neighbour search over the loaded points."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .geometry import Point, coords


def distances(point: Point, points: Sequence[Point]) -> np.ndarray:
    """Euclidean distance from *point* to each of *points*."""
    xy = coords(points)
    if not len(xy):
        return np.empty(0, dtype=float)
    dx = xy[:, 0] - point.x
    dy = xy[:, 1] - point.y
    return np.sqrt(dx * dx + dy * dy)


def nearest(point: Point, points: Sequence[Point], k: int = 5) -> List[Point]:
    """Return the *k* points closest to *point*, nearest first.

    *point* itself is skipped by identity, so another row at the same
    coordinates is still a candidate. Equal distances keep dataset order.
    """
    candidates = [p for p in points if p is not point]
    if k <= 0 or not candidates:
        return []
    order = np.argsort(distances(point, candidates), kind="stable")[:k]
    return [candidates[i] for i in order]
