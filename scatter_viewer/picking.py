"""Hit-testing: pointer pixel position -> data point."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .geometry import CoordinateMapper, Pixel, Point


def pick(
    pointer: Pixel,
    points: Sequence[Point],
    mapper: CoordinateMapper,
    tolerance: float = 10.0,
) -> Point | None:
    """Return the first point drawn within *tolerance* pixels of *pointer*.

    The window is a square: each axis is tested on its own with a strict
    ``<``. Candidates are taken in dataset order, not by closeness.
    Returns ``None`` when nothing is hit.
    """
    if not points:
        return None
    px = mapper.project(points)
    hits = np.flatnonzero(
        (np.abs(px[:, 0] - pointer[0]) < tolerance)
        & (np.abs(px[:, 1] - pointer[1]) < tolerance)
    )
    if not len(hits):
        return None
    return points[int(hits[0])]
