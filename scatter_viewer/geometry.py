"""Points, data bounds and the data <-> pixel coordinate mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

ORIGIN_DATA_ZERO = "data-zero"
ORIGIN_CORNER = "corner"
ORIGIN_MODES = (ORIGIN_DATA_ZERO, ORIGIN_CORNER)

Pixel = Tuple[float, float]


@dataclass(frozen=True, eq=False)
class Point:
    """A labelled data point.

    ``==`` and ``in`` compare identity, so two rows with the same
    coordinates stay distinct. Use :func:`same_position` for value equality.
    """

    x: float
    y: float
    label: str


def same_position(a: Point, b: Point) -> bool:
    """Value equality on (x, y); labels are ignored."""
    return a.x == b.x and a.y == b.y


def coords(points: Sequence[Point]) -> np.ndarray:
    """Return an ``(n, 2)`` float array of point coordinates."""
    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)


@dataclass(frozen=True)
class Bounds:
    """Visible data range, aligned outward to multiples of ``step``."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_points(cls, points: Sequence[Point], step: int = 10) -> "Bounds":
        if not points:
            return cls(0, 0, 0, 0)
        xy = coords(points)
        lo = xy.min(axis=0)
        hi = xy.max(axis=0)
        return cls(
            min_x=math.floor(lo[0] / step) * step,
            max_x=math.ceil(hi[0] / step) * step,
            min_y=math.floor(lo[1] / step) * step,
            max_y=math.ceil(hi[1] / step) * step,
        )


def _fraction(values, lo: float, hi: float):
    """Position of *values* within ``[lo, hi]``; 0.5 for a zero-width range."""
    values = np.asarray(values, dtype=float)
    if hi == lo:
        frac = np.full(values.shape, 0.5)
    else:
        frac = (values - lo) / (hi - lo)
    return frac if frac.ndim else float(frac)


class CoordinateMapper:
    """Maps data coordinates onto a padded pixel canvas and back.

    Pixel Y grows downwards, so larger data Y values map to smaller pixel Y.
    A single-valued axis is drawn through the middle of the plot area.

    Parameters
    ----------
    bounds : Bounds
        Data range shown on the canvas.
    width, height : int
        Canvas size in pixels.
    padding : int
        Margin kept free on every side.
    origin_mode : str
        Where the axes cross: ``"data-zero"`` or ``"corner"``.
    """

    def __init__(
        self,
        bounds: Bounds,
        width: int = 800,
        height: int = 600,
        padding: int = 50,
        origin_mode: str = ORIGIN_DATA_ZERO,
    ) -> None:
        if origin_mode not in ORIGIN_MODES:
            raise ValueError(f"Invalid origin mode '{origin_mode}'")
        self.bounds = bounds
        self.width = width
        self.height = height
        self.padding = padding
        self.origin_mode = origin_mode

    @property
    def plot_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def plot_height(self) -> float:
        return self.height - 2 * self.padding

    def to_pixel_x(self, x):
        b = self.bounds
        return self.padding + _fraction(x, b.min_x, b.max_x) * self.plot_width

    def to_pixel_y(self, y):
        b = self.bounds
        return self.height - self.padding - _fraction(y, b.min_y, b.max_y) * self.plot_height

    def to_pixel(self, point: Point) -> Pixel:
        return self.to_pixel_x(point.x), self.to_pixel_y(point.y)

    def to_data_x(self, px: float) -> float:
        b = self.bounds
        if b.max_x == b.min_x:
            return float(b.min_x)
        return b.min_x + (px - self.padding) / self.plot_width * (b.max_x - b.min_x)

    def to_data_y(self, py: float) -> float:
        b = self.bounds
        if b.max_y == b.min_y:
            return float(b.min_y)
        return b.min_y + (self.height - self.padding - py) / self.plot_height * (b.max_y - b.min_y)

    def project(self, points: Sequence[Point]) -> np.ndarray:
        """Vectorised :meth:`to_pixel` returning an ``(n, 2)`` array."""
        xy = coords(points)
        if not len(xy):
            return xy
        return np.column_stack((self.to_pixel_x(xy[:, 0]), self.to_pixel_y(xy[:, 1])))

    @property
    def origin_pixel(self) -> Pixel:
        """Pixel position where the axes cross."""
        if self.origin_mode == ORIGIN_CORNER:
            return float(self.padding), float(self.height - self.padding)
        return self.to_pixel_x(0.0), self.to_pixel_y(0.0)
