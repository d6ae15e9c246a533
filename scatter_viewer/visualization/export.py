"""Render the scene with matplotlib, e.g. to save a PNG snapshot."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Polygon, Rectangle

from .canvas import MARKER_EXTENT
from .renderer import render_scene

if TYPE_CHECKING:
    from ..explorer.session import ViewerSession

logger = logging.getLogger(__name__)

_DPI = 100


class MatplotlibCanvas:
    """Canvas backed by a matplotlib ``Axes`` laid out in pixel units."""

    def __init__(self, ax=None) -> None:
        if ax is None:
            _, ax = plt.subplots()
        self.ax = ax
        self._z = 0

    def _next_z(self) -> int:
        self._z += 1
        return self._z

    def clear(self, width, height):
        ax = self.ax
        ax.clear()
        ax.figure.set_size_inches(width / _DPI, height / _DPI)
        ax.figure.set_dpi(_DPI)
        ax.set_position([0, 0, 1, 1])
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_axis_off()
        self._z = 0

    def line(self, x0, y0, x1, y1, *, color, width):
        self.ax.plot([x0, x1], [y0, y1], color=color, linewidth=width,
                     solid_capstyle="butt", zorder=self._next_z())

    def text(self, x, y, text, *, color):
        self.ax.text(x, y, text, color=color, ha="center", va="center",
                     fontsize=8, zorder=self._next_z())

    def marker(self, x, y, shape, *, fill, stroke=None, stroke_width=0.0):
        r = MARKER_EXTENT.get(shape, MARKER_EXTENT["circle"])
        if shape == "square":
            patch = Rectangle((x - r, y - r), 2 * r, 2 * r)
        elif shape == "triangle":
            patch = Polygon([(x, y - r), (x + r, y + r), (x - r, y + r)], closed=True)
        else:
            patch = Circle((x, y), r)
        patch.set_facecolor(fill)
        if stroke:
            patch.set_edgecolor(stroke)
            patch.set_linewidth(stroke_width)
        else:
            patch.set_edgecolor("none")
        patch.set_zorder(self._next_z())
        self.ax.add_patch(patch)


def export_png(session: ViewerSession, path: str | os.PathLike) -> None:
    """Save the session's current scene as a PNG the size of the canvas."""
    fig, ax = plt.subplots()
    try:
        canvas = MatplotlibCanvas(ax)
        render_scene(
            canvas, session.dataset, session.mapper, session.view_state,
            session.config.colors, session.config.canvas.tick_step,
        )
        fig.savefig(path, dpi=_DPI)
        logger.info("wrote %s", path)
    finally:
        plt.close(fig)
