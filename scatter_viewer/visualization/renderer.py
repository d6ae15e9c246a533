"""Full-scene redraw: axes, ticks, reference lines, points, highlight."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .canvas import Canvas
from .colors import ColorScheme, point_color

if TYPE_CHECKING:
    from ..explorer.session import Dataset
    from ..explorer.state import ViewState
    from ..geometry import CoordinateMapper

_AXIS_WIDTH = 2
_REFERENCE_WIDTH = 1
_HIGHLIGHT_WIDTH = 2
_TICK_HALF = 5
_TICK_LABEL_OFFSET = 15


def _tick_values(lo: float, hi: float, step: int):
    value = math.ceil(lo / step) * step
    while value <= hi:
        yield value
        value += step


def _format_tick(value: float) -> str:
    return f"{value:g}"


def render_scene(
    canvas: Canvas,
    dataset: Dataset,
    mapper: CoordinateMapper,
    state: ViewState,
    colors: ColorScheme | None = None,
    tick_step: int = 10,
) -> None:
    """Redraw everything onto *canvas*.

    Holds no state of its own; calling it twice with the same inputs
    produces the same draw calls. Only the clear is issued for an empty
    dataset.
    """
    colors = colors or ColorScheme()
    width, height, pad = mapper.width, mapper.height, mapper.padding
    canvas.clear(width, height)
    if not dataset.points:
        return

    bounds = mapper.bounds
    zero_x, zero_y = mapper.origin_pixel

    # Axes
    canvas.line(zero_x, pad, zero_x, height - pad, color=colors.axis, width=_AXIS_WIDTH)
    canvas.line(pad, zero_y, width - pad, zero_y, color=colors.axis, width=_AXIS_WIDTH)

    # Ticks
    for value in _tick_values(bounds.min_x, bounds.max_x, tick_step):
        x = mapper.to_pixel_x(value)
        canvas.line(x, zero_y - _TICK_HALF, x, zero_y + _TICK_HALF,
                    color=colors.axis, width=_AXIS_WIDTH)
        canvas.text(x, zero_y + _TICK_LABEL_OFFSET, _format_tick(value), color=colors.tick_label)
    for value in _tick_values(bounds.min_y, bounds.max_y, tick_step):
        y = mapper.to_pixel_y(value)
        canvas.line(zero_x - _TICK_HALF, y, zero_x + _TICK_HALF, y,
                    color=colors.axis, width=_AXIS_WIDTH)
        canvas.text(zero_x - _TICK_LABEL_OFFSET, y, _format_tick(value), color=colors.tick_label)

    selected = state.selected
    if selected is not None:
        sx, sy = mapper.to_pixel(selected)
        canvas.line(sx, pad, sx, height - pad, color=colors.reference, width=_REFERENCE_WIDTH)
        canvas.line(pad, sy, width - pad, sy, color=colors.reference, width=_REFERENCE_WIDTH)

    shapes = dataset.config
    for point in dataset.points:
        x, y = mapper.to_pixel(point)
        canvas.marker(x, y, shapes.shape_for(point.label),
                      fill=point_color(point, state, colors))

    # Selected point on top, default fill with an outline.
    if selected is not None:
        canvas.marker(sx, sy, shapes.shape_for(selected.label), fill=colors.default,
                      stroke=colors.highlight, stroke_width=_HIGHLIGHT_WIDTH)
