"""Point colour scheme and the colour precedence rules."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Tuple

from matplotlib import colors as mcolors

from ..geometry import Point, same_position

if TYPE_CHECKING:
    from ..explorer.state import ViewState


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert any matplotlib colour spec (``'#1f77b4'``, ``'pink'``) to ``(R, G, B)``."""
    rgb_float = mcolors.to_rgb(color)
    return tuple(int(round(c * 255)) for c in rgb_float)


@dataclass(frozen=True)
class ColorScheme:
    """Named colours used by the renderer.

    Every field must be a colour matplotlib understands; the check runs at
    construction so a typo fails at start-up rather than mid-render.
    """

    default: str = "red"
    selected: str = "blue"
    neighbor: str = "green"
    muted: str = "gray"
    top_right: str = "purple"
    top_left: str = "orange"
    bottom_left: str = "pink"
    bottom_right: str = "cyan"
    axis: str = "gray"
    reference: str = "lightgray"
    tick_label: str = "black"
    highlight: str = "blue"

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not mcolors.is_color_like(value):
                raise ValueError(f"Invalid colour for '{f.name}': {value!r}")


def point_color(point: Point, state: ViewState, colors: ColorScheme) -> str:
    """Return the fill colour for *point* under *state*.

    Rules are checked top to bottom and the first match wins: no selection,
    selected (by position), neighbour (by identity), muted while neighbours
    are shown, then the quadrant relative to the selected point.
    """
    selected = state.selected
    if selected is None:
        return colors.default
    if same_position(point, selected):
        return colors.selected
    if any(point is n for n in state.neighbors):
        return colors.neighbor
    if state.neighbors:
        return colors.muted

    if point.x >= selected.x and point.y >= selected.y:
        return colors.top_right
    if point.x <= selected.x and point.y >= selected.y:
        return colors.top_left
    if point.x <= selected.x and point.y <= selected.y:
        return colors.bottom_left
    return colors.bottom_right
