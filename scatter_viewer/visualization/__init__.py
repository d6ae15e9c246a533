"""Scene rendering and its drawing backends."""

from .canvas import MARKER_EXTENT, Canvas, DrawCall, RecordingCanvas
from .colors import ColorScheme, hex_to_rgb, point_color
from .export import MatplotlibCanvas, export_png
from .renderer import render_scene

__all__ = [
    "Canvas",
    "DrawCall",
    "RecordingCanvas",
    "MARKER_EXTENT",
    "ColorScheme",
    "hex_to_rgb",
    "point_color",
    "render_scene",
    "MatplotlibCanvas",
    "export_png",
]
