"""Minimal drawing surface the renderer targets.

Backends (Plotly figure, matplotlib axes, the recorder below) implement the
same four calls in pixel coordinates with Y growing downwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol

# Half-extent of each marker shape in pixels.
MARKER_EXTENT = {"circle": 5, "square": 5, "triangle": 8}


class Canvas(Protocol):
    def clear(self, width: int, height: int) -> None: ...

    def line(self, x0: float, y0: float, x1: float, y1: float, *,
             color: str, width: float) -> None: ...

    def text(self, x: float, y: float, text: str, *, color: str) -> None: ...

    def marker(self, x: float, y: float, shape: str, *, fill: str,
               stroke: str | None = None, stroke_width: float = 0.0) -> None: ...


@dataclass
class DrawCall:
    op: str
    args: Dict[str, Any]


@dataclass
class RecordingCanvas:
    """Canvas that just remembers what was drawn, in order."""

    calls: List[DrawCall] = field(default_factory=list)

    def clear(self, width, height):
        self.calls = [DrawCall("clear", {"width": width, "height": height})]

    def line(self, x0, y0, x1, y1, *, color, width):
        self.calls.append(DrawCall("line", dict(x0=x0, y0=y0, x1=x1, y1=y1,
                                                color=color, width=width)))

    def text(self, x, y, text, *, color):
        self.calls.append(DrawCall("text", dict(x=x, y=y, text=text, color=color)))

    def marker(self, x, y, shape, *, fill, stroke=None, stroke_width=0.0):
        self.calls.append(DrawCall("marker", dict(x=x, y=y, shape=shape, fill=fill,
                                                  stroke=stroke, stroke_width=stroke_width)))

    def ops(self) -> List[str]:
        return [c.op for c in self.calls]

    def of(self, op: str) -> List[DrawCall]:
        return [c for c in self.calls if c.op == op]
