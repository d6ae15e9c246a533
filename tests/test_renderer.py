"""Scene rendering onto a recording canvas."""

import pytest

from scatter_viewer.config import DatasetConfig
from scatter_viewer.explorer.session import Dataset
from scatter_viewer.explorer.state import IDLE, ViewState
from scatter_viewer.geometry import Bounds, CoordinateMapper, Point
from scatter_viewer.visualization.canvas import RecordingCanvas
from scatter_viewer.visualization.renderer import render_scene

SHAPES = {"a": "circle", "b": "square", "c": "triangle"}
A = Point(0, 0, "a")
B = Point(10, 10, "b")
C = Point(-10, 10, "c")


def scene(points, state=IDLE, origin_mode="data-zero", shape_map=SHAPES):
    dataset = Dataset(DatasetConfig("d", origin_mode=origin_mode, shape_map=shape_map),
                      tuple(points))
    mapper = CoordinateMapper(Bounds.from_points(points), 800, 600, 50, origin_mode)
    canvas = RecordingCanvas()
    render_scene(canvas, dataset, mapper, state)
    return canvas, mapper


def test_empty_dataset_only_clears():
    canvas, _ = scene([])
    assert canvas.ops() == ["clear"]


def test_draw_order_with_selection():
    canvas, _ = scene([A, B, C], ViewState(selected=A, anchor=(1, 1)))
    assert canvas.ops() == (
        ["clear", "line", "line"]
        + ["line", "text"] * 3      # x ticks -10, 0, 10
        + ["line", "text"] * 2      # y ticks 0, 10
        + ["line", "line"]          # reference lines
        + ["marker"] * 3
        + ["marker"]                # highlight
    )


def test_tick_labels():
    canvas, _ = scene([A, B, C])
    assert [c.args["text"] for c in canvas.of("text")] == ["-10", "0", "10", "0", "10"]


def test_axes_cross_at_data_zero():
    canvas, mapper = scene([A, B, C])
    vertical, horizontal = canvas.of("line")[:2]
    assert vertical.args["x0"] == pytest.approx(mapper.to_pixel_x(0))
    assert horizontal.args["y0"] == pytest.approx(mapper.to_pixel_y(0))
    assert vertical.args["color"] == "gray"
    assert vertical.args["width"] == 2


def test_axes_pinned_to_corner():
    canvas, _ = scene([Point(15, 25, "a"), Point(35, 45, "b")], origin_mode="corner")
    vertical, horizontal = canvas.of("line")[:2]
    assert vertical.args["x0"] == 50
    assert horizontal.args["y0"] == 550


def test_reference_lines_through_selected_point():
    canvas, mapper = scene([A, B, C], ViewState(selected=B, anchor=(1, 1)))
    sx, sy = mapper.to_pixel(B)
    refs = [c for c in canvas.of("line") if c.args["color"] == "lightgray"]
    assert len(refs) == 2
    assert refs[0].args["x0"] == refs[0].args["x1"] == pytest.approx(sx)
    assert refs[1].args["y0"] == refs[1].args["y1"] == pytest.approx(sy)


def test_quadrant_colours_and_highlight():
    canvas, _ = scene([A, B, C], ViewState(selected=A, anchor=(1, 1)))
    markers = canvas.of("marker")
    assert [m.args["fill"] for m in markers[:3]] == ["blue", "purple", "orange"]
    highlight = markers[-1].args
    assert highlight["shape"] == "circle"
    assert highlight["fill"] == "red"
    assert highlight["stroke"] == "blue"
    assert highlight["stroke_width"] == 2


def test_shapes_follow_dataset_vocabulary():
    canvas, _ = scene([Point(1, 1, "foo"), Point(2, 2, "bar"), Point(3, 3, "zzz")],
                      shape_map={"foo": "square", "bar": "triangle"})
    assert [m.args["shape"] for m in canvas.of("marker")] == ["square", "triangle", "circle"]


def test_no_selection_draws_default_colour_without_highlight():
    canvas, _ = scene([A, B, C])
    markers = canvas.of("marker")
    assert len(markers) == 3
    assert all(m.args["fill"] == "red" and m.args["stroke"] is None for m in markers)


def test_rendering_is_repeatable():
    state = ViewState(selected=A, neighbors=(B,), anchor=(1, 1))
    first, _ = scene([A, B, C], state)
    second, _ = scene([A, B, C], state)
    assert first.calls == second.calls
