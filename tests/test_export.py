"""matplotlib export of the scene."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from scatter_viewer.explorer.session import ViewerSession
from scatter_viewer.geometry import Point
from scatter_viewer.visualization.export import MatplotlibCanvas, export_png

from conftest import StaticLoader

POINTS = [Point(0, 0, "a"), Point(10, 10, "b"), Point(-10, 10, "c")]


def test_canvas_uses_pixel_coordinates():
    fig, ax = plt.subplots()
    try:
        canvas = MatplotlibCanvas(ax)
        canvas.clear(800, 600)
        assert ax.get_xlim() == (0, 800)
        assert ax.get_ylim() == (600, 0)
        canvas.marker(10, 10, "circle", fill="red")
        canvas.marker(20, 20, "square", fill="red", stroke="blue", stroke_width=2)
        canvas.marker(30, 30, "triangle", fill="red")
        canvas.line(0, 0, 5, 5, color="gray", width=2)
        canvas.text(5, 5, "10", color="black")
        assert len(ax.patches) == 3
        assert len(ax.lines) == 1
        assert len(ax.texts) == 1
    finally:
        plt.close(fig)


def test_export_png_writes_file(viewer_config, tmp_path):
    session = ViewerSession(viewer_config, StaticLoader({"alpha": POINTS}))
    session.load("alpha")
    session.click(session.mapper.to_pixel(POINTS[0]), modified=True)
    out = tmp_path / "scene.png"
    export_png(session, out)
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
