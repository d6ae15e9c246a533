import pytest

from scatter_viewer.config import CanvasConfig, DatasetConfig, ViewerConfig
from scatter_viewer.geometry import Bounds, CoordinateMapper, Point


@pytest.fixture
def line_points():
    """Seven points on y=0 at x = 0..6, labelled by their x."""
    return [Point(float(x), 0.0, str(x)) for x in range(7)]


@pytest.fixture
def make_mapper():
    def _make(points, origin_mode="data-zero"):
        return CoordinateMapper(Bounds.from_points(points), 800, 600, 50, origin_mode)
    return _make


class StaticLoader:
    """Loader stand-in returning canned point lists, or raising."""

    def __init__(self, data=None, error=None):
        self.data = data or {}
        self.error = error
        self.requested = []

    def load(self, key):
        self.requested.append(key)
        if self.error is not None:
            raise self.error
        return list(self.data[key])


@pytest.fixture
def viewer_config(tmp_path):
    return ViewerConfig(
        canvas=CanvasConfig(),
        datasets={
            "alpha": DatasetConfig("alpha", "Alpha", "data-zero",
                                   {"a": "circle", "b": "square", "c": "triangle"}),
            "beta": DatasetConfig("beta", "Beta", "corner",
                                  {"foo": "circle", "baz": "square", "bar": "triangle"}),
        },
        data_dir=tmp_path,
        initial_dataset="alpha",
    )
