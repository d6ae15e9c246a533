"""scatter_viewer — interactive 2-D scatter plot with quadrant and neighbour highlighting."""

from .config import CanvasConfig, DatasetConfig, ViewerConfig, DEFAULT_DATASETS
from .geometry import Bounds, CoordinateMapper, Point, same_position
from .io import DatasetLoader, DatasetLoadError, load_points
from .picking import pick
from .neighbors import nearest
from .visualization.colors import ColorScheme, point_color
from .visualization.renderer import render_scene
from .explorer import Click, InteractionStateMachine, ViewerSession, ViewState

__all__ = [
    # config
    "CanvasConfig",
    "DatasetConfig",
    "ViewerConfig",
    "DEFAULT_DATASETS",
    # geometry
    "Point",
    "Bounds",
    "CoordinateMapper",
    "same_position",
    # io
    "DatasetLoader",
    "DatasetLoadError",
    "load_points",
    # interaction
    "pick",
    "nearest",
    "Click",
    "ViewState",
    "InteractionStateMachine",
    "ViewerSession",
    # visualization
    "ColorScheme",
    "point_color",
    "render_scene",
]
