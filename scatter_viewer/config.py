"""Viewer configuration: canvas geometry and per-dataset display records."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping

from .geometry import ORIGIN_CORNER, ORIGIN_DATA_ZERO, ORIGIN_MODES
from .visualization.colors import ColorScheme

SHAPES = ("circle", "square", "triangle")
DEFAULT_SHAPE = "circle"


@dataclass(frozen=True)
class CanvasConfig:
    """Fixed pixel geometry of the drawing surface."""

    width: int = 800
    height: int = 600
    padding: int = 50
    pick_tolerance: float = 10.0
    tick_step: int = 10
    neighbor_count: int = 5

    def __post_init__(self) -> None:
        if self.width <= 2 * self.padding or self.height <= 2 * self.padding:
            raise ValueError(
                f"Canvas {self.width}x{self.height} too small for padding {self.padding}"
            )
        if self.tick_step <= 0:
            raise ValueError(f"tick_step must be positive, got {self.tick_step}")


@dataclass(frozen=True)
class DatasetConfig:
    """Display record attached to a dataset key.

    Parameters
    ----------
    key : str
        Dataset identifier.
    title : str
        Human-readable name shown in the toggle and status bar.
    origin_mode : str
        ``"data-zero"`` crosses the axes at data (0, 0); ``"corner"`` pins
        them to the bottom-left corner of the plot area.
    shape_map : Mapping[str, str]
        Label -> marker shape (one of :data:`SHAPES`).
    source : str, optional
        Explicit path of the CSV file. When ``None`` the loader derives it
        from the key.
    """

    key: str
    title: str = ""
    origin_mode: str = ORIGIN_DATA_ZERO
    shape_map: Mapping[str, str] = field(default_factory=dict)
    source: str | None = None

    def __post_init__(self) -> None:
        if self.origin_mode not in ORIGIN_MODES:
            raise ValueError(
                f"Invalid origin mode '{self.origin_mode}'. Choose one of {ORIGIN_MODES}."
            )
        bad = {s for s in self.shape_map.values() if s not in SHAPES}
        if bad:
            raise ValueError(f"Unknown shapes {sorted(bad)} for dataset '{self.key}'")
        if not self.title:
            object.__setattr__(self, "title", self.key)

    def shape_for(self, label: str) -> str:
        return self.shape_map.get(label, DEFAULT_SHAPE)


DEFAULT_DATASETS: Dict[str, DatasetConfig] = {
    "data1": DatasetConfig(
        key="data1",
        title="Data 1",
        origin_mode=ORIGIN_DATA_ZERO,
        shape_map={"a": "circle", "b": "square", "c": "triangle"},
    ),
    "data2": DatasetConfig(
        key="data2",
        title="Data 2",
        origin_mode=ORIGIN_CORNER,
        shape_map={"foo": "circle", "baz": "square", "bar": "triangle"},
    ),
}


@dataclass(frozen=True)
class ViewerConfig:
    """Everything needed to build a :class:`~scatter_viewer.explorer.ViewerSession`."""

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    colors: ColorScheme = field(default_factory=ColorScheme)
    datasets: Mapping[str, DatasetConfig] = field(
        default_factory=lambda: dict(DEFAULT_DATASETS)
    )
    data_dir: Path = Path("data")
    initial_dataset: str = "data1"

    def dataset(self, key: str) -> DatasetConfig:
        """Return the record for *key*, or a default record for unknown keys."""
        return self.datasets.get(key) or DatasetConfig(key=key)
