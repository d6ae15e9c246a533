"""Dataset loading.

Datasets are headerless CSV files with one ``x,y,label`` row per point.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from .config import ViewerConfig
from .geometry import Point

logger = logging.getLogger(__name__)

# x, y, label
N_FIELDS = 3


class DatasetLoadError(Exception):
    """Raised when a dataset file cannot be read at all."""


def frame_to_points(frame: pd.DataFrame) -> List[Point]:
    """Convert a raw string frame (columns 0, 1, 2) into points.

    Rows whose x or y is not a finite number are dropped; the rest keep
    their file order. A missing label becomes the empty string.
    """
    frame = frame.reindex(columns=range(N_FIELDS))
    x = pd.to_numeric(frame[0], errors="coerce").to_numpy(dtype=float)
    y = pd.to_numeric(frame[1], errors="coerce").to_numpy(dtype=float)
    labels = frame[2].fillna("").astype(str).str.strip()

    valid = np.isfinite(x) & np.isfinite(y)
    n_bad = int((~valid).sum())
    if n_bad:
        logger.warning("dropped %d malformed row(s) of %d", n_bad, len(frame))

    return [
        Point(float(xi), float(yi), label)
        for xi, yi, label, ok in zip(x, y, labels, valid)
        if ok
    ]


def _first_fields(fields: List[str]) -> List[str]:
    """Keep the leading x, y, label fields of a row that has extra ones."""
    return fields[:N_FIELDS]


def load_points(path: str | os.PathLike) -> List[Point]:
    """Read a headerless ``x,y,label`` CSV file.

    Every row is read as three fields whatever its own field count: short
    rows get empty labels and extra trailing fields are ignored, so only
    the x/y check in :func:`frame_to_points` drops rows.

    Parameters
    ----------
    path : str or PathLike
        File to read.

    Returns
    -------
    list[Point]
        Parsed points in file order. An empty file yields an empty list.

    Raises
    ------
    DatasetLoadError
        If the file is missing or cannot be parsed as CSV.
    """
    try:
        frame = pd.read_csv(
            path,
            header=None,
            names=list(range(N_FIELDS)),
            index_col=False,
            engine="python",
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
            on_bad_lines=_first_fields,
        )
    except pd.errors.EmptyDataError:
        logger.info("%s is empty", path)
        return []
    except (OSError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(f"Could not read dataset {path}: {exc}") from exc

    points = frame_to_points(frame)
    logger.info("loaded %d point(s) from %s", len(points), path)
    return points


class DatasetLoader:
    """Resolves dataset keys to files and reads them."""

    def __init__(self, config: ViewerConfig) -> None:
        self._config = config

    def locate(self, key: str) -> Path:
        """Return the file backing *key*: its configured source or ``<data_dir>/<key>.csv``."""
        source = self._config.dataset(key).source
        if source:
            return Path(source)
        return Path(self._config.data_dir) / f"{key}.csv"

    def load(self, key: str) -> List[Point]:
        return load_points(self.locate(key))
