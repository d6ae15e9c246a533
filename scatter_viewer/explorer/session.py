"""Top-level view model: active dataset, selection state and load sequencing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

from ..config import DatasetConfig, ViewerConfig
from ..geometry import Bounds, CoordinateMapper, Pixel, Point
from ..io import DatasetLoader, DatasetLoadError
from .state import Click, InteractionStateMachine, ViewState

logger = logging.getLogger(__name__)

Listener = Callable[["ViewerSession"], None]


@dataclass(frozen=True)
class Dataset:
    """A loaded point collection together with its display record."""

    config: DatasetConfig
    points: Tuple[Point, ...] = field(default_factory=tuple)

    @property
    def key(self) -> str:
        return self.config.key


class ViewerSession:
    """Single-user viewer state.

    Holds the displayed dataset and the :class:`InteractionStateMachine`.
    Every change is followed by exactly one call to each subscribed
    listener, which is where the scene gets redrawn.

    Loads are sequenced: :meth:`switch_dataset` hands out a ticket and only
    the most recent ticket may :meth:`deliver`. Until then the previous
    points stay on screen.
    """

    def __init__(
        self,
        config: ViewerConfig | None = None,
        loader: DatasetLoader | None = None,
    ) -> None:
        self.config = config or ViewerConfig()
        self.loader = loader or DatasetLoader(self.config)
        canvas = self.config.canvas
        self.machine = InteractionStateMachine(
            neighbor_count=canvas.neighbor_count,
            tolerance=canvas.pick_tolerance,
        )
        self._dataset = Dataset(self.config.dataset(self.config.initial_dataset))
        self._requested_key = self._dataset.key
        self._mapper = self._build_mapper(self._dataset)
        self._ticket = 0
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------ #
    #  Accessors
    # ------------------------------------------------------------------ #

    @property
    def dataset(self) -> Dataset:
        """The dataset currently on screen."""
        return self._dataset

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._dataset.points

    @property
    def requested_key(self) -> str:
        """Key most recently asked for; may still be loading."""
        return self._requested_key

    @property
    def loading(self) -> bool:
        return self._requested_key != self._dataset.key

    @property
    def view_state(self) -> ViewState:
        return self.machine.state

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)

    def _build_mapper(self, dataset: Dataset) -> CoordinateMapper:
        canvas = self.config.canvas
        return CoordinateMapper(
            Bounds.from_points(dataset.points, canvas.tick_step),
            width=canvas.width,
            height=canvas.height,
            padding=canvas.padding,
            origin_mode=dataset.config.origin_mode,
        )

    # ------------------------------------------------------------------ #
    #  Dataset lifecycle
    # ------------------------------------------------------------------ #

    def switch_dataset(self, key: str) -> int:
        """Request *key*; clear the selection now and return the load ticket."""
        self._ticket += 1
        self._requested_key = key
        self.machine.reset()
        logger.info("switching to dataset '%s' (ticket %d)", key, self._ticket)
        self._notify()
        return self._ticket

    def deliver(self, ticket: int, points: Sequence[Point]) -> bool:
        """Install *points* for *ticket*; stale tickets are ignored.

        Returns ``True`` if the points were applied.
        """
        if ticket != self._ticket:
            logger.info("discarding stale load (ticket %d, current %d)", ticket, self._ticket)
            return False
        self._dataset = Dataset(self.config.dataset(self._requested_key), tuple(points))
        self._mapper = self._build_mapper(self._dataset)
        self.machine.reset()
        logger.info("dataset '%s' ready: %d points", self._dataset.key, len(self._dataset.points))
        self._notify()
        return True

    def fail(self, ticket: int, error: Exception) -> None:
        """Record a failed load. The displayed dataset is left as it was."""
        if ticket != self._ticket:
            logger.info("ignoring failure of stale load (ticket %d)", ticket)
            return
        logger.error("loading dataset '%s' failed: %s", self._requested_key, error)
        self._requested_key = self._dataset.key

    def load(self, key: str) -> List[Point]:
        """Switch to *key* and read it synchronously through the loader.

        Raises
        ------
        DatasetLoadError
            If the loader fails; the previous points remain displayed.
        """
        ticket = self.switch_dataset(key)
        try:
            points = self.loader.load(key)
        except DatasetLoadError as exc:
            self.fail(ticket, exc)
            raise
        self.deliver(ticket, points)
        return points

    # ------------------------------------------------------------------ #
    #  Interaction
    # ------------------------------------------------------------------ #

    def click(self, pixel: Pixel, modified: bool = False) -> bool:
        """Feed a canvas click to the state machine; ``True`` if it changed state."""
        changed = self.machine.handle(Click(pixel, modified), self.points, self._mapper)
        if changed:
            self._notify()
        return changed
