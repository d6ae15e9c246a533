"""Selection state and the click-driven state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..geometry import CoordinateMapper, Pixel, Point, same_position
from ..neighbors import nearest
from ..picking import pick

logger = logging.getLogger(__name__)

MODE_IDLE = "idle"
MODE_QUADRANT = "quadrant"
MODE_NEIGHBORS = "neighbors"


@dataclass(frozen=True)
class ViewState:
    """Immutable snapshot of the current selection.

    The mode is derived: nothing selected is idle, a selection with
    neighbours is neighbour mode, any other selection is quadrant mode.
    """

    selected: Point | None = None
    neighbors: Tuple[Point, ...] = ()
    anchor: Pixel | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "neighbors", tuple(self.neighbors))
        if self.neighbors and self.selected is None:
            raise ValueError("neighbors require a selected point")

    @property
    def mode(self) -> str:
        if self.selected is None:
            return MODE_IDLE
        return MODE_NEIGHBORS if self.neighbors else MODE_QUADRANT


IDLE = ViewState()


@dataclass(frozen=True)
class Click:
    """A pointer click in canvas pixels; *modified* is the held-modifier variant."""

    pixel: Pixel
    modified: bool = False


def transition(
    state: ViewState,
    hit: Point,
    anchor: Pixel,
    *,
    modified: bool,
    neighbors: Sequence[Point] = (),
) -> ViewState:
    """Next state after a click that hit *hit*.

    *neighbors* is only consulted when the result is neighbour mode. A
    click on the selected point toggles it off only when the click kind
    matches the current mode; a modified click in quadrant mode always
    re-enters neighbour mode.
    """
    selected = state.selected
    same = selected is not None and same_position(selected, hit)

    if not modified:
        if same and not state.neighbors:
            return IDLE
        return ViewState(selected=hit, anchor=anchor)

    if same and state.neighbors:
        return IDLE
    return ViewState(selected=hit, neighbors=tuple(neighbors), anchor=anchor)


class InteractionStateMachine:
    """Owns the :class:`ViewState` and applies click events to it.

    Parameters
    ----------
    neighbor_count : int
        How many neighbours a modified click highlights.
    tolerance : float
        Pick window half-size in pixels.
    """

    def __init__(self, neighbor_count: int = 5, tolerance: float = 10.0) -> None:
        self.neighbor_count = neighbor_count
        self.tolerance = tolerance
        self._state = IDLE

    @property
    def state(self) -> ViewState:
        return self._state

    def reset(self) -> None:
        self._state = IDLE

    def handle(
        self,
        event: Click,
        points: Sequence[Point],
        mapper: CoordinateMapper,
    ) -> bool:
        """Apply *event*; return ``True`` if the state changed.

        A click that hits no point leaves the state untouched.
        """
        hit = pick(event.pixel, points, mapper, self.tolerance)
        if hit is None:
            return False

        found: Sequence[Point] = ()
        if event.modified:
            found = nearest(hit, points, self.neighbor_count)

        previous = self._state
        self._state = transition(
            previous, hit, event.pixel, modified=event.modified, neighbors=found,
        )
        logger.debug(
            "%s click on (%g, %g): %s -> %s",
            "modified" if event.modified else "plain",
            hit.x, hit.y, previous.mode, self._state.mode,
        )
        return True
