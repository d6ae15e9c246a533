"""Click-driven selection state machine."""

import pytest

from scatter_viewer.explorer.state import (
    IDLE,
    MODE_IDLE,
    MODE_NEIGHBORS,
    MODE_QUADRANT,
    Click,
    InteractionStateMachine,
    ViewState,
    transition,
)
from scatter_viewer.geometry import Point
from scatter_viewer.neighbors import nearest


@pytest.fixture
def rig(line_points, make_mapper):
    machine = InteractionStateMachine()
    mapper = make_mapper(line_points)

    def click(point, modified=False):
        return machine.handle(Click(mapper.to_pixel(point), modified), line_points, mapper)

    return machine, mapper, click


def test_starts_idle():
    machine = InteractionStateMachine()
    assert machine.state is IDLE
    assert machine.state.mode == MODE_IDLE


def test_plain_click_from_idle_selects(rig, line_points):
    machine, mapper, click = rig
    p = line_points[2]
    assert click(p)
    assert machine.state.selected is p
    assert machine.state.neighbors == ()
    assert machine.state.anchor == mapper.to_pixel(p)
    assert machine.state.mode == MODE_QUADRANT


def test_plain_click_on_selected_toggles_off(rig, line_points):
    machine, _, click = rig
    click(line_points[2])
    assert click(line_points[2])
    assert machine.state == IDLE
    assert machine.state.anchor is None


def test_plain_click_on_other_moves_selection(rig, line_points):
    machine, _, click = rig
    click(line_points[2])
    click(line_points[5])
    assert machine.state.selected is line_points[5]
    assert machine.state.mode == MODE_QUADRANT


def test_modified_click_from_idle_shows_neighbors(rig, line_points):
    machine, mapper, click = rig
    click(line_points[3], modified=True)
    state = machine.state
    assert state.selected is line_points[3]
    assert [p.label for p in state.neighbors] == ["2", "4", "1", "5", "0"]
    assert state.anchor == mapper.to_pixel(line_points[3])
    assert state.mode == MODE_NEIGHBORS


def test_modified_click_in_quadrant_mode_never_toggles_off(rig, line_points):
    machine, _, click = rig
    p = line_points[3]
    click(p)
    click(p, modified=True)
    assert machine.state.selected is p
    assert list(machine.state.neighbors) == nearest(p, line_points)


def test_modified_click_on_selected_in_neighbor_mode_toggles_off(rig, line_points):
    machine, _, click = rig
    click(line_points[3], modified=True)
    click(line_points[3], modified=True)
    assert machine.state == IDLE


def test_modified_click_on_other_in_neighbor_mode_recomputes(rig, line_points):
    machine, _, click = rig
    click(line_points[3], modified=True)
    click(line_points[0], modified=True)
    assert machine.state.selected is line_points[0]
    assert [p.label for p in machine.state.neighbors] == ["1", "2", "3", "4", "5"]


@pytest.mark.parametrize("target", [3, 6])
def test_plain_click_in_neighbor_mode_enters_quadrant_mode(rig, line_points, target):
    machine, _, click = rig
    click(line_points[3], modified=True)
    click(line_points[target])
    assert machine.state.selected is line_points[target]
    assert machine.state.neighbors == ()
    assert machine.state.mode == MODE_QUADRANT


def test_miss_is_a_no_op(rig, line_points):
    machine, mapper, click = rig
    click(line_points[1])
    before = machine.state
    assert not machine.handle(Click((5, 5)), line_points, mapper)
    assert not machine.handle(Click((5, 5), modified=True), line_points, mapper)
    assert machine.state is before


def test_reset_returns_to_idle(rig, line_points):
    machine, _, click = rig
    click(line_points[3], modified=True)
    machine.reset()
    assert machine.state is IDLE


def test_toggle_matches_by_position_not_identity():
    selected = Point(1, 1, "a")
    twin = Point(1, 1, "b")
    state = ViewState(selected=selected, anchor=(0, 0))
    assert transition(state, twin, (0, 0), modified=False) is IDLE


def test_single_point_neighbor_mode_behaves_like_quadrant():
    p = Point(1, 1, "a")
    state = transition(IDLE, p, (3, 4), modified=True, neighbors=[])
    assert state.selected is p
    assert state.mode == MODE_QUADRANT
    # An empty neighbour set cannot toggle off with a modified click
    assert transition(state, p, (3, 4), modified=True).selected is p


def test_neighbors_require_selection():
    with pytest.raises(ValueError):
        ViewState(neighbors=(Point(0, 0, "a"),))
