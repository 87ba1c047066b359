"""Clipped, wrap, and bounce addressing."""

import pytest

from Kalida_AI.engine import geometry
from Kalida_AI.engine.geometry import BOUNCE, CLIPPED, WRAP


def test_clipped_step_leaves_board():
    assert geometry.step(0, 4, 0, 1, 1, CLIPPED, 6) == (0, 5)
    assert geometry.step(0, 5, 0, 1, 1, CLIPPED, 6) is None


def test_wrap_step_is_toroidal():
    assert geometry.step(0, 5, 0, 1, 1, WRAP, 6) == (0, 0)
    assert geometry.step(0, 0, 1, 1, -1, WRAP, 6) == (5, 5)
    assert geometry.step(4, 1, 1, -1, 3, WRAP, 6) == (1, 4)


def test_bounce_reflects_off_top_edge():
    # (1, 2) -> (0, 3) -> reflect -> (1, 4)
    assert geometry.step(1, 2, -1, 1, 2, BOUNCE, 6) == (1, 4)


def test_bounce_at_corner_is_rejected():
    assert geometry.step(1, 4, -1, 1, 2, BOUNCE, 6) is None
    assert geometry.step(5, 5, 1, 1, 1, BOUNCE, 6) is None


def test_bounce_on_orthogonal_acts_clipped():
    assert geometry.step(0, 2, 0, 1, 1, BOUNCE, 6) == (0, 3)
    assert geometry.step(0, 5, 0, 1, 1, BOUNCE, 6) is None


def test_bounce_allows_two_reflections_only():
    # (3, 2) up-left: (2, 1), (1, 0), reflect (0, 1), reflect (1, 2)
    assert geometry.step(3, 2, -1, -1, 4, BOUNCE, 6) == (1, 2)


def test_walk_marks_edge_crossings():
    assert list(geometry.walk(0, 4, 0, 1, 6, WRAP, max_steps=3)) == [
        (0, 5, False),
        (0, 0, True),
        (0, 1, False),
    ]


def test_walk_stops_at_visited_cells():
    visited = {(0, 0), (0, 2)}
    assert list(geometry.walk(0, 0, 0, 1, 6, WRAP, visited=visited)) == [(0, 1, False)]


def test_line_mode_prefers_bounce_on_diagonals():
    assert geometry.line_mode(1, 1, True, True) == BOUNCE
    assert geometry.line_mode(0, 1, True, True) == WRAP
    assert geometry.line_mode(0, 1, True, False) is None
    assert geometry.line_mode(1, -1, False, False) is None


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        list(geometry.walk(0, 0, 0, 1, 6, "spiral"))
