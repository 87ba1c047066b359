"""Tests for per-move timeouts, referee enforcement and the knight-move opening."""

import time
import pytest

from Kalida_AI.Board import Board, O, X
from Kalida_AI.engine import referee


def test_timeout_rejected():
    b = Board()
    deadline = time.time() - 0.1
    with pytest.raises(TimeoutError):
        referee.check_move((3, 3), b, deadline)


def test_valid_move_passes():
    b = Board()
    deadline = time.time() + 1
    assert referee.check_move((3, 3), b, deadline) is True
    assert referee.check_move((0, 5), b) is True


@pytest.mark.parametrize("move", [None, (6, 0), (0, -1)])
def test_missing_or_out_of_range_move_rejected(move):
    with pytest.raises(ValueError):
        referee.check_move(move, Board())


def test_occupied_cell_rejected():
    b = Board()
    b.place(2, 2, X)
    with pytest.raises(ValueError, match="occupied"):
        referee.check_move((2, 2), b)


def knight_opening():
    b = Board()
    b.place(2, 2, X)
    b.place(0, 0, O)
    return b


def test_knight_rule_restricts_second_x_stone():
    b = knight_opening()
    moves = referee.required_moves(b, True)
    assert moves == [(0, 1), (0, 3), (1, 0), (1, 4), (3, 0), (3, 4), (4, 1), (4, 3)]
    assert referee.check_move((4, 3), b, legal_moves=moves) is True
    with pytest.raises(ValueError, match="Knight"):
        referee.check_move((2, 3), b, legal_moves=moves)


def test_knight_rule_only_applies_when_enabled_and_on_time():
    b = knight_opening()
    assert referee.required_moves(b, False) is None

    early = Board()
    early.place(2, 2, X)
    assert referee.required_moves(early, True) is None

    b.place(4, 3, X)
    assert referee.required_moves(b, True) is None


def test_knight_moves_skip_taken_cells():
    b = Board()
    b.place(0, 0, X)
    assert referee.knight_moves(b, (0, 0)) == [(1, 2), (2, 1)]
    b.place(1, 2, O)
    b.place(2, 1, O)
    assert referee.knight_moves(b, (0, 0)) == []
