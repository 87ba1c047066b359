"""Evaluation weights, run measurement, and board scoring."""

import random

from Kalida_AI.Board import Board, O, X
from Kalida_AI.ai import heuristic


def test_load_weights_falls_back_to_defaults(tmp_path):
    assert heuristic.load_weights(tmp_path / "missing.yaml") == heuristic.DEFAULT_WEIGHTS


def test_load_weights_overrides_known_keys(tmp_path):
    path = tmp_path / "weights.yaml"
    path.write_text("weights:\n  four_open: 120\n  unknown_key: 3\n", encoding="utf-8")
    weights = heuristic.load_weights(path)
    assert weights["four_open"] == 120
    assert weights["win"] == heuristic.DEFAULT_WEIGHTS["win"]
    assert "unknown_key" not in weights


def test_packaged_weights_file_loads():
    weights = heuristic.load_weights()
    assert set(weights) == set(heuristic.DEFAULT_WEIGHTS)


def test_measure_run_counts_open_ends():
    b = Board()
    b.place(2, 2, X)
    b.place(2, 3, X)
    shape = heuristic.measure_run(b, 2, 2, 0, 1, X)
    assert shape.count == 2
    assert shape.open_ends == 2
    assert heuristic.sequence_value(shape, 0, 1, 6, False, heuristic.DEFAULT_WEIGHTS) == 5

    b.place(2, 1, O)
    shape = heuristic.measure_run(b, 2, 2, 0, 1, X)
    assert shape.open_ends == 1


def test_wrapped_four_is_broken_under_missing_teeth():
    b = Board()
    for col in (4, 5, 0, 1):
        b.place(2, col, X)
    shape = heuristic.measure_run(b, 2, 0, 0, 1, X, wrap_enabled=True)
    assert shape.count == 4
    assert shape.wrapped
    weights = heuristic.DEFAULT_WEIGHTS
    assert heuristic.sequence_value(shape, 0, 1, 6, True, weights) == weights["four_broken"]
    assert heuristic.sequence_value(shape, 0, 1, 6, False, weights) == weights["four_open"]

    plain = heuristic.measure_run(b, 2, 0, 0, 1, X)
    assert plain.count == 2
    assert not plain.wrapped


def test_bounce_value_needs_a_turn():
    b = Board()
    for cell in [(2, 1), (1, 2), (0, 3), (1, 4), (2, 5)]:
        b.place(*cell, X)
    weights = heuristic.DEFAULT_WEIGHTS
    assert heuristic.bounce_value(b, 0, 3, 1, 1, X, weights) == weights["bounce_five"]

    straight = Board()
    for cell in [(1, 1), (2, 2), (3, 3)]:
        straight.place(*cell, X)
    assert heuristic.bounce_value(straight, 2, 2, 1, 1, X, weights) == 0


def test_evaluate_board_is_zero_sum_and_deterministic():
    b = Board()
    for cell in [(1, 1), (1, 2), (1, 3)]:
        b.place(*cell, X)
    b.place(4, 4, O)
    score = heuristic.evaluate_board(b, X, O, True, True, False)
    assert score > 0
    assert heuristic.evaluate_board(b, X, O, True, True, False) == score
    assert heuristic.evaluate_board(b, O, X, True, True, False) == -score


def test_empty_board_scores_zero():
    assert heuristic.evaluate_board(Board(), X, O) == 0


def test_sampled_evaluation_uses_rng():
    b = Board()
    for cell in [(0, 0), (0, 1), (2, 2), (3, 3), (5, 0)]:
        b.place(*cell, X)
    first = heuristic.evaluate_board(b, X, O, sample_limit=2, rng=random.Random(4))
    second = heuristic.evaluate_board(b, X, O, sample_limit=2, rng=random.Random(4))
    assert first == second
