"""Difficulty registry and the behaviour shared by every strategy tier."""

import pytest

from Kalida_AI.Board import Board, O, X
from Kalida_AI.ai import strategies, strategy_selector
from Kalida_AI.ai.strategy_selector import StrategySelector


DRAWN_ROWS = [
    "XXOOXX",
    "OOXXOO",
    "XXOOXX",
    "OOXXOO",
    "XXOOXX",
    "OOXXOO",
]


def blocking_position():
    """O threatens (1,0) and (1,5); X has nothing of its own."""
    b = Board()
    for col in range(1, 5):
        b.place(1, col, O)
    for cell in [(4, 0), (4, 2), (5, 5)]:
        b.place(*cell, X)
    return b


def test_selector_caches_and_ignores_case():
    selector = StrategySelector(seed=1)
    hard = selector.get_strategy("hard")
    assert selector.get_strategy("HARD") is hard
    assert isinstance(hard, strategies.GreedyStrategy)
    assert hard.label == "hard"


def test_unknown_label_falls_back_to_medium(capsys):
    selector = StrategySelector(seed=1)
    strategy = selector.get_strategy("legendary")
    assert isinstance(strategy, strategies.TacticalRandomStrategy)
    assert "WARNING" in capsys.readouterr().out
    assert selector.get_strategy("medium") is strategy


def test_selector_passes_options():
    selector = StrategySelector(seed=1, options={"medium": {"tactics_rate": 1.0}})
    assert selector.get_strategy("medium").tactics_rate == 1.0


@pytest.mark.parametrize("difficulty", strategy_selector.DIFFICULTY_LEVELS)
def test_every_tier_returns_an_empty_cell(difficulty):
    b = blocking_position()
    move = StrategySelector(seed=3).get_move(b, difficulty, X, O, True, True, False)
    assert move is not None
    assert b.is_empty_at(*move)


@pytest.mark.parametrize("difficulty", strategy_selector.DIFFICULTY_LEVELS)
def test_every_tier_returns_none_on_full_board(difficulty):
    b = Board.from_rows(DRAWN_ROWS)
    assert StrategySelector(seed=3).get_move(b, difficulty, X, O, True, True, True) is None


@pytest.mark.parametrize("difficulty", ["hard", "extrahard", "impossible"])
def test_stronger_tiers_block(difficulty):
    b = blocking_position()
    assert StrategySelector(seed=3).get_move(b, difficulty, X, O) == (1, 0)


def test_seeded_easy_is_reproducible():
    b = Board()
    b.place(2, 2, X)
    first = [StrategySelector(seed=7).get_move(b, "easy", O, X) for _ in range(3)]
    second = [StrategySelector(seed=7).get_move(b, "easy", O, X) for _ in range(3)]
    assert first == second


def test_medium_with_full_tactics_takes_the_win():
    b = Board()
    for col in range(4):
        b.place(1, col, X)
    for cell in [(4, 0), (4, 1), (5, 5)]:
        b.place(*cell, O)
    selector = StrategySelector(seed=2, options={"medium": {"tactics_rate": 1.0}})
    assert selector.get_move(b, "medium", X, O) == (1, 4)


def test_extrahard_claims_free_centre():
    b = Board()
    b.place(0, 0, X)
    assert StrategySelector(seed=4).get_move(b, "extrahard", O, X) == (3, 3)


def test_impossible_is_deterministic():
    b = Board()
    for cell in [(2, 2), (3, 3)]:
        b.place(*cell, X)
    for cell in [(2, 3), (3, 2)]:
        b.place(*cell, O)
    first = StrategySelector(seed=1).get_move(b, "impossible", X, O, True, True, False)
    second = StrategySelector(seed=99).get_move(b, "impossible", X, O, True, True, False)
    assert first == second
    assert b.is_empty_at(*first)


def test_module_level_get_move():
    b = Board()
    b.place(3, 3, X)
    move = strategy_selector.get_move(b, "easy", O, X)
    assert b.is_empty_at(*move)


def test_best_by_evaluation_skips_occupied_cells():
    b = Board()
    b.place(2, 2, X)
    assert strategies.best_by_evaluation(b, [(2, 2)], O, X) is None
    assert strategies.best_by_evaluation(b, [(2, 2), (2, 3)], O, X) == (2, 3)
