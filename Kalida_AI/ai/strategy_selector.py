"""Difficulty label -> strategy registry with a lazily filled per-selector cache."""

import random

from . import strategies

try:
    from utils.logger import log_event
except ImportError:
    from Kalida_AI.utils.logger import log_event


STRATEGIES = {
    "easy": strategies.RandomStrategy,
    "medium": strategies.TacticalRandomStrategy,
    "hard": strategies.GreedyStrategy,
    "extrahard": strategies.ShallowMinimaxStrategy,
    "impossible": strategies.ImpossibleStrategy,
}
DIFFICULTY_LEVELS = tuple(STRATEGIES)
DEFAULT_DIFFICULTY = "medium"


def normalize_difficulty(label):
    """Lower-cased known label; unknown labels fall back to DEFAULT_DIFFICULTY with a warning."""
    key = str(label or "").strip().lower()
    if key in STRATEGIES:
        return key
    log_event(f"Unknown difficulty {label!r}; using {DEFAULT_DIFFICULTY}", level="WARNING")
    return DEFAULT_DIFFICULTY


class StrategySelector:
    """
    Hands out one strategy instance per difficulty label, built on first use.

    `seed` feeds a private random.Random shared by the randomized tiers;
    `options` maps a label to extra constructor arguments (from settings).
    """

    def __init__(self, seed=None, rng=None, options=None):
        self.rng = rng or random.Random(seed)
        self.options = options or {}
        self._cache = {}

    def get_strategy(self, difficulty):
        key = normalize_difficulty(difficulty)
        strategy = self._cache.get(key)
        if strategy is None:
            strategy = STRATEGIES[key](rng=self.rng, **self.options.get(key, {}))
            self._cache[key] = strategy
        return strategy

    def get_move(self, board, difficulty, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
        """Move for `player` at the given difficulty, or None when the board is full."""
        strategy = self.get_strategy(difficulty)
        return strategy.get_move(board, player, opponent, bounce_enabled, missing_teeth_enabled, wrap_enabled)


_default_selector = None


def get_move(board, difficulty, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
    """Module-level convenience over a process-wide StrategySelector."""
    global _default_selector
    if _default_selector is None:
        _default_selector = StrategySelector()
    return _default_selector.get_move(board, difficulty, player, opponent, bounce_enabled, missing_teeth_enabled, wrap_enabled)
