"""The five computer strategies, one class per difficulty tier, sharing a single get_move interface."""

import random

from . import heuristic, move_selector, opening_book, search_minimax, threats

try:
    from engine import win_checker
except ImportError:
    from Kalida_AI.engine import win_checker


CENTER_RADIUS = 1  # cells within this distance of the central block count as "centre"


def center_region(board):
    c = board.size // 2
    lo, hi = c - 1 - CENTER_RADIUS, c + CENTER_RADIUS
    return [(r, col) for r, col in board.empty_cells() if lo <= r <= hi and lo <= col <= hi]


def immediate_tactics(board, player, opponent, bounce_enabled, missing_teeth_enabled, wrap_enabled):
    """Our winning cell, else the cell the opponent would win on, else None."""
    rules = (bounce_enabled, missing_teeth_enabled, wrap_enabled)
    move = win_checker.find_winning_move(board, player, *rules)
    if move is not None:
        return move
    return win_checker.find_winning_move(board, opponent, *rules)


def best_by_evaluation(board, moves, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
    """Move whose resulting position evaluates best for `player`; first found wins ties."""
    scratch = board.snapshot()
    best, best_score = None, None
    for row, col in moves:
        if not scratch.is_empty_at(row, col):
            continue
        with win_checker.simulate(scratch, row, col, player):
            score = heuristic.evaluate_board(scratch, player, opponent, bounce_enabled, missing_teeth_enabled, wrap_enabled)
        if best_score is None or score > best_score:
            best, best_score = (row, col), score
    return best


class RandomStrategy:
    """easy: a uniformly random empty cell."""

    label = "easy"

    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def get_move(self, board, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
        empty = board.empty_cells()
        if not empty:
            return None
        return self.rng.choice(empty)


class TacticalRandomStrategy:
    """medium: random play that sometimes notices wins, blocks and threats."""

    label = "medium"

    def __init__(self, rng=None, tactics_rate=0.5, center_rate=0.8):
        self.rng = rng or random.Random()
        self.tactics_rate = tactics_rate
        self.center_rate = center_rate

    def get_move(self, board, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
        empty = board.empty_cells()
        if not empty:
            return None
        rules = (bounce_enabled, missing_teeth_enabled, wrap_enabled)

        if self.rng.random() < self.tactics_rate:
            move = immediate_tactics(board, player, opponent, *rules)
            if move is not None:
                return move
            best = threats.strongest(threats.detect_threats(board, player, *rules) + threats.detect_blocks(board, player, opponent, *rules))
            if best is not None:
                return best.cell

        center = center_region(board)
        if center and self.rng.random() < self.center_rate:
            return self.rng.choice(center)
        adjacent = [cell for cell in move_selector.generate_candidates(board) if board.is_empty_at(*cell)]
        return self.rng.choice(adjacent or empty)


class GreedyStrategy:
    """hard: deterministic one-ply heuristic, no search."""

    label = "hard"

    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def get_move(self, board, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
        empty = board.empty_cells()
        if not empty:
            return None
        rules = (bounce_enabled, missing_teeth_enabled, wrap_enabled)

        move = opening_book.opening_move(board, player, opponent)
        if move is not None:
            return move
        move = immediate_tactics(board, player, opponent, *rules)
        if move is not None:
            return move

        # Forks: two strong lines from one mark, ours before theirs
        for side in (player, opponent):
            for row, col in move_selector.generate_candidates(board):
                if threats.count_threats(board, row, col, side, *rules) >= 2:
                    return (row, col)

        ordered = move_selector.prioritize(board, move_selector.generate_candidates(board), player, opponent, *rules)
        if ordered:
            return ordered[0]
        return best_by_evaluation(board, empty, player, opponent, *rules)


class ShallowMinimaxStrategy:
    """extrahard: tactics plus a shallow, narrow minimax over a sampled evaluation."""

    label = "extrahard"

    def __init__(self, rng=None, depth=3, candidate_limit=10, sample_limit=10):
        self.rng = rng or random.Random()
        self.depth = depth
        self.candidate_limit = candidate_limit
        self.sample_limit = sample_limit

    def get_move(self, board, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
        if board.is_full():
            return None
        rules = (bounce_enabled, missing_teeth_enabled, wrap_enabled)

        move = immediate_tactics(board, player, opponent, *rules)
        if move is not None:
            return move
        c = board.size // 2
        if board.is_empty_at(c, c):
            return (c, c)

        depth = self.depth - 1 if bounce_enabled and missing_teeth_enabled else self.depth
        return search_minimax.choose_move(
            board,
            player,
            opponent,
            max(depth, 1),
            *rules,
            root_limit=self.candidate_limit,
            candidate_limit=self.candidate_limit,
            sample_limit=self.sample_limit,
            rng=self.rng,
        )


class ImpossibleStrategy:
    """
    impossible: the full search pipeline.

    1. opening book while fewer than three stones are down;
    2. immediate win, else immediate block;
    3. forced-threat gate: make a double threat, else stop the opponent's;
    4. adaptive-depth alpha-beta minimax with exhaustive evaluation.

    Deterministic for a given position and rule set.
    """

    label = "impossible"

    def __init__(self, rng=None, candidate_limit=12, weights=None, stats=None):
        self.rng = rng or random.Random()
        self.candidate_limit = candidate_limit
        self.weights = weights
        self.stats = stats

    def get_move(self, board, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
        if board.is_full():
            return None
        rules = (bounce_enabled, missing_teeth_enabled, wrap_enabled)

        move = opening_book.opening_move(board, player, opponent)
        if move is not None:
            return move
        move = immediate_tactics(board, player, opponent, *rules)
        if move is not None:
            return move
        move = self.forced_threat_move(board, player, opponent, *rules)
        if move is not None:
            return move

        depth = search_minimax.adaptive_depth(len(board.empty_cells()), board.size, bounce_enabled, missing_teeth_enabled)
        return search_minimax.choose_move(
            board,
            player,
            opponent,
            depth,
            *rules,
            candidate_limit=self.candidate_limit,
            weights=self.weights,
            stats=self.stats,
        )

    def forced_threat_move(self, board, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
        """Our double threat, else the cell that would hand the opponent one."""
        rules = (bounce_enabled, missing_teeth_enabled, wrap_enabled)
        move = threats.find_forcing_move(board, player, *rules)
        if move is not None:
            return move
        return threats.find_forcing_move(board, opponent, *rules)
