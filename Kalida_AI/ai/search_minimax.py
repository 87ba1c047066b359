"""Depth-bounded minimax with alpha-beta pruning, forced-reply pruning and a call-scoped cache."""

import time

from . import heuristic
from . import move_selector
from . import transposition

try:
    from engine import win_checker
except ImportError:
    from Kalida_AI.engine import win_checker


INF = 10 ** 9
WIN_SCORE = 1000
BASE_DEPTH = 3
# (empty cells below, depth)
DEPTH_SCHEDULE = ((8, 6), (12, 5), (20, 4))
LARGE_BOARD = 8


def adaptive_depth(empty_count, board_size, bounce_enabled=False, missing_teeth_enabled=False, base_depth=BASE_DEPTH):
    """Search deeper as the board fills; back off one ply for heavy rule sets on large boards."""
    depth = base_depth
    for below, scheduled in DEPTH_SCHEDULE:
        if empty_count < below:
            depth = max(depth, scheduled)
            break
    if bounce_enabled and missing_teeth_enabled and board_size >= LARGE_BOARD:
        depth = max(base_depth, depth - 1)
    return depth


class MinimaxSearcher:
    """Encapsulates the state and logic for one minimax search."""

    def __init__(
        self,
        color,
        opponent,
        depth,
        bounce_enabled=False,
        missing_teeth_enabled=False,
        wrap_enabled=False,
        *,
        root_limit=None,
        candidate_limit=None,
        weights=None,
        sample_limit=None,
        rng=None,
        zobrist_table=None,
        stats=None,
    ):
        self.color = color
        self.opponent = opponent
        self.depth = depth
        self.rules = (bounce_enabled, missing_teeth_enabled, wrap_enabled)
        self.root_limit = root_limit
        self.candidate_limit = candidate_limit
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.sample_limit = sample_limit
        self.rng = rng
        self.zobrist_table = zobrist_table
        self.stats_list = stats

        # Per-call state
        self.cache = {}
        self.node_counter = 0
        self.start_time = None
        self.root_score = None

    def choose_move(self, board):
        """
        Best move for `color` searching `depth` plies, or None on a full board.
        Works on a snapshot; the caller's board is never touched.
        """
        self.cache = {}
        self.node_counter = 0
        self.start_time = time.time()
        self.root_score = None

        scratch = board.snapshot()
        if self.zobrist_table is None:
            self.zobrist_table = transposition.zobrist_init(scratch.size)
        root_hash = transposition.hash_board(scratch, self.zobrist_table)

        candidates = move_selector.prioritize(
            scratch,
            move_selector.generate_candidates(scratch),
            self.color,
            self.opponent,
            *self.rules,
            limit=self.root_limit,
            weights=self.weights,
        )
        if not candidates:
            return None

        best_move = None
        best_score = -INF
        alpha, beta = -INF, INF
        for move in candidates:
            score = self._score_move(scratch, move, self.color, self.depth, alpha, beta, root_hash)
            if score > best_score:
                best_score, best_move = score, move
            alpha = max(alpha, best_score)

        self.root_score = best_score
        if self.stats_list is not None:
            self._record_stats()
        return best_move

    def _score_move(self, board, move, node_color, depth, alpha, beta, current_hash):
        row, col = move
        next_hash = transposition.toggle(current_hash, self.zobrist_table, board.size, row, col, node_color)
        with win_checker.simulate(board, row, col, node_color):
            if win_checker.check_win(board, row, col, *self.rules).is_win:
                remaining = depth - 1
                return WIN_SCORE + remaining if node_color == self.color else -(WIN_SCORE + remaining)
            return self._minimax(board, -node_color, depth - 1, alpha, beta, next_hash)

    def _minimax(self, board, node_color, depth, alpha, beta, current_hash):
        self.node_counter += 1

        if depth == 0 or board.is_full():
            return heuristic.evaluate_board(
                board,
                self.color,
                self.opponent,
                *self.rules,
                weights=self.weights,
                sample_limit=self.sample_limit,
                rng=self.rng,
            )

        key = (current_hash, node_color, depth)
        cached = self.cache.get(key)
        if cached:
            cached_score, cached_flag = cached
            if cached_flag == "EXACT":
                return cached_score
            if cached_flag == "LOWER":
                alpha = max(alpha, cached_score)
            elif cached_flag == "UPPER":
                beta = min(beta, cached_score)
            if alpha >= beta:
                return cached_score

        maximizing = node_color == self.color
        candidates, win_now = self._node_candidates(board, node_color)
        if win_now:
            remaining = depth - 1
            return WIN_SCORE + remaining if maximizing else -(WIN_SCORE + remaining)

        alpha_orig, beta_orig = alpha, beta
        best_score = -INF if maximizing else INF
        for move in candidates:
            score = self._score_move(board, move, node_color, depth, alpha, beta, current_hash)
            if maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, best_score)
            if beta <= alpha:
                break

        self._store_cache(key, best_score, alpha_orig, beta_orig)
        return best_score

    def _node_candidates(self, board, node_color):
        """
        Moves worth expanding at an inner node, plus whether the side to move wins
        at once. When the other side threatens to win, only the blocks remain.
        """
        candidates = move_selector.generate_candidates(board)
        other = -node_color
        blocks = []
        for row, col in candidates:
            with win_checker.simulate(board, row, col, node_color):
                if win_checker.check_win(board, row, col, *self.rules).is_win:
                    return [(row, col)], True
            with win_checker.simulate(board, row, col, other):
                if win_checker.check_win(board, row, col, *self.rules).is_win:
                    blocks.append((row, col))
        if blocks:
            return blocks, False

        ordered = sorted(candidates, key=lambda mv: self._local_density(board, mv[0], mv[1], node_color), reverse=True)
        if self.candidate_limit:
            ordered = ordered[: self.candidate_limit]
        return ordered, False

    def _store_cache(self, key, score, alpha_orig, beta):
        flag = "EXACT"
        if score <= alpha_orig:
            flag = "UPPER"
        elif score >= beta:
            flag = "LOWER"
        self.cache[key] = (score, flag)

    def _local_density(self, board, row, col, node_color):
        score = 0
        opp = -node_color
        for dr in range(-2, 3):
            for dc in range(-2, 3):
                if dr == 0 and dc == 0:
                    continue
                value = board.get(row + dr, col + dc)
                if value is None:
                    continue
                weight = 6 if abs(dr) <= 1 and abs(dc) <= 1 else 3
                if value == node_color:
                    score += weight
                elif value == opp:
                    score += weight - 2
                else:
                    score += 1
        center = board.size // 2
        score -= abs(row - center) + abs(col - center)  # favor center
        return score

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": self.color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
            "score": self.root_score,
        })


def choose_move(
    board,
    color,
    opponent,
    depth,
    bounce_enabled=False,
    missing_teeth_enabled=False,
    wrap_enabled=False,
    *,
    root_limit=None,
    candidate_limit=None,
    weights=None,
    sample_limit=None,
    rng=None,
    zobrist_table=None,
    stats=None,
):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(
        color,
        opponent,
        depth,
        bounce_enabled,
        missing_teeth_enabled,
        wrap_enabled,
        root_limit=root_limit,
        candidate_limit=candidate_limit,
        weights=weights,
        sample_limit=sample_limit,
        rng=rng,
        zobrist_table=zobrist_table,
        stats=stats,
    )
    return searcher.choose_move(board)
