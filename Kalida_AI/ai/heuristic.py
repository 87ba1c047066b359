"""Static board evaluation: run/open-end sequence values plus diagonal bounce sequences."""

import random
from dataclasses import dataclass, field
from pathlib import Path

import yaml

try:
    from Board import EMPTY
    from engine import geometry, win_checker
except ImportError:
    from Kalida_AI.Board import EMPTY
    from Kalida_AI.engine import geometry, win_checker


# Default weights; can be overridden by config/weights.yaml.
DEFAULT_WEIGHTS = {
    "win": 1000,
    "five_broken": 50,       # five that the missing-teeth rule disqualifies
    "four_open": 100,        # four with at least one open end
    "four_broken": 40,
    "three_open_both": 50,
    "three_open_one": 10,
    "two_open_both": 5,
    "bounce_five": 1000,
    "bounce_four": 80,
    "bounce_three": 30,
}


def load_weights(path="config/weights.yaml"):
    """Load evaluation weights from YAML; fallback to defaults on missing file/keys."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Kalida_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_WEIGHTS)

    weights = dict(DEFAULT_WEIGHTS)
    for key, value in (data.get("weights") or {}).items():
        if key in weights:
            weights[key] = int(value)
    return weights


@dataclass
class RunShape:
    count: int
    open_ends: int
    cells: list = field(default_factory=list)
    wrapped: bool = False


def measure_run(board, row, col, d_row, d_col, player, wrap_enabled=False):
    """Contiguous `player` run through (row, col) and how many of its ends are open."""
    mode = geometry.WRAP if wrap_enabled else geometry.CLIPPED
    cells = board.cells
    visited = {(row, col)}
    run = [(row, col)]
    open_ends = 0
    wrapped = False
    for s_row, s_col in ((d_row, d_col), (-d_row, -d_col)):
        for r, c, crossed in geometry.walk(row, col, s_row, s_col, board.size, mode, visited=visited):
            value = cells[r][c]
            if value == player:
                visited.add((r, c))
                run.append((r, c))
                wrapped = wrapped or crossed
                continue
            if value == EMPTY:
                open_ends += 1
            break
    return RunShape(count=len(run), open_ends=open_ends, cells=run, wrapped=wrapped)


def is_broken(shape, d_row, d_col, size, missing_teeth_enabled):
    """A wrapped run the missing-teeth rule would not accept as a line."""
    if not (missing_teeth_enabled and shape.wrapped):
        return False
    if win_checker.is_great_diagonal(shape.cells, size):
        return False
    return win_checker.has_missing_teeth(shape.cells, d_row, d_col)


def sequence_value(shape, d_row, d_col, size, missing_teeth_enabled, weights):
    broken = is_broken(shape, d_row, d_col, size, missing_teeth_enabled)
    if shape.count >= 5:
        return weights["five_broken"] if broken else weights["win"]
    if shape.count == 4 and shape.open_ends >= 1:
        return weights["four_broken"] if broken else weights["four_open"]
    if shape.count == 3:
        if shape.open_ends == 2:
            return weights["three_open_both"]
        if shape.open_ends == 1:
            return weights["three_open_one"]
    if shape.count == 2 and shape.open_ends == 2:
        return weights["two_open_both"]
    return 0


def bounce_value(board, row, col, d_row, d_col, player, weights):
    """Value of a reflected diagonal sequence through (row, col); 0 if the line never turns."""
    line = win_checker.trace_line(board, row, col, d_row, d_col, player, geometry.BOUNCE)
    length = len(line.cells)
    if not any(0 < p < length - 1 for p in line.pivots):
        return 0
    if length >= 5:
        return weights["bounce_five"]
    if length == 4:
        return weights["bounce_four"]
    if length == 3:
        return weights["bounce_three"]
    return 0


def evaluate_board(
    board,
    ai_player,
    opponent,
    bounce_enabled=False,
    missing_teeth_enabled=False,
    wrap_enabled=False,
    *,
    weights=None,
    sample_limit=None,
    rng=None,
):
    """
    Heuristic score of the position; positive favours `ai_player`.

    Every occupied cell contributes its four sequence values (and bounce
    sequences on the diagonals when bounce is on). With `sample_limit`, only a
    random subset of occupied cells is scored: a cheaper approximation meant
    for the weaker search tier.
    """
    weights = weights or DEFAULT_WEIGHTS
    positions = board.occupied_cells()
    if sample_limit is not None and len(positions) > sample_limit:
        positions = (rng or random).sample(positions, sample_limit)

    size = board.size
    score = 0
    for row, col in positions:
        player = board.cells[row][col]
        if player == ai_player:
            sign = 1
        elif player == opponent:
            sign = -1
        else:
            continue
        for d_row, d_col in geometry.DIRECTIONS:
            shape = measure_run(board, row, col, d_row, d_col, player, wrap_enabled)
            score += sign * sequence_value(shape, d_row, d_col, size, missing_teeth_enabled, weights)
        if bounce_enabled:
            for d_row, d_col in geometry.DIAGONALS:
                score += sign * bounce_value(board, row, col, d_row, d_col, player, weights)
    return score
