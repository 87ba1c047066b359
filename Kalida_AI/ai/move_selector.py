"""Candidate move generation (stone-adjacent cells) and threat-based ordering."""

from . import heuristic, threats

try:
    from engine import win_checker
except ImportError:
    from Kalida_AI.engine import win_checker


NEIGHBORS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

DEFENSE_WEIGHT = 0.8  # blocking is worth a little less than building


def adjacent_count(board, row, col):
    """Number of stones in the 8-neighbourhood of (row, col)."""
    count = 0
    for dr, dc in NEIGHBORS_8:
        value = board.get(row + dr, col + dc)
        if value is not None and value != 0:
            count += 1
    return count


def generate_candidates(board):
    """
    Empty cells 8-adjacent to any stone, in row-major order.
    Every empty cell when nothing qualifies (empty board).
    """
    size = board.size
    cells = board.cells
    moves = []
    for row in range(size):
        for col in range(size):
            if cells[row][col] != 0:
                continue
            if adjacent_count(board, row, col):
                moves.append((row, col))
    return moves or board.empty_cells()


def prioritize(board, candidates, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False, *, limit=None, weights=None):
    """
    Order candidates by what a mark there builds for `player` plus what it
    takes away from `opponent`. The sort is stable, so generation order breaks ties.
    """
    weights = weights or heuristic.DEFAULT_WEIGHTS
    scratch = board.snapshot()
    scored = []
    for row, col in candidates:
        if not scratch.is_empty_at(row, col):
            continue
        with win_checker.simulate(scratch, row, col, player):
            attack = threats.cell_priority(scratch, row, col, player, bounce_enabled, missing_teeth_enabled, wrap_enabled, weights)
        with win_checker.simulate(scratch, row, col, opponent):
            defense = threats.cell_priority(scratch, row, col, opponent, bounce_enabled, missing_teeth_enabled, wrap_enabled, weights)
        score = attack + DEFENSE_WEIGHT * defense + adjacent_count(scratch, row, col)
        scored.append(((row, col), score))

    scored.sort(key=lambda item: item[1], reverse=True)
    ordered = [move for move, _ in scored]
    return ordered[:limit] if limit else ordered
