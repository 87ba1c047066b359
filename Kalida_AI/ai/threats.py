"""Threat detection: score every empty cell by what a hypothetical mark there would build."""

from dataclasses import dataclass

from . import heuristic

try:
    from engine import geometry, win_checker
except ImportError:
    from Kalida_AI.engine import geometry, win_checker


ATTACK = "attack"
BLOCK = "block"
DEVELOP = "develop"
THREAT_KINDS = (ATTACK, BLOCK, DEVELOP)

EDGE_BAND = 2  # rows/cols from an edge where a bounce can pay off


@dataclass
class Threat:
    cell: tuple
    priority: int
    kind: str

    @property
    def row(self):
        return self.cell[0]

    @property
    def col(self):
        return self.cell[1]


def near_edge(row, col, size):
    return row < EDGE_BAND or col < EDGE_BAND or row >= size - EDGE_BAND or col >= size - EDGE_BAND


def line_priority(shape, d_row, d_col, size, missing_teeth_enabled, weights):
    """Sequence value of one line, with a disqualified five worth no more than a broken four."""
    value = heuristic.sequence_value(shape, d_row, d_col, size, missing_teeth_enabled, weights)
    if shape.count >= 5 and value != weights["win"]:
        return weights["four_broken"]
    return value


def cell_priority(board, row, col, player, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False, weights=None):
    """Priority of the `player` mark already standing on (row, col)."""
    weights = weights or heuristic.DEFAULT_WEIGHTS
    total = 0
    for d_row, d_col in geometry.DIRECTIONS:
        shape = heuristic.measure_run(board, row, col, d_row, d_col, player, wrap_enabled)
        total += line_priority(shape, d_row, d_col, board.size, missing_teeth_enabled, weights)
    if bounce_enabled and near_edge(row, col, board.size):
        for d_row, d_col in geometry.DIAGONALS:
            total += heuristic.bounce_value(board, row, col, d_row, d_col, player, weights)
    return total


def detect_threats(board, player, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False, *, weights=None):
    """
    Threats `player` could create with one mark, in row-major order (unsorted).
    Cells worth at least an open four are attacks; the rest develop.
    """
    weights = weights or heuristic.DEFAULT_WEIGHTS
    scratch = board.snapshot()
    threats = []
    for row, col in scratch.empty_cells():
        with win_checker.simulate(scratch, row, col, player):
            priority = cell_priority(scratch, row, col, player, bounce_enabled, missing_teeth_enabled, wrap_enabled, weights)
        if priority > 0:
            kind = ATTACK if priority >= weights["four_open"] else DEVELOP
            threats.append(Threat(cell=(row, col), priority=priority, kind=kind))
    return threats


def detect_blocks(board, player, opponent, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False, *, weights=None):
    """The opponent's threats, labelled as cells `player` should block."""
    return [
        Threat(cell=t.cell, priority=t.priority, kind=BLOCK)
        for t in detect_threats(board, opponent, bounce_enabled, missing_teeth_enabled, wrap_enabled, weights=weights)
    ]


def strongest(threats):
    """Highest-priority threat; the first one found wins ties."""
    best = None
    for threat in threats:
        if best is None or threat.priority > best.priority:
            best = threat
    return best


def count_threats(board, row, col, player, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False, *, weights=None):
    """Number of strong lines (open four, open three, bounce three+) a mark on (row, col) would make."""
    weights = weights or heuristic.DEFAULT_WEIGHTS
    if not board.is_empty_at(row, col):
        return 0
    scratch = board.snapshot()
    count = 0
    with win_checker.simulate(scratch, row, col, player):
        for d_row, d_col in geometry.DIRECTIONS:
            shape = heuristic.measure_run(scratch, row, col, d_row, d_col, player, wrap_enabled)
            if heuristic.is_broken(shape, d_row, d_col, scratch.size, missing_teeth_enabled):
                continue
            if (shape.count >= 4 and shape.open_ends >= 1) or (shape.count == 3 and shape.open_ends == 2):
                count += 1
        if bounce_enabled and near_edge(row, col, scratch.size):
            for d_row, d_col in geometry.DIAGONALS:
                if heuristic.bounce_value(scratch, row, col, d_row, d_col, player, weights) >= weights["bounce_three"]:
                    count += 1
    return count


def find_forcing_move(board, player, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
    """
    Cell after which `player` holds two or more immediate winning cells, so the
    other side cannot block them all. Most winning cells first, then row-major.
    """
    scratch = board.snapshot()
    best, best_count = None, 1
    for row, col in scratch.empty_cells():
        with win_checker.simulate(scratch, row, col, player):
            if win_checker.check_win(scratch, row, col, bounce_enabled, missing_teeth_enabled, wrap_enabled).is_win:
                continue
            count = len(win_checker.winning_moves(scratch, player, bounce_enabled, missing_teeth_enabled, wrap_enabled))
        if count > best_count:
            best, best_count = (row, col), count
    return best
