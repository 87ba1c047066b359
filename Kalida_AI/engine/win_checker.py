"""Five-in-a-row detection under plain, wrap and bounce geometry, with the missing-teeth rule."""

from contextlib import contextmanager
from dataclasses import dataclass, field

try:
    from Board import EMPTY
    from engine import geometry
except ImportError:
    from Kalida_AI.Board import EMPTY
    from Kalida_AI.engine import geometry


WIN_LENGTH = 5
REACH = WIN_LENGTH - 1


@dataclass
class WinResult:
    winner: int | None = None
    winning_cells: list = field(default_factory=list)
    bounce_index: int | None = None
    second_bounce_index: int | None = None

    @property
    def is_win(self):
        return self.winner is not None


@dataclass
class GameStatus:
    is_over: bool = False
    winner: int | None = None
    is_draw: bool = False
    winning_cells: list = field(default_factory=list)
    bounce_index: int | None = None
    second_bounce_index: int | None = None


@dataclass
class Line:
    """
    A player's contiguous marks through an origin cell along one direction.

    cells run from the backward extreme to the forward extreme; `origin` indexes
    the traced cell; `crossings` holds step indices i where cells[i] -> cells[i+1]
    went over an edge; `pivots` holds indices of the cells a bounce reflected at.
    """

    cells: list
    origin: int
    crossings: set = field(default_factory=set)
    pivots: list = field(default_factory=list)


@contextmanager
def simulate(board, row, col, player):
    board._push_stone(row, col, player)
    try:
        yield
    finally:
        board._pop_stone(row, col)


def trace_line(board, row, col, d_row, d_col, player, mode, reach=REACH):
    """Trace `player` marks through (row, col) both ways, at most `reach` steps each."""
    visited = {(row, col)}
    sides = []
    for s_row, s_col in ((-d_row, -d_col), (d_row, d_col)):
        cells, crossed = [], []
        for r, c, turned in geometry.walk(row, col, s_row, s_col, board.size, mode, max_steps=reach, visited=visited):
            if board.cells[r][c] != player:
                break
            visited.add((r, c))
            cells.append((r, c))
            crossed.append(turned)
        sides.append((cells, crossed))

    (back, back_crossed), (fwd, fwd_crossed) = sides
    k = len(back)
    crossings = set()
    pivots = []
    for j, turned in enumerate(back_crossed):
        if turned:
            # back[j] was reached from back[j-1] (the origin for j == 0)
            crossings.add(k - j - 1)
            pivots.append(k - j)
    for j, turned in enumerate(fwd_crossed):
        if turned:
            crossings.add(k + j)
            pivots.append(k + j)
    return Line(cells=list(reversed(back)) + [(row, col)] + fwd, origin=k, crossings=crossings, pivots=sorted(pivots))


def is_great_diagonal(cells, size):
    """True when every cell lies on the main (r == c) or the anti (r + c == N - 1) great diagonal."""
    if not cells:
        return False
    return all(r == c for r, c in cells) or all(r + c == size - 1 for r, c in cells)


def has_missing_teeth(cells, d_row, d_col):
    """True when some cell strictly between the extremes of `cells` is not part of the line."""
    occupied = set(cells)
    rows = [r for r, _ in cells]
    cols = [c for _, c in cells]
    min_row, max_row = min(rows), max(rows)
    min_col, max_col = min(cols), max(cols)

    if d_row == 0:
        row = cells[0][0]
        return any((row, c) not in occupied for c in range(min_col, max_col + 1))
    if d_col == 0:
        col = cells[0][1]
        return any((r, col) not in occupied for r in range(min_row, max_row + 1))
    if d_row == d_col:
        return any((min_row + i, min_col + i) not in occupied for i in range(max_row - min_row + 1))
    return any((min_row + i, max_col - i) not in occupied for i in range(max_row - min_row + 1))


def _window_result(player, line, start, mode, d_row, d_col, size, missing_teeth_enabled):
    """WinResult for the 5-cell window at `start`, or None if the window does not count."""
    window = line.cells[start:start + WIN_LENGTH]
    if mode == geometry.CLIPPED:
        return WinResult(winner=player, winning_cells=window)

    steps = range(start, start + WIN_LENGTH - 1)
    if mode == geometry.WRAP:
        if not any(s in line.crossings for s in steps):
            return None
        if missing_teeth_enabled and not is_great_diagonal(window, size) and has_missing_teeth(window, d_row, d_col):
            return None
        return WinResult(winner=player, winning_cells=window)

    # Bounce windows must turn strictly inside; they are always physically contiguous
    turns = [p - start for p in line.pivots if start < p < start + WIN_LENGTH - 1]
    if not turns:
        return None
    return WinResult(
        winner=player,
        winning_cells=window,
        bounce_index=turns[0],
        second_bounce_index=turns[1] if len(turns) > 1 else None,
    )


def _check_line(board, row, col, d_row, d_col, player, mode, missing_teeth_enabled):
    line = trace_line(board, row, col, d_row, d_col, player, mode)
    if len(line.cells) < WIN_LENGTH:
        return None
    first = max(0, line.origin - REACH)
    last = min(line.origin, len(line.cells) - WIN_LENGTH)
    for start in range(first, last + 1):
        result = _window_result(player, line, start, mode, d_row, d_col, board.size, missing_teeth_enabled)
        if result is not None:
            return result
    return None


def check_win(board, row, col, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
    """
    Does the mark on (row, col) complete five in a row?

    Each direction is tried plain first, then under its extended geometry
    (bounce for diagonals when enabled, otherwise wrap when enabled).
    An empty cell returns an empty WinResult.
    """
    player = board.get(row, col)
    if player is None or player == EMPTY:
        return WinResult()

    for d_row, d_col in geometry.DIRECTIONS:
        result = _check_line(board, row, col, d_row, d_col, player, geometry.CLIPPED, missing_teeth_enabled)
        if result is not None:
            return result
        mode = geometry.line_mode(d_row, d_col, bounce_enabled, wrap_enabled)
        if mode is None:
            continue
        result = _check_line(board, row, col, d_row, d_col, player, mode, missing_teeth_enabled)
        if result is not None:
            return result
    return WinResult()


def check_game_status(board, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
    """Scan every occupied cell for a win; a full board without one is a draw."""
    for row, col in board.occupied_cells():
        result = check_win(board, row, col, bounce_enabled, missing_teeth_enabled, wrap_enabled)
        if result.is_win:
            return GameStatus(
                is_over=True,
                winner=result.winner,
                winning_cells=result.winning_cells,
                bounce_index=result.bounce_index,
                second_bounce_index=result.second_bounce_index,
            )
    if board.is_full():
        return GameStatus(is_over=True, is_draw=True)
    return GameStatus()


def winning_moves(board, player, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False, *, first_only=False):
    """Empty cells (row-major) where `player` would win at once. Runs on a scratch copy."""
    scratch = board.snapshot()
    found = []
    for row, col in scratch.empty_cells():
        with simulate(scratch, row, col, player):
            won = check_win(scratch, row, col, bounce_enabled, missing_teeth_enabled, wrap_enabled).is_win
        if won:
            found.append((row, col))
            if first_only:
                break
    return found


def find_winning_move(board, player, bounce_enabled=False, missing_teeth_enabled=False, wrap_enabled=False):
    """First empty cell (row-major) completing a win for `player`, or None."""
    found = winning_moves(board, player, bounce_enabled, missing_teeth_enabled, wrap_enabled, first_only=True)
    return found[0] if found else None
