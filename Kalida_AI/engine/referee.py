"""Move validation, time control, and the knight-move opening rule."""

import time

KNIGHT_OFFSETS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)
# X's second stone is the third move of the game
KNIGHT_MOVE_INDEX = 2


def knight_moves(board, origin):
    """Empty cells a chess knight's move away from `origin`, row-major."""
    row, col = origin
    cells = [(row + dr, col + dc) for dr, dc in KNIGHT_OFFSETS]
    return sorted(cell for cell in cells if board.is_empty_at(*cell))


def required_moves(board, knight_move_enabled):
    """
    Cells the side to move is restricted to, or None when unrestricted.
    With the knight rule on, X's first response must be a knight's move from X's
    opening stone; when every such cell is taken the rule lapses.
    """
    if not knight_move_enabled or board.move_count != KNIGHT_MOVE_INDEX or not board.history:
        return None
    moves = knight_moves(board, board.history[0])
    return moves or None


def check_move(move, board, deadline=None, legal_moves=None):
    """
    Validate a move against time, bounds, occupancy and any restriction set.
    Raises ValueError/TimeoutError on invalid moves.
    """
    if deadline is not None and time.time() > deadline:
        raise TimeoutError("Move exceeded allotted time")

    if move is None:
        raise ValueError("No move returned")
    row, col = move
    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_empty_at(row, col):
        raise ValueError("Cell already occupied")
    if legal_moves is not None and (row, col) not in legal_moves:
        raise ValueError("Knight move required from the opening stone")

    return True
