"""Opening moves for the first few plies, before search has anything to work with."""

try:
    from engine import geometry
except ImportError:
    from Kalida_AI.engine import geometry


OPENING_PIECES = 3  # book applies while fewer stones than this are on the board


def central_cells(size):
    """Central cells, best first: (N//2, N//2) and its 2x2 block on even boards."""
    c = size // 2
    if size % 2:
        ring = [(c - 1, c - 1), (c - 1, c), (c - 1, c + 1), (c, c - 1), (c, c + 1), (c + 1, c - 1), (c + 1, c), (c + 1, c + 1)]
        return [(c, c)] + ring
    return [(c, c), (c - 1, c - 1), (c - 1, c), (c, c - 1)]


def _aligned(a, b):
    dr, dc = b[0] - a[0], b[1] - a[1]
    return dr == 0 or dc == 0 or abs(dr) == abs(dc)


def _line_room(board, cell, player):
    """Directions through `cell` with five cells free of the other side."""
    room = 0
    for d_row, d_col in geometry.DIRECTIONS:
        for start in range(-4, 1):
            span = [(cell[0] + (start + i) * d_row, cell[1] + (start + i) * d_col) for i in range(5)]
            if all(board.in_bounds(r, c) and board.cells[r][c] in (0, player) for r, c in span):
                room += 1
                break
    return room


def opening_move(board, player, opponent):
    """
    Book move while the board holds fewer than OPENING_PIECES stones, else None.

    An empty board takes the centre. Afterwards the free central cells (inner
    cells once those are gone) are scored on alignment with our stones, lines
    shared with the opponent and open room; the first best cell in preference
    order wins.
    """
    if board.count_pieces() >= OPENING_PIECES:
        return None
    size = board.size
    preferred = [cell for cell in central_cells(size) if board.is_empty_at(*cell)]
    inner = [
        (r, c)
        for r in range(1, size - 1)
        for c in range(1, size - 1)
        if board.is_empty_at(r, c) and (r, c) not in preferred
    ]
    choices = preferred or inner or board.empty_cells()
    if not choices:
        return None
    if board.count_pieces() == 0:
        return choices[0]

    own = [cell for cell in board.occupied_cells() if board.cells[cell[0]][cell[1]] == player]
    theirs = [cell for cell in board.occupied_cells() if board.cells[cell[0]][cell[1]] == opponent]

    best, best_score = None, None
    for rank, cell in enumerate(choices):
        score = 2 * sum(1 for o in own if _aligned(cell, o))
        score -= sum(1 for t in theirs if _aligned(cell, t))
        score += _line_room(board, cell, player)
        score -= rank * 0.1
        if best_score is None or score > best_score:
            best, best_score = cell, score
    return best
