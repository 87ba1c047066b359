"""Line addressing on the square board: clipped, toroidal wrap and diagonal bounce."""

CLIPPED = "clipped"
WRAP = "wrap"
BOUNCE = "bounce"
MODES = (CLIPPED, WRAP, BOUNCE)

# (d_row, d_col), in the order lines are checked
HORIZONTAL = (0, 1)
VERTICAL = (1, 0)
MAIN_DIAGONAL = (1, 1)
ANTI_DIAGONAL = (1, -1)
DIRECTIONS = (HORIZONTAL, VERTICAL, MAIN_DIAGONAL, ANTI_DIAGONAL)
DIAGONALS = (MAIN_DIAGONAL, ANTI_DIAGONAL)

MAX_BOUNCES = 2


def is_diagonal(d_row, d_col):
    return d_row != 0 and d_col != 0


def line_mode(d_row, d_col, bounce_enabled, wrap_enabled):
    """
    Extended addressing used for a direction under the active rules, or None.
    A diagonal reflects instead of wrapping when both rules are on.
    """
    if bounce_enabled and is_diagonal(d_row, d_col):
        return BOUNCE
    if wrap_enabled:
        return WRAP
    return None


def _on_board(row, col, size):
    return 0 <= row < size and 0 <= col < size


def walk(row, col, d_row, d_col, size, mode, max_steps=4, visited=None):
    """
    Yield (row, col, crossed) for up to max_steps cells beyond (row, col).

    `crossed` is True when reaching the cell went over an edge (wrap-around or
    reflection). Cells in `visited` end the walk; the caller adds the cells it
    accepts, so a consumer that stops early leaves the set untouched.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown geometry mode: {mode}")
    if visited is None:
        visited = {(row, col)}
    bounces = 0
    r, c = row, col
    for _ in range(max_steps):
        nr, nc = r + d_row, c + d_col
        crossed = False
        if not _on_board(nr, nc, size):
            if mode == CLIPPED:
                return
            crossed = True
            if mode == WRAP:
                nr %= size
                nc %= size
            else:
                # Bounce is a no-op for orthogonal lines
                if not is_diagonal(d_row, d_col) or bounces >= MAX_BOUNCES:
                    return
                if not 0 <= nr < size and not 0 <= nc < size:
                    # A corner sends the line straight back along itself
                    return
                if not 0 <= nr < size:
                    d_row = -d_row
                else:
                    d_col = -d_col
                bounces += 1
                nr, nc = r + d_row, c + d_col
                if not _on_board(nr, nc, size):
                    return
        if (nr, nc) in visited:
            return
        yield nr, nc, crossed
        r, c = nr, nc


def step(row, col, d_row, d_col, distance, mode, size):
    """
    Cell reached `distance` units from (row, col) along (d_row, d_col), or None.
    Negative distances walk the opposite way.
    """
    if distance < 0:
        d_row, d_col, distance = -d_row, -d_col, -distance
    if distance == 0:
        return (row, col)
    if mode == WRAP:
        return ((row + distance * d_row) % size, (col + distance * d_col) % size)

    visited = {(row, col)}
    last = None
    taken = 0
    for r, c, _ in walk(row, col, d_row, d_col, size, mode, max_steps=distance, visited=visited):
        visited.add((r, c))
        last = (r, c)
        taken += 1
    return last if taken == distance else None
