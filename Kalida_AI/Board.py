"""Board state container for the Kalida grid (default 6x6)."""

EMPTY = 0
X = 1
O = -1
SYMBOLS = {X: "X", O: "O", EMPTY: "."}
DEFAULT_SIZE = 6


def opponent_of(player):
    return -player


class Board:
    def __init__(self, size=DEFAULT_SIZE):
        # Store cells as 1 (X), 0 (empty), -1 (O); indexed cells[row][col]
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    @classmethod
    def from_rows(cls, rows):
        """Build a board from strings such as "XX.O..", one per row."""
        lookup = {symbol: value for value, symbol in SYMBOLS.items()}
        board = cls(size=len(rows))
        for row, text in enumerate(rows):
            if len(text) != board.size:
                raise ValueError(f"row {row} has {len(text)} cells, expected {board.size}")
            for col, symbol in enumerate(text):
                value = lookup[symbol.upper()]
                if value != EMPTY:
                    board._push_stone(row, col, value)
        return board

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        """Cell value at (row, col), or None when out of range."""
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def is_empty_at(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def place(self, row, col, player):
        """Place a mark; return False if out of range, occupied or not a player."""
        if player not in (X, O):
            return False
        if not self.is_empty_at(row, col):
            return False
        self._push_stone(row, col, player)
        return True

    def _push_stone(self, row, col, player):
        self.cells[row][col] = player
        self.move_count += 1
        self.history.append((row, col))

    def _pop_stone(self, row, col):
        self.cells[row][col] = EMPTY
        self.move_count -= 1
        if self.history and self.history[-1] == (row, col):
            self.history.pop()
        else:
            self.history.remove((row, col))

    def empty_cells(self):
        """Empty cells in row-major order."""
        return [(r, c) for r in range(self.size) for c in range(self.size) if self.cells[r][c] == EMPTY]

    def occupied_cells(self):
        return [(r, c) for r in range(self.size) for c in range(self.size) if self.cells[r][c] != EMPTY]

    def count_pieces(self, player=None):
        if player is None:
            return sum(1 for row in self.cells for v in row if v != EMPTY)
        return sum(1 for row in self.cells for v in row if v == player)

    def is_full(self):
        return all(v != EMPTY for row in self.cells for v in row)

    def snapshot(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        new_board.history = self.history[:]
        return new_board

    def reset(self):
        self.cells = [[EMPTY] * self.size for _ in range(self.size)]
        self.move_count = 0
        self.history = []

    def render(self):
        header = "   " + " ".join(str(c) for c in range(self.size))
        lines = [header]
        for r, row in enumerate(self.cells):
            lines.append(f"{r:>2} " + " ".join(SYMBOLS[v] for v in row))
        return "\n".join(lines)
