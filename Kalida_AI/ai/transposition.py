"""Zobrist hashing for the search's call-scoped transposition cache."""

import random

try:
    from Board import X
except ImportError:
    from Kalida_AI.Board import X


def zobrist_init(size=6, seed=None):
    rng = random.Random(seed)
    return [[rng.getrandbits(64) for _ in range(2)] for _ in range(size * size)]


def player_index(player):
    return 0 if player == X else 1


def toggle(current_hash, table, size, row, col, player):
    """Hash after adding or removing `player`'s mark on (row, col)."""
    return current_hash ^ table[row * size + col][player_index(player)]


def hash_board(board, table):
    """Compute the Zobrist hash of a Board (1 X, -1 O)."""
    h = 0
    size = board.size
    for row in range(size):
        for col in range(size):
            v = board.cells[row][col]
            if v == 0:
                continue
            h ^= table[row * size + col][player_index(v)]
    return h
