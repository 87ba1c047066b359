"""Board placement validity, snapshots, and apply/undo bookkeeping."""

from Kalida_AI.Board import Board, EMPTY, O, X


def test_place_rejects_occupied_out_of_range_and_bad_player():
    b = Board()
    assert b.place(2, 3, X) is True
    assert b.place(2, 3, O) is False
    assert b.place(6, 0, X) is False
    assert b.place(-1, 0, X) is False
    assert b.place(0, 0, 7) is False
    assert b.move_count == 1
    assert b.history == [(2, 3)]


def test_snapshot_is_independent():
    b = Board()
    b.place(0, 0, X)
    copy = b.snapshot()
    copy.place(1, 1, O)
    assert b.cells[1][1] == EMPTY
    assert b.move_count == 1
    assert copy.move_count == 2


def test_push_pop_restores_state():
    b = Board.from_rows([
        "X.....",
        "......",
        "......",
        "......",
        "......",
        ".....O",
    ])
    before = [row[:] for row in b.cells]
    b._push_stone(3, 3, X)
    assert b.cells[3][3] == X
    b._pop_stone(3, 3)
    assert b.cells == before
    assert b.move_count == 2
    assert b.history == [(0, 0), (5, 5)]


def test_empty_cells_row_major_and_full_detection():
    b = Board(size=2)
    assert b.empty_cells() == [(0, 0), (0, 1), (1, 0), (1, 1)]
    for row, col in [(0, 0), (0, 1), (1, 0), (1, 1)]:
        b.place(row, col, X)
    assert b.is_full()
    assert b.empty_cells() == []
    b.reset()
    assert b.count_pieces() == 0
    assert b.move_count == 0


def test_render_uses_symbols():
    b = Board(size=3)
    b.place(0, 1, X)
    b.place(2, 2, O)
    lines = b.render().splitlines()
    assert lines[1].endswith(". X .")
    assert lines[3].endswith(". . O")
