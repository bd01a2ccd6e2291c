from tetris_board import Board
from tetris_piece import SHAPES

O = SHAPES["O"]
I = SHAPES["I"]


def test_dimensions_include_vanish_row():
    board = Board(10, 20, 1)
    assert board.rows == 21
    assert len(board.cells) == 21
    assert len(board.visible()) == 20


def test_can_place_rejects_out_of_bounds():
    board = Board()
    assert board.can_place(O, 0, 0)
    assert board.can_place(O, 0, 8)
    assert not board.can_place(O, 0, -1)
    assert not board.can_place(O, 0, 9)
    assert board.can_place(O, 19, 0)
    assert not board.can_place(O, 20, 0)


def test_can_place_ignores_empty_shape_cells():
    board = Board()
    # only the second row of the I matrix is filled
    assert board.can_place(I, 19, 0)
    assert not board.can_place(I, 20, 0)
    assert board.can_place(I, 0, 3)
    board.cells[0][3] = "Z"
    assert board.can_place(I, 0, 3)


def test_can_place_rejects_occupied():
    board = Board()
    board.cells[20][4] = "T"
    assert not board.can_place(O, 19, 4)
    assert not board.can_place(O, 19, 3)
    assert board.can_place(O, 19, 5)
    assert board.is_occupied(20, 4)
    assert not board.is_occupied(20, 5)


def test_can_place_above_top_is_free():
    board = Board()
    assert board.can_place(O, -1, 0)


def test_commit_writes_kind():
    board = Board()
    assert board.commit(O, "O", 19, 4) is False
    assert board.cells[19][4:6] == ["O", "O"]
    assert board.cells[20][4:6] == ["O", "O"]
    assert sum(1 for row in board.cells for v in row if v) == 4


def test_commit_into_vanish_row_overflows():
    board = Board()
    assert board.commit(O, "O", 0, 4) is True
    assert board.cells[0][4] == "O"
    assert board.commit(O, "O", 1, 0) is False


def test_clear_full_lines():
    board = Board()
    board.cells[20] = ["Z"] * 10
    board.cells[18] = ["S"] * 10
    board.cells[19][0] = "T"
    board.cells[17][9] = "L"

    assert board.clear_full_lines() == 2
    assert len(board.cells) == 21
    assert board.cells[20] == ["T"] + [None] * 9
    assert board.cells[19] == [None] * 9 + ["L"]
    assert board.cells[0] == [None] * 10
    assert board.cells[1] == [None] * 10
    assert all(not all(row) for row in board.cells)


def test_clear_nothing():
    board = Board()
    board.cells[20] = ["Z"] * 9 + [None]
    assert board.clear_full_lines() == 0
    assert board.cells[20][0] == "Z"


def test_clear_includes_vanish_row():
    board = Board()
    board.cells[0] = ["I"] * 10
    assert board.clear_full_lines() == 1
    assert board.cells[0] == [None] * 10
