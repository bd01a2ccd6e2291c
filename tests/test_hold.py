from tetris_hold import HoldSlot
from tetris_piece import Piece, SHAPES


def test_first_hold_takes_from_queue():
    slot = HoldSlot()
    queue = iter(["S", "Z"])
    piece = Piece.spawn("T")
    active, held = slot.swap(piece, lambda: next(queue))
    assert held == "T"
    assert active.kind == "S"
    assert slot.locked


def test_hold_again_before_commit_is_noop():
    slot = HoldSlot()
    active, _ = slot.swap(Piece.spawn("T"), lambda: "S")
    again, held = slot.swap(active, lambda: "Z")
    assert again is active
    assert held == "T"


def test_swap_resets_spawn_state():
    slot = HoldSlot()
    active, _ = slot.swap(Piece.spawn("T"), lambda: "L")
    slot.release()
    active.row, active.col = 12, 0
    active.shape = [[1]]

    swapped, held = slot.swap(active, lambda: "Z")
    assert held == "L"
    assert swapped.kind == "T"
    assert (swapped.row, swapped.col) == (0, 3)
    assert swapped.shape == SHAPES["T"]
    assert slot.locked
