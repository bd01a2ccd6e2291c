from tetris_lock import LockDelay, LockState
from tetris_piece import Piece


def test_airborne_piece_does_not_enter_grace():
    lock, p = LockDelay(), Piece.spawn("T")
    lock.register(p, grounded=False, moved=True, now=10)
    assert not p.in_grace
    assert lock.state(p) is LockState.FALLING


def test_grounded_intent_enters_grace():
    lock, p = LockDelay(), Piece.spawn("T")
    lock.register(p, grounded=True, moved=False, now=10)
    assert p.in_grace
    assert lock.moves == 1
    assert lock.entered_at == 10
    assert lock.state(p) is LockState.GRACE


def test_only_successful_moves_count_in_grace():
    lock, p = LockDelay(), Piece.spawn("T")
    lock.register(p, True, True, 10)
    lock.register(p, True, True, 20)
    lock.register(p, True, False, 30)
    assert lock.moves == 2
    # timer is not restarted by later actions
    assert lock.entered_at == 10


def test_expires_on_time_or_moves():
    lock, p = LockDelay(max_moves=5), Piece.spawn("T")
    lock.register(p, True, True, 0)
    assert not lock.expired(p, 399, 400)
    assert lock.expired(p, 400, 400)
    for _ in range(4):
        lock.register(p, True, True, 1)
    assert lock.moves == 5
    assert lock.expired(p, 1, 400)


def test_cooldown_blocks_second_window():
    lock, p = LockDelay(), Piece.spawn("T")
    lock.register(p, True, True, 0)
    lock.exhaust(p)
    assert not p.in_grace and p.grace_cooldown
    lock.register(p, True, True, 50)
    assert not p.in_grace
    assert lock.moves == 0


def test_committed_state():
    p = Piece.spawn("T")
    p.committed = True
    assert LockDelay.state(p) is LockState.COMMITTED


def test_suspend_shifts_window():
    lock, p = LockDelay(), Piece.spawn("T")
    lock.register(p, True, True, 100)
    lock.suspend(1000)
    assert not lock.expired(p, 1450, 400)
    assert lock.expired(p, 1500, 400)
