from tetris_piece import KINDS
from tetris_rng import BagRandom


def test_each_bag_is_a_permutation():
    rng = BagRandom(seed=7)
    draws = [rng.next_piece() for _ in range(70)]
    for i in range(0, 70, 7):
        assert sorted(draws[i:i + 7]) == sorted(KINDS)


def test_queue_stays_topped_up():
    rng = BagRandom(seed=3)
    for _ in range(50):
        rng.next_piece()
        assert len(rng.queue) >= 7


def test_empty_queue_refills_two_bags():
    rng = BagRandom(seed=3)
    rng.refill_if_needed()
    assert len(rng.queue) == 14


def test_seed_is_reproducible():
    a, b = BagRandom(seed=42), BagRandom(seed=42)
    assert [a.next_piece() for _ in range(21)] == [b.next_piece() for _ in range(21)]


def test_peek_does_not_consume():
    rng = BagRandom(seed=1)
    upcoming = rng.peek(5)
    assert len(upcoming) == 5
    assert [rng.next_piece() for _ in range(5)] == upcoming
