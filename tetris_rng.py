"""7-bag randomizer module"""
import random
from collections import deque
from typing import List, Optional

from tetris_piece import KINDS


class BagRandom:
    """
    Bag randomizer: every bag is one shuffled copy of all 7 kinds, so a kind
    never repeats inside a bag and droughts are at most 12 pieces long.

    The queue is kept longer than one bag so the next pieces can be previewed.
    An empty queue is filled with two bags, and another bag is appended
    whenever 7 or fewer remain.
    """

    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)
        self.queue: deque = deque()

    def _bag(self) -> List[str]:
        bag = list(self.PIECES)
        self._random.shuffle(bag)
        return bag

    def refill_if_needed(self):
        if not self.queue:
            self.queue.extend(self._bag())
            self.queue.extend(self._bag())
        if len(self.queue) <= len(self.PIECES):
            self.queue.extend(self._bag())

    def next_piece(self) -> str:
        self.refill_if_needed()
        if not self.queue:
            raise RuntimeError("piece queue empty after refill")
        return self.queue.popleft()

    def peek(self, n: int) -> List[str]:
        """Next n kinds, without consuming them."""
        self.refill_if_needed()
        return list(self.queue)[:n]
