"""Hold slot: one stored kind, one swap per drop"""
from typing import Callable, Optional, Tuple

from tetris_piece import Piece


class HoldSlot:
    def __init__(self, cols: int = 10):
        self.cols = cols
        self.kind: Optional[str] = None
        self.locked = False

    def swap(self, piece: Piece, next_kind: Callable[[], str]) -> Tuple[Piece, Optional[str]]:
        """Return (active, held). A locked slot hands the same piece back.

        Both pieces come back in their spawn state; a swapped-in piece does not
        keep its old position or rotation.
        """
        if self.locked:
            return piece, self.kind
        if self.kind is None:
            self.kind = piece.kind
            active = Piece.spawn(next_kind(), self.cols)
        else:
            self.kind, swapped = piece.kind, self.kind
            active = Piece.spawn(swapped, self.cols)
        self.locked = True
        return active, self.kind

    def release(self):
        self.locked = False
