"""Lock delay: grace window for a grounded piece"""
from enum import Enum

from tetris_piece import Piece


class LockState(Enum):
    FALLING = "falling"
    GRACE = "grace"
    COMMITTED = "committed"


class LockDelay:
    """
    A grounded piece gets one grace window when the player acts on it. The
    window lasts one fall interval or max_moves actions, whichever comes
    first; afterwards the piece is on cooldown and locks on the next failed
    gravity step. The per-piece flags live on the Piece, the counters here.
    """

    def __init__(self, max_moves: int = 5):
        self.max_moves = max_moves
        self.moves = 0
        self.entered_at = 0.0

    def reset(self):
        self.moves = 0
        self.entered_at = 0.0

    @staticmethod
    def state(piece: Piece) -> LockState:
        if piece.committed:
            return LockState.COMMITTED
        if piece.in_grace:
            return LockState.GRACE
        return LockState.FALLING

    def register(self, piece: Piece, grounded: bool, moved: bool, now: float):
        """Account for one move/rotate intent. `grounded` is sampled before the action."""
        if piece.in_grace:
            if moved:
                self.moves += 1
        elif grounded and not piece.grace_cooldown:
            piece.in_grace = True
            self.entered_at = now
            self.moves = 1

    def expired(self, piece: Piece, now: float, interval: float) -> bool:
        if not piece.in_grace:
            return False
        return now - self.entered_at >= interval or self.moves >= self.max_moves

    def exhaust(self, piece: Piece):
        piece.in_grace = False
        piece.grace_cooldown = True
        self.moves = 0

    def suspend(self, delta: float):
        # pause: push the window start forward so paused time doesn't count
        self.entered_at += delta
