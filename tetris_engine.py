"""
Game engine: owns all mutable state and exposes it as read-only snapshots.

The host calls `apply(intent)` for each discrete input between frames and
`tick(now_ms)` once per frame. Everything happens synchronously inside those
two calls; nothing blocks and there are no threads.

Per tick:
  1) A hard-dropped (committed) piece is locked in.
  2) An expired grace window ends; the piece goes on cooldown and the
     gravity step is taken right away.
  3) Otherwise, once the fall interval has elapsed outside a grace window,
     gravity moves the piece down one row, or locks it if it can't fall.

Locking writes the piece into the board, clears full lines, updates
progression, releases the hold slot and spawns the next piece. Overflow into
the vanish zone, or a spawn that doesn't fit, ends the game.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from tetris_board import Board
from tetris_clock import GravityClock, Progression
from tetris_config import CONFIG
from tetris_hold import HoldSlot
from tetris_lock import LockDelay, LockState
from tetris_piece import COLORS, Piece, can_fall, ghost_row, hard_drop, try_move, try_rotate
from tetris_rng import BagRandom

log = logging.getLogger(__name__)


class Intent(Enum):
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    SOFT_DROP = "soft-drop-step"
    ROTATE_CW = "rotate-clockwise"
    HARD_DROP = "hard-drop"
    HOLD = "hold"
    PAUSE = "pause-toggle"
    RESET = "reset"


MOVES = {
    Intent.MOVE_LEFT: (0, -1),
    Intent.MOVE_RIGHT: (0, 1),
    Intent.SOFT_DROP: (1, 0),
}


@dataclass(frozen=True)
class PieceView:
    kind: str
    shape: Tuple[Tuple[int, ...], ...]
    row: int  # visible coordinates: -1 is the vanish row
    col: int
    color: Tuple[int, int, int]

    def cells(self, row: Optional[int] = None) -> List[Tuple[int, int]]:
        top = self.row if row is None else row
        return [(top + y, self.col + x)
                for y, line in enumerate(self.shape)
                for x, v in enumerate(line) if v]


@dataclass(frozen=True)
class Snapshot:
    board: Tuple[Tuple[Optional[str], ...], ...]
    colors: Dict[str, Tuple[int, int, int]]
    piece: PieceView
    ghost_row: int
    held: Optional[str]
    hold_locked: bool
    preview: Tuple[str, ...]
    lines: int
    level: int
    lock_state: LockState
    game_over: bool
    paused: bool


class Engine:
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = dict(CONFIG)
        if config:
            self.config.update(config)
        self.reset()

    def reset(self):
        cfg = self.config
        self.board = Board(cfg["COLS"], cfg["ROWS"], cfg["HIDDEN_ROWS"])
        self.rng = BagRandom(cfg["RNG_SEED"])
        self.hold = HoldSlot(cfg["COLS"])
        self.progress = Progression(cfg["INITIAL_FALL_MS"], cfg["SPEED_FACTOR"], cfg["LINES_PER_LEVEL"])
        self.lock = LockDelay(cfg["LOCK_DELAY_MAX_MOVES"])
        self.clock = GravityClock()
        self.paused = False
        self.game_over = False
        self._now = 0.0
        self._spawn(Piece.spawn(self.rng.next_piece(), cfg["COLS"]))
        log.info("game reset")

    # ---------- Intents ----------
    def apply(self, intent: Intent):
        if intent is Intent.RESET:
            self.reset()
            return
        if intent is Intent.PAUSE:
            if not self.game_over:
                self.paused = not self.paused
            return
        piece = self.current
        if self.paused or self.game_over or piece.committed:
            return

        if intent is Intent.HOLD:
            self._hold()
        elif intent is Intent.HARD_DROP:
            hard_drop(self.board, piece)
        else:
            grounded = not can_fall(self.board, piece)
            if intent is Intent.ROTATE_CW:
                moved = try_rotate(self.board, piece)
            else:
                moved = try_move(self.board, piece, *MOVES[intent])
            self.lock.register(piece, grounded, moved, self._now)

    def _hold(self):
        active, held = self.hold.swap(self.current, self.rng.next_piece)
        if active is not self.current:
            log.debug("hold %s, active %s", held, active.kind)
            self._spawn(active)

    # ---------- Tick ----------
    def tick(self, now: float) -> Snapshot:
        if self.clock.last_step is None:
            self.clock.start(now)
            self.lock.suspend(now - self._now)
        elif self.paused or self.game_over:
            self.clock.suspend(now - self._now)
            self.lock.suspend(now - self._now)
        self._now = now
        if self.paused or self.game_over:
            return self.snapshot()

        piece = self.current
        if piece.committed:
            self._commit(now)
            return self.snapshot()

        forced = False
        if self.lock.expired(piece, now, self.progress.fall_interval):
            self.lock.exhaust(piece)
            forced = True
        if not piece.in_grace and (forced or self.clock.elapsed(now) > self.progress.fall_interval):
            if not try_move(self.board, piece, 1, 0):
                self._commit(now)
            self.clock.mark(now)
        return self.snapshot()

    def _commit(self, now: float):
        piece = self.current
        piece.committed = True
        overflow = self.board.commit(piece.shape, piece.kind, piece.row, piece.col)
        cleared = self.board.clear_full_lines()
        log.debug("locked %s at row %d col %d, cleared %d", piece.kind, piece.row, piece.col, cleared)
        if cleared and self.progress.on_lines_cleared(cleared):
            log.info("level %d, fall interval %.1f ms", self.progress.level, self.progress.fall_interval)
        self.hold.release()
        self.clock.mark(now)
        if overflow:
            self._end("overflow")
            return
        self._spawn(Piece.spawn(self.rng.next_piece(), self.config["COLS"]))

    def _spawn(self, piece: Piece):
        self.current = piece
        self.lock.reset()
        if not self.board.can_place(piece.shape, piece.row, piece.col):
            self._end("block out")

    def _end(self, reason: str):
        self.game_over = True
        log.info("game over (%s) after %d lines", reason, self.progress.lines)

    # ---------- Read side ----------
    def snapshot(self) -> Snapshot:
        piece = self.current
        hidden = self.board.hidden_rows
        view = PieceView(piece.kind, tuple(tuple(r) for r in piece.shape),
                         piece.row - hidden, piece.col, COLORS[piece.kind])
        return Snapshot(
            board=self.board.visible(),
            colors=dict(COLORS),
            piece=view,
            ghost_row=ghost_row(self.board, piece) - hidden,
            held=self.hold.kind,
            hold_locked=self.hold.locked,
            preview=tuple(self.rng.peek(self.config["PREVIEW_COUNT"])),
            lines=self.progress.lines,
            level=self.progress.level,
            lock_state=LockDelay.state(piece),
            game_over=self.game_over,
            paused=self.paused,
        )
