"""Keyboard -> engine intents, with DAS/ARR for held keys"""
from typing import List

import pygame

from tetris_config import CONFIG
from tetris_engine import Intent

# One intent per KEYDOWN; rotate therefore never auto-repeats.
KEYMAP = {
    pygame.K_UP: Intent.ROTATE_CW,
    pygame.K_SPACE: Intent.HARD_DROP,
    pygame.K_c: Intent.HOLD,
    pygame.K_LSHIFT: Intent.HOLD,
    pygame.K_RSHIFT: Intent.HOLD,
    pygame.K_p: Intent.PAUSE,
    pygame.K_ESCAPE: Intent.PAUSE,
    pygame.K_r: Intent.RESET,
}


class ShiftRepeat:
    """
    Auto-repeat for a pair of opposing keys (or one key with `neg` False).

    Pressing moves once, then after `das` ms repeats every `arr` ms
    (0 => every frame). Releasing or switching direction resets the timers.
    """
    def __init__(self, das: float, arr: float):
        self.das = das
        self.arr = arr
        self.dir = 0
        self.held_ms = 0.0
        self.last = 0.0
        self.initial = False

    def update(self, dt: float, neg: bool, pos: bool) -> int:
        nd = (-1 if neg else 0) + (1 if pos else 0)
        if nd != self.dir:
            self.dir = nd; self.held_ms = 0.0; self.last = 0.0; self.initial = False
        if self.dir == 0:
            return 0
        self.held_ms += dt
        if not self.initial:
            self.initial = True
            return self.dir
        if self.held_ms < self.das:
            return 0
        if self.arr == 0:
            return self.dir
        self.last += dt
        if self.last >= self.arr:
            self.last = 0.0
            return self.dir
        return 0


class InputMapper:
    def __init__(self):
        self.shift = ShiftRepeat(CONFIG["DAS_MS"], CONFIG["ARR_MS"])
        self.soft = ShiftRepeat(0, CONFIG["SOFT_DROP_MS"])

    def on_event(self, event) -> List[Intent]:
        if event.type == pygame.KEYDOWN and event.key in KEYMAP:
            return [KEYMAP[event.key]]
        return []

    def on_frame(self, dt: float, left: bool, right: bool, down: bool) -> List[Intent]:
        intents = []
        step = self.shift.update(dt, left, right)
        if step < 0:
            intents.append(Intent.MOVE_LEFT)
        elif step > 0:
            intents.append(Intent.MOVE_RIGHT)
        if self.soft.update(dt, False, down):
            intents.append(Intent.SOFT_DROP)
        return intents
