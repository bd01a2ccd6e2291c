"""Gravity timer and level/speed progression"""
from typing import Optional


class GravityClock:
    """Tracks the timestamp (ms) of the last gravity step."""

    def __init__(self):
        self.last_step: Optional[float] = None

    def start(self, now: float):
        if self.last_step is None:
            self.last_step = now

    def elapsed(self, now: float) -> float:
        return 0.0 if self.last_step is None else now - self.last_step

    def mark(self, now: float):
        self.last_step = now

    def suspend(self, delta: float):
        if self.last_step is not None:
            self.last_step += delta


class Progression:
    """Lines cleared, level and fall interval.

    level = lines // lines_per_level + 1, and the fall interval is multiplied
    by `factor` once per level gained, not once per line.
    """

    def __init__(self, initial_ms: float = 400, factor: float = 0.8, lines_per_level: int = 5):
        self.factor = factor
        self.lines_per_level = lines_per_level
        self.lines = 0
        self.level = 1
        self.fall_interval = float(initial_ms)

    def level_for(self, lines: int) -> int:
        return lines // self.lines_per_level + 1

    def on_lines_cleared(self, n: int) -> bool:
        """Add n cleared lines. Returns True if the level changed."""
        self.lines += n
        level = self.level_for(self.lines)
        if level == self.level:
            return False
        for _ in range(level - self.level):
            self.fall_interval *= self.factor
        self.level = level
        return True
