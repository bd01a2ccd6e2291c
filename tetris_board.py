"""Board: occupancy grid, placement check, commit, line sweep"""
from typing import List, Optional, Tuple

Grid = List[List[Optional[str]]]


class Board:
    """ROWS visible rows plus HIDDEN_ROWS vanish rows on top.

    Row 0 is the top of the vanish zone; all coordinates include it.
    """

    def __init__(self, cols: int = 10, rows: int = 20, hidden_rows: int = 1):
        self.cols = cols
        self.hidden_rows = hidden_rows
        self.rows = rows + hidden_rows
        self.cells: Grid = [[None] * cols for _ in range(self.rows)]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.cells[row][col] is not None

    def can_place(self, shape, row: int, col: int) -> bool:
        """False if any filled cell is off the sides, below the floor or on a block."""
        for y, line in enumerate(shape):
            for x, v in enumerate(line):
                if not v:
                    continue
                by, bx = row + y, col + x
                if bx < 0 or bx >= self.cols or by >= self.rows:
                    return False
                if by >= 0 and self.cells[by][bx]:
                    return False
        return True

    def commit(self, shape, kind: str, row: int, col: int) -> bool:
        """Write the piece into the grid. Returns True on overflow into the vanish zone."""
        overflow = False
        for y, line in enumerate(shape):
            for x, v in enumerate(line):
                if not v:
                    continue
                by = row + y
                if by < self.hidden_rows:
                    overflow = True
                if by >= 0:
                    self.cells[by][col + x] = kind
        return overflow

    def clear_full_lines(self) -> int:
        """Clear full lines (vanish rows included) and return the number cleared."""
        cleared = 0
        y = self.rows - 1
        while y >= 0:
            if all(self.cells[y]):
                del self.cells[y]
                self.cells.insert(0, [None] * self.cols)
                cleared += 1
            else:
                y -= 1
        return cleared

    def visible(self) -> Tuple[Tuple[Optional[str], ...], ...]:
        return tuple(tuple(r) for r in self.cells[self.hidden_rows:])
