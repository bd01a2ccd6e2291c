"""Piece model, shapes, rotation and the active-piece moves"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

Shape = List[List[int]]

SHAPES: Dict[str, Shape] = {
    "I": [[0,0,0,0],
          [1,1,1,1],
          [0,0,0,0],
          [0,0,0,0]],
    "J": [[1,0,0],
          [1,1,1],
          [0,0,0]],
    "L": [[0,0,1],
          [1,1,1],
          [0,0,0]],
    "O": [[1,1],
          [1,1]],
    "S": [[0,1,1],
          [1,1,0],
          [0,0,0]],
    "T": [[0,1,0],
          [1,1,1],
          [0,0,0]],
    "Z": [[1,1,0],
          [0,1,1],
          [0,0,0]],
}

# Colors per tetromino type
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102, 224, 255),
    "J": (106, 119, 255),
    "L": (255, 158,  94),
    "O": (255, 224, 102),
    "S": ( 94, 224, 142),
    "T": (200, 119, 255),
    "Z": (255, 102, 119),
}

KINDS = list(SHAPES)


def rotate_cw(mat: Shape) -> Shape:
    return [list(row) for row in zip(*mat[::-1])]


def spawn_col(kind: str, cols: int) -> int:
    """Center-left column for the kind's bounding box."""
    return (cols - len(SHAPES[kind][0])) // 2


@dataclass
class Piece:
    kind: str
    shape: Shape
    row: int
    col: int
    committed: bool = False     # hard-dropped, waiting for the next tick to lock
    in_grace: bool = False      # inside a lock-delay grace window
    grace_cooldown: bool = False  # grace already used up for this piece

    @staticmethod
    def spawn(kind: str, cols: int = 10) -> "Piece":
        if kind not in SHAPES:
            raise ValueError(f"unknown piece kind {kind!r}")
        return Piece(kind, [r[:] for r in SHAPES[kind]], 0, spawn_col(kind, cols))

    def cells(self) -> List[Tuple[int, int]]:
        """(row, col) board cells covered by the piece."""
        return [(self.row + y, self.col + x)
                for y, line in enumerate(self.shape)
                for x, v in enumerate(line) if v]


# Controller moves. `board` is anything with a can_place(shape, row, col).

def try_move(board, piece: Piece, d_row: int, d_col: int) -> bool:
    if not board.can_place(piece.shape, piece.row + d_row, piece.col + d_col):
        return False
    piece.row += d_row
    piece.col += d_col
    return True


def try_rotate(board, piece: Piece) -> bool:
    """Rotate clockwise in place; no wall kicks."""
    turned = rotate_cw(piece.shape)
    if not board.can_place(turned, piece.row, piece.col):
        return False
    piece.shape = turned
    return True


def can_fall(board, piece: Piece) -> bool:
    return board.can_place(piece.shape, piece.row + 1, piece.col)


def ghost_row(board, piece: Piece) -> int:
    """Return the row where the piece would land if hard-dropped."""
    row = piece.row
    while board.can_place(piece.shape, row + 1, piece.col):
        row += 1
    return row


def hard_drop(board, piece: Piece) -> int:
    """Drop as far as possible and mark the piece committed. Returns rows dropped."""
    landing = ghost_row(board, piece)
    dropped = landing - piece.row
    piece.row = landing
    piece.committed = True
    return dropped
