"""The twelve pieces of the Tetris cube, in solver order."""

from .types import Color, Piece

TETRIS_CUBE: tuple[Piece, ...] = (
    Piece("B1", Color.BLUE, ((0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0), (0, 2, 0), (2, 0, 1))),
    Piece("B2", Color.BLUE, ((0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0), (0, 2, 0), (1, 0, 1))),
    Piece("B3", Color.BLUE, ((0, 0, 0), (1, 0, 0), (2, 0, 0), (2, 1, 0), (3, 1, 0))),
    Piece("B4", Color.BLUE, ((1, 0, 0), (2, 0, 0), (2, 0, 1), (1, 1, 0), (0, 1, 0))),
    Piece("R1", Color.RED, ((0, 0, 0), (1, 0, 0), (0, 0, 1), (1, 1, 0), (2, 1, 0), (1, 2, 0))),
    Piece("R2", Color.RED, ((0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0), (0, 2, 0))),
    Piece("R3", Color.RED, ((0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0), (1, 1, 0))),
    Piece("R4", Color.RED, ((0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0), (0, 0, 1))),
    Piece("Y1", Color.YELLOW, ((0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 0, 1), (0, 1, 1))),
    Piece("Y2", Color.YELLOW, ((0, 0, 0), (1, 0, 0), (2, 0, 0), (1, 1, 0), (1, 1, 1))),
    Piece("Y3", Color.YELLOW, ((0, 0, 0), (1, 0, 0), (1, 0, 1), (1, 1, 1), (2, 1, 1))),
    Piece("Y4", Color.YELLOW, ((0, 0, 1), (1, 0, 1), (2, 0, 1), (1, 0, 2), (1, 1, 1), (1, 1, 0))),
)
