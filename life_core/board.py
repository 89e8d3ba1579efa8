from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Size = Tuple[int, int]  # (columns, rows)
Coord = Tuple[int, int]  # (x, y), y grows downwards


def clamp(num: int, lo: float = float('-inf'), hi: float = float('inf')) -> int:
    """Restricts a number to the closed range [lo, hi]."""
    return int(max(min(num, hi), lo))


@dataclass(frozen=True)
class Game:
    """A board together with its dimensions.

    Cell (x, y) lives in bit ``y * cols + x`` of ``board``. For a 3x3 board

        . x .
        . . x
        x x x

    the board is ``0b111_100_010``: bit 0 is the top-left corner and the
    highest bit the bottom-right one.
    """
    size: Size
    board: int

    @property
    def cols(self) -> int:
        return self.size[0]

    @property
    def rows(self) -> int:
        return self.size[1]

    @property
    def length(self) -> int:
        """Number of cells on the board."""
        return self.size[0] * self.size[1]

    def index(self, x: int, y: int) -> int:
        """Calculates the linear bit index for a given column and row."""
        return y * self.size[0] + x

    def valid_cells(self) -> int:
        """Mask with one bit set for every cell of the board."""
        return (1 << self.length) - 1

    def is_set(self, index: int) -> bool:
        if index < 0:
            return False
        return bool((self.board >> index) & 1)

    def with_board(self, board: int) -> 'Game':
        return Game(self.size, board)
