from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator

from .board import Coord
from .codec import serialize, unserialize


@dataclass(frozen=True)
class Cell:
    """One record of the cell enumeration."""
    x: int
    y: int
    value: bool

    def as_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "value": self.value}


def get(game: str, cell: Coord) -> bool:
    """Gets the value of a cell: True for live, False for dead.

    Coordinates are only turned into a bit index, never checked against
    the board's dimensions. Indices past the stored bits, and negative
    ones, read as dead.
    """
    g = unserialize(game)
    x, y = cell
    return g.is_set(g.index(x, y))


def toggle(game: str, cell: Coord) -> str:
    """Flips the value of a cell and returns the new representation.

    Indices outside the board leave it unchanged.
    """
    g = unserialize(game)
    x, y = cell
    index = g.index(x, y)
    if not 0 <= index < g.length:
        return serialize(g)
    return serialize(g.with_board(g.board ^ (1 << index)))


def iter_cells(game: str) -> Iterator[Cell]:
    """Yields every cell of the board in increasing bit order.

    >>> list(iter_cells("1x1/1"))
    [Cell(x=0, y=0, value=True)]
    """
    g = unserialize(game)
    cols = g.cols
    for i in range(g.length):
        yield Cell(x=i % cols, y=i // cols, value=g.is_set(i))
