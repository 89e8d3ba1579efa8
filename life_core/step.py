from __future__ import annotations

from typing import Callable, List, Tuple

from .board import Game, Size
from .codec import serialize, unserialize

Shift = Callable[[int], int]


def _edge_masks(size: Size) -> Tuple[int, int, int]:
    """Return (except_left_col, except_right_col, except_last_row) for a board size.

    With 3 columns and 4 rows:
        except_left_col  = 0b110_110_110_110
        except_right_col = 0b011_011_011_011
        except_last_row  = 0b000_111_111_111
    """
    cols, rows = size
    full = (1 << (cols * rows)) - 1
    # one bit per row, in column 0
    left_col = full // ((1 << cols) - 1)
    right_col = left_col << (cols - 1)
    except_last_row = (1 << (cols * (rows - 1))) - 1
    return full ^ left_col, full ^ right_col, except_last_row


def _shifts(size: Size) -> Tuple[Shift, Shift, Shift, Shift]:
    """Build the (north, east, south, west) moves for a board size.

    Each one moves every cell one step without wrapping around an edge.
    """
    cols = size[0]
    except_left_col, except_right_col, except_last_row = _edge_masks(size)

    def n(board: int) -> int:
        return board >> cols

    def e(board: int) -> int:
        return (board & except_right_col) << 1

    def s(board: int) -> int:
        return (board & except_last_row) << cols

    def w(board: int) -> int:
        return (board & except_left_col) >> 1

    return n, e, s, w


def neighbor_boards(game: Game) -> List[int]:
    """The eight boards of neighbours, one per compass direction."""
    n, e, s, w = _shifts(game.size)
    board = game.board & game.valid_cells()
    return [
        n(w(board)), n(board), n(e(board)),
        w(board),              e(board),
        s(w(board)), s(board), s(e(board)),
    ]


def count_neighbors(neighbors: List[int]) -> Tuple[int, int, int, int]:
    """Bit-parallel saturating count of live neighbours.

    Returns (at_least_one, at_least_two, at_least_three, more_than_three).
    """
    at_least_one = 0
    at_least_two = 0
    at_least_three = 0
    more_than_three = 0
    for neighbor in neighbors:
        more_than_three |= at_least_three & neighbor
        at_least_three |= at_least_two & neighbor
        at_least_two |= at_least_one & neighbor
        at_least_one |= neighbor
    return at_least_one, at_least_two, at_least_three, more_than_three


def next_board(game: Game) -> int:
    board = game.board & game.valid_cells()
    _, at_least_two, at_least_three, more_than_three = count_neighbors(neighbor_boards(game))
    # live with 2 or 3 neighbours survives, dead with exactly 3 is born
    return (board | at_least_three) & at_least_two & ~more_than_three


def next_generation(game: str) -> str:
    """Calculate the next state of the game.

    Rules:
     * Any live cell with two or three live neighbours survives.
     * Any dead cell with three live neighbours becomes a live cell.
     * All other live cells die in the next generation. Similarly, all
       other dead cells stay dead.

    Cells beyond the edges of the board count as dead.

    >>> next_generation("3x3/1e2")
    '3x3/1a8'
    """
    g = unserialize(game)
    return serialize(g.with_board(next_board(g)))
