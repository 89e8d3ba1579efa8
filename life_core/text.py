from __future__ import annotations

import re
from typing import List

from .board import Game, clamp
from .codec import serialize, unserialize

_NOT_CELL_RE = re.compile(r'[^.x\n]+', re.IGNORECASE)


def to_string(game: str) -> str:
    """Human-readable picture of the board.

    ``to_string("3x3/1e2")`` gives ``". x . \\n. . x \\nx x x"``: cells are
    separated by a space, and every row but the last keeps its trailing
    space before the line break.
    """
    g = unserialize(game)
    cols = g.cols
    lines: List[str] = []
    for y in range(g.rows):
        row = ['x' if g.is_set(g.index(x, y)) else '.' for x in range(cols)]
        lines.append(' '.join(row))
    return ' \n'.join(lines)


def from_string(text: str) -> str:
    """Builds a representation from an ASCII picture of the board.

    Only ``.`` (dead), ``x`` (live) and line breaks are significant, so
    pictures may carry row/column labels and ``[ ]`` markers:

        0 . . . x
        1 .[x]. .
          0 1 2 3
    """
    collapsed = _NOT_CELL_RE.sub('', text).strip()
    oneline = collapsed.replace('\n', '')
    rows = len(collapsed) - len(oneline) + 1
    cols = clamp(len(oneline) // rows, lo=1)
    game = Game(size=(cols, rows), board=0)
    board = 0
    # ragged pictures keep only the first cols * rows cells
    for i, chr_ in enumerate(oneline[:game.length]):
        if chr_ != '.':
            board |= 1 << i
    return serialize(game.with_board(board))
