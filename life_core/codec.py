from __future__ import annotations

import re

from .board import Game, clamp

# "3x3/1e2"
#  | |  state of the game (base 16 integer, bit 0 = top-left cell)
#  | number of rows
#  number of columns
_REPR_RE = re.compile(r'(\d+)x(\d+)/([0-9a-f]+)', re.IGNORECASE)


def serialize(game: Game) -> str:
    """Generates the storable representation of a game, e.g. ``"3x3/1e2"``."""
    cols, rows = game.size
    return f"{cols}x{rows}/{game.board:x}"


def unserialize(text: str) -> Game:
    """Parses a representation back into a Game.

    Malformed input never raises: when the pattern cannot be found the
    result is the single dead cell game ``1x1/0``. Zero dimensions are
    raised to one so every decoded game has at least one cell.
    """
    m = _REPR_RE.search(text) if isinstance(text, str) else None
    if m is None:
        return Game(size=(1, 1), board=0)
    cols = clamp(int(m.group(1), 10), lo=1)
    rows = clamp(int(m.group(2), 10), lo=1)
    return Game(size=(cols, rows), board=int(m.group(3), 16))


def canonical(text: str) -> str:
    """Lowercase, prefix-free form of a representation."""
    return serialize(unserialize(text))
