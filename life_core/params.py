from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .board import Size
from .text import from_string

# Shapes of the route parameters, shared with the URL converters
SIZE_PATTERN = r"\d+[xX]\d+"
STATE_PATTERN = r"[0-9a-fA-F]+"
RENDER_PATTERN = r"[cCsS][sS][rR]"

SIZE_RE = re.compile(r"(\d+)x(\d+)", re.IGNORECASE)

# Landing page board
EXAMPLE_BOARD = from_string("""
    . . . . . . . . . . . . .
    . . . . . . . . . . . . .
    . . . . . . . . . . . . .
    . . . . . x x x . . . . .
    . . . . . x . x . . . . .
    . . . . . x . x . . . . .
    . . . . . . . . . . . . .
    . . . . . x . x . . . . .
    . . . . . x . x . . . . .
    . . . . . x x x . . . . .
    . . . . . . . . . . . . .
    . . . . . . . . . . . . .
    . . . . . . . . . . . . .
""")


@dataclass(frozen=True)
class PageData:
    """What a board page needs: its size, the game and the render mode."""
    size: Size
    game: str
    prefer_ssr: bool

    def to_json(self) -> Dict[str, Any]:
        return {
            "size": [int(self.size[0]), int(self.size[1])],
            "game": self.game,
            "preferSSR": bool(self.prefer_ssr),
        }


def parse_size(text: Optional[str]) -> Optional[Size]:
    m = SIZE_RE.search(text or '')
    if m is None:
        return None
    return int(m.group(1), 10), int(m.group(2), 10)


def parse_state(text: Optional[str]) -> str:
    return text.lower() if text else '0'


def parse_render_type(text: Optional[str]) -> str:
    return text.lower() if text else 'csr'


def load_page(size: str, state: Optional[str] = None, render: Optional[str] = None) -> Optional[PageData]:
    """Turns route parameters into page data; None when the size is unreadable."""
    parsed = parse_size(size)
    if parsed is None:
        return None
    cols, rows = parsed
    return PageData(
        size=(cols, rows),
        game=f"{cols}x{rows}/{parse_state(state)}",
        prefer_ssr=parse_render_type(render) == 'ssr',
    )
