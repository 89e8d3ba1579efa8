from __future__ import annotations

# Facade module that re-exports the bitlife core.
# Used by the Flask app and the tests; single-responsibility modules live
# under life_core/*.

from life_core.board import Coord, Game, Size, clamp  # noqa: F401
from life_core.codec import canonical, serialize, unserialize  # noqa: F401
from life_core.cells import Cell, get, iter_cells, toggle  # noqa: F401
from life_core.step import (  # noqa: F401
    count_neighbors,
    neighbor_boards,
    next_board,
    next_generation,
)
from life_core.text import from_string, to_string  # noqa: F401
from life_core.params import (  # noqa: F401
    EXAMPLE_BOARD,
    RENDER_PATTERN,
    SIZE_PATTERN,
    STATE_PATTERN,
    PageData,
    load_page,
    parse_render_type,
    parse_size,
    parse_state,
)


def main() -> None:
    # CLI driver delegated to life_core.cli
    from life_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
