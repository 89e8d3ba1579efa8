from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .board import Coord
from .cells import toggle
from .codec import canonical
from .params import EXAMPLE_BOARD
from .step import next_generation
from .text import from_string, to_string

logger = logging.getLogger(__name__)


def parse_cell(text: str) -> Coord:
    """Parses "x,y" or "x y" into a coordinate."""
    sep = ',' if ',' in text else ' '
    try:
        x_s, y_s = [t for t in text.strip().split(sep) if t != '']
        return int(x_s), int(y_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Bit-parallel Game of Life')
    src = parser.add_mutually_exclusive_group()
    src.add_argument('--game', default=None, help='Game representation, e.g. 3x3/1e2')
    src.add_argument('--file', default=None, help='ASCII picture of the board (. dead, x live)')
    parser.add_argument('--steps', type=int, default=1, help='Generations to advance, one at a time')
    parser.add_argument('--toggle', type=parse_cell, action='append', default=[],
                        metavar='X,Y', help='Flip a cell before advancing (repeatable)')
    parser.add_argument('--verbose', action='store_true', help='Log every generation')
    return parser


def run(game: str, steps: int, toggles: Sequence[Coord] = ()) -> List[str]:
    """Applies toggles, then advances one generation at a time.

    Returns the representations of the starting board and every generation.
    """
    for cell in toggles:
        game = toggle(game, cell)
    history = [game]
    for gen in range(1, steps + 1):
        game = next_generation(game)
        logger.debug("generation %d: %s", gen, game)
        history.append(game)
    return history


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logger.setLevel(level)
    if args.steps < 0:
        parser.error('--steps must not be negative')

    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                game = from_string(f.read())
        except OSError as e:
            parser.error(f"cannot read {args.file}: {e}")
    elif args.game:
        game = canonical(args.game)
    else:
        game = EXAMPLE_BOARD

    history = run(game, args.steps, args.toggle)
    print('Initial board:')
    print(to_string(history[0]))
    print(history[0])
    for gen, state in enumerate(history[1:], start=1):
        print(f"\nGeneration {gen}:")
        print(to_string(state))
        print(state)


if __name__ == '__main__':
    main()
